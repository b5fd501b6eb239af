"""Response Bank - the companion's canned lines.

Templates within one group carry no semantic difference; they exist for
variety and are picked uniformly at random. All randomness goes through the
bank's random source so tests can seed it or force specific picks.
"""
import random
from typing import Dict, Optional, Sequence, Tuple
from models.session import Category, MoodHint

# Opening turn when the user arrives without a mood hint
OPENING_GREETINGS: Tuple[str, ...] = (
    "Hello! I'm here to support you on your wellness journey. "
    "This is a safe space to share how you're feeling. How are you doing today? 💙",
)

# Opening turn when the user arrives from a sad/stressed check-in
MOOD_TRIGGERED_OPENINGS: Dict[MoodHint, Tuple[str, ...]] = {
    MoodHint.SAD: (
        "I noticed you're feeling sad today. I'm really glad you reached out. 💙 "
        "Would you like to tell me what's on your heart?",
        "It sounds like today has been heavy. I'm here with you, and there's no rush. "
        "What's been weighing on you?",
    ),
    MoodHint.STRESSED: (
        "I see you're feeling stressed. Let's slow things down together. 🌿 "
        "What's been on your mind?",
        "Stress can make everything feel louder. You're in a calm space now. "
        "Do you want to talk about what's been going on?",
    ),
}

RESPONSES: Dict[Category, Tuple[str, ...]] = {
    Category.GREETING: (
        "Hello! I'm here to support you. How are you feeling today? 💙",
        "Welcome back! I'm glad you're here. What's on your mind?",
        "Hi there! This is a safe space to share. How can I help you today?",
    ),
    Category.HAPPY: (
        "That's wonderful to hear! 🌟 What's bringing you joy today?",
        "I'm so glad you're feeling positive! Would you like to share what's making you happy?",
        "That's beautiful! Celebrating the good moments is so important. Tell me more!",
    ),
    Category.SAD: (
        "I'm sorry you're feeling this way. It's okay to feel sad sometimes. "
        "Would you like to talk about it? 💙",
        "Thank you for sharing that with me. Your feelings are valid. "
        "What's weighing on your heart?",
        "I hear you, and I'm here for you. Sometimes just expressing our feelings helps. "
        "What's been happening?",
    ),
    Category.STRESSED: (
        "Stress can be exhausting. You're not alone in this. What's been causing it?",
        "I understand that feeling. Taking a moment to pause can help. "
        "What's been on your plate lately?",
        "It's okay to feel this way. Let's take this one step at a time. "
        "What feels heaviest right now?",
    ),
    Category.CLOSING: (
        "I'm really glad we talked today. Remember to be gentle with yourself. "
        "Come back anytime. 💙",
        "Thank you for spending this time with me. You did something kind for yourself today. 🌸",
        "Take care of yourself. I'm always here when you need a safe space to share. 🌿",
    ),
    Category.GENERAL: (
        "Thank you for sharing that with me. How does talking about it make you feel?",
        "I appreciate you opening up. What else is on your mind?",
        "That's really insightful. Would you like to explore those feelings more?",
        "I'm here to listen. What would help you feel better right now?",
    ),
}

ENCOURAGEMENTS: Tuple[str, ...] = (
    "You're doing great by taking time for yourself. That takes courage. 💪",
    "Remember, it's okay to not be okay. What matters is that you're here, working through it.",
    "Every step you take matters. I believe in you. 🌸",
)

BREATHING_SUGGESTIONS: Tuple[str, ...] = (
    "Would you like to try a calming breathing exercise? It can help settle your mind. 🌿",
    "Sometimes a few slow breaths can make space for what we're feeling. "
    "Would you like to try a short breathing exercise together?",
)

BREATHING_ACCEPTED: Tuple[str, ...] = (
    "That sounds like it might help! Deep breathing can really calm the nervous system. "
    "Head over to Calm Mode and breathe in for 4, out for 6. I'll be here when you're back. 🌊",
    "Breathing exercises are wonderful for finding peace. Calm Mode has guided exercises "
    "that might help you. Take your time. 🌿",
    "Great idea! Taking a few mindful breaths can make a real difference. "
    "Check out Calm Mode when you're ready, and tell me how it felt afterwards.",
)

BREATHING_DECLINED: Tuple[str, ...] = (
    "That's completely okay. We can just keep talking. What else is on your mind?",
    "No problem at all. The breathing exercise will be there whenever you want it. "
    "I'm still here to listen.",
)

# Severe distress always gets this exact message, never a random pick
GROUNDING_MESSAGE = (
    "It sounds like things feel like too much right now, and I'm really glad you told me. "
    "You don't have to handle all of it at once. Let's ground ourselves together: "
    "notice five things you can see around you, and feel your feet on the floor. 💙\n\n"
    "Would you like to try a slow breathing exercise with me right now?"
)

FRAGMENT_SEPARATOR = "\n\n"


def compose(*fragments: str) -> str:
    """Join a primary reply and its follow-up fragments with a blank line."""
    return FRAGMENT_SEPARATOR.join(fragments)


class ResponseBank:
    """Uniform-random template selection over the canned lines above.

    Args:
        rng: Random source with ``choice`` and ``random`` methods. Defaults to
            an unseeded ``random.Random``; pass ``random.Random(seed)`` for
            reproducible conversations.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def pick(self, templates: Sequence[str]) -> str:
        return self.rng.choice(templates)

    def draw(self) -> float:
        """Uniform draw in [0, 1) used for optional fragments."""
        return self.rng.random()

    def for_category(self, category: Category) -> str:
        return self.pick(RESPONSES[category])

    def opening(self, mood_hint: Optional[MoodHint] = None) -> str:
        templates = MOOD_TRIGGERED_OPENINGS.get(mood_hint, OPENING_GREETINGS)
        return self.pick(templates)

    def encouragement(self) -> str:
        return self.pick(ENCOURAGEMENTS)

    def breathing_suggestion(self) -> str:
        return self.pick(BREATHING_SUGGESTIONS)

    def breathing_accepted(self) -> str:
        return self.pick(BREATHING_ACCEPTED)

    def breathing_declined(self) -> str:
        return self.pick(BREATHING_DECLINED)

    def grounding(self) -> str:
        return GROUNDING_MESSAGE
