"""Emotion Classifier - keyword triage for free-text messages.

Each message gets exactly one Category. Rules are checked in order and the
first rule with a keyword appearing anywhere in the case-folded text wins,
so the order of EMOTION_KEYWORDS is significant:

    - Severe distress is checked before plain stress ("stressed but breaking down").
    - Sad/stressed are checked before greetings and farewells, which use short
      keywords ("hi", "bye") that can hide inside longer words.

Matching is plain substring search. "no" also matches "know" and "hi" also
matches "this"; that precedence is kept exactly as listed.
"""
from typing import Optional, Tuple
import logging
from models.session import Category

logger = logging.getLogger(__name__)

# Ordered triage rules: first match wins
EMOTION_KEYWORDS: Tuple[Tuple[Category, Tuple[str, ...]], ...] = (
    (Category.SEVERE_STRESS, ("can't take", "cant take", "too much", "overwhelm",
                              "breaking", "falling apart", "panic")),
    (Category.HAPPY, ("happy", "great", "amazing", "good", "wonderful", "excited", "joy")),
    (Category.SAD, ("sad", "down", "depressed", "lonely", "hurt", "crying")),
    (Category.STRESSED, ("stress", "anxious", "anxiety", "worry", "nervous", "pressure")),
    (Category.ACCEPTANCE, ("yes", "sure", "okay", "please")),
    (Category.DECLINE, ("no", "not now", "maybe later")),
    (Category.BREATHING, ("breath", "calm", "relax", "meditation")),
    (Category.CLOSING, ("bye", "thank", "better", "helped")),
    (Category.GREETING, ("hi", "hello", "hey")),
)


def _fold(text) -> str:
    if not isinstance(text, str):
        return ""
    return text.casefold()


def matched_keyword(text: str) -> Optional[Tuple[Category, str]]:
    """Return the (category, keyword) of the first rule that fires, if any."""
    folded = _fold(text)
    for category, keywords in EMOTION_KEYWORDS:
        for keyword in keywords:
            if keyword in folded:
                return category, keyword
    return None


def classify(text: str) -> Category:
    """Classify a message into exactly one Category (GENERAL when nothing matches)."""
    match = matched_keyword(text)
    if match is None:
        return Category.GENERAL
    category, keyword = match
    logger.debug(f"Classified as {category.value} (keyword: '{keyword}')")
    return category
