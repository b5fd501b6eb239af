"""Dialogue State Machine - decides the next stage and the reply text.

``transition`` is a pure function of (stage, category, turn_count) plus the
draws it takes from the response bank. Rules are evaluated top to bottom and
the last one is a catch-all, so every (stage, category) pair has a reply:

    1. An open breathing offer expects yes/no: acceptance starts the
       exercise, anything else is treated as a decline.
    2. Severe distress always gets the fixed grounding message and a
       breathing offer, whatever the stage or turn count.
    3. Sad/stressed get validation; from the escalation turn onward (and not
       right after an exercise) a breathing suggestion is appended.
    4-7. Closing, breathing, greeting and happy map to their templates.
    8. Everything else gets a reflection, sometimes with encouragement.
"""
from dataclasses import dataclass
from typing import Optional
import logging
from config.settings import ESCALATION_TURN_THRESHOLD, ENCOURAGEMENT_THRESHOLD
from dialogue.responses import ResponseBank, compose
from models.session import Category, Stage, MoodHint

logger = logging.getLogger(__name__)

_default_bank = None


def get_default_bank() -> ResponseBank:
    """Get or create the process-wide response bank."""
    global _default_bank
    if _default_bank is None:
        _default_bank = ResponseBank()
    return _default_bank


@dataclass(frozen=True)
class Transition:
    """Result of one dialogue step."""
    next_stage: Stage
    reply: str


def transition(stage: Stage, category: Category, turn_count: int,
               bank: Optional[ResponseBank] = None) -> Transition:
    """Compute the next stage and reply for one classified user message."""
    bank = bank or get_default_bank()

    if stage == Stage.SUGGESTED_BREATHING:
        if category == Category.ACCEPTANCE:
            return Transition(Stage.POST_BREATHING, bank.breathing_accepted())
        return Transition(Stage.LISTENING, bank.breathing_declined())

    if category == Category.SEVERE_STRESS:
        return Transition(Stage.SUGGESTED_BREATHING, bank.grounding())

    if category in (Category.SAD, Category.STRESSED):
        reply = bank.for_category(category)
        if turn_count >= ESCALATION_TURN_THRESHOLD and stage != Stage.POST_BREATHING:
            logger.debug(f"Escalating to breathing offer at turn {turn_count}")
            return Transition(Stage.SUGGESTED_BREATHING,
                              compose(reply, bank.breathing_suggestion()))
        return Transition(Stage.LISTENING, reply)

    if category == Category.CLOSING:
        return Transition(Stage.CLOSING, bank.for_category(Category.CLOSING))

    if category == Category.BREATHING:
        return Transition(Stage.POST_BREATHING, bank.breathing_accepted())

    if category == Category.GREETING:
        return Transition(stage, bank.for_category(Category.GREETING))

    if category == Category.HAPPY:
        return Transition(stage, bank.for_category(Category.HAPPY))

    # Unclassified, or a yes/no with no open offer
    reply = bank.for_category(Category.GENERAL)
    if bank.draw() > ENCOURAGEMENT_THRESHOLD:
        reply = compose(reply, bank.encouragement())
    return Transition(stage, reply)


def opening_message(mood_hint: Optional[MoodHint] = None,
                    bank: Optional[ResponseBank] = None) -> str:
    """First assistant turn: mood-triggered for sad/stressed hints, else a greeting."""
    bank = bank or get_default_bank()
    return bank.opening(MoodHint.parse(mood_hint))
