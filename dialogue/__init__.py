"""MindEase Dialogue Engine.

Rule-based conversation core: no language model, only keyword triage,
canned templates and a small state machine.

Components:
    classify: Map a message to exactly one Category.
    ResponseBank: Random-but-seedable template selection.
    transition: Pure (stage, category, turn_count) -> Transition step.
    opening_message: First assistant turn for a new conversation.
"""
from dialogue.classifier import classify, matched_keyword, EMOTION_KEYWORDS
from dialogue.responses import ResponseBank, compose
from dialogue.state_machine import Transition, transition, opening_message

__all__ = [
    "classify",
    "matched_keyword",
    "EMOTION_KEYWORDS",
    "ResponseBank",
    "compose",
    "Transition",
    "transition",
    "opening_message",
]
