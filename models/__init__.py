"""MindEase Data Models.

This module contains the enums and dataclasses shared by the dialogue engine
and the mood store.

Models:
    Category: Emotion/intent label produced by the classifier.
    Stage: Position of a conversation in the dialogue state machine.
    Milestone: Coarse progress marker derived from Stage.
    Role: Author of a transcript turn.
    MoodHint: Mood that deep-linked the user into chat.
    Turn: One transcript entry.
    MoodType: Mood options for a daily check-in.
    MoodEntry: A saved mood check-in.
"""
from models.session import (
    Category,
    Stage,
    Milestone,
    Role,
    MoodHint,
    Turn,
)
from models.mood import MoodType, MoodEntry

__all__ = [
    "Category",
    "Stage",
    "Milestone",
    "Role",
    "MoodHint",
    "Turn",
    "MoodType",
    "MoodEntry",
]
