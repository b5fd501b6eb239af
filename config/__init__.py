"""MindEase Configuration Module.

This module exposes environment-driven settings for the companion.

Settings:
    THINKING_DELAY_RANGE: Bounds of the simulated reply delay.
    MOOD_STORAGE_PATH: JSON file backing the mood store.
    ESCALATION_TURN_THRESHOLD: Turn count at which breathing is offered.
    ENCOURAGEMENT_THRESHOLD: Random draw above which encouragement is appended.
"""
from config.settings import (
    LOG_LEVEL,
    THINKING_DELAY_RANGE,
    MOOD_STORAGE_PATH,
    ESCALATION_TURN_THRESHOLD,
    ENCOURAGEMENT_THRESHOLD,
    WEEKLY_WINDOW_DAYS,
)

__all__ = [
    "LOG_LEVEL",
    "THINKING_DELAY_RANGE",
    "MOOD_STORAGE_PATH",
    "ESCALATION_TURN_THRESHOLD",
    "ENCOURAGEMENT_THRESHOLD",
    "WEEKLY_WINDOW_DAYS",
]
