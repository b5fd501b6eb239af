"""MindEase Tools Module.

Deterministic helpers used around the conversation (Calm Mode, feedback).

Tools:
    breathing_schedule: Second-by-second countdown for a breathing pattern.
    cycle_duration: Length of one breathing cycle.
    tone_schedule: Notes and envelope times for a mood's feedback tone.
    SoundPlayer: Event subscriber that plays mood tones on a backend.
"""
from tools.breathing import (
    BreathingMode,
    BreathingPhase,
    BreathingStep,
    BREATHING_PATTERNS,
    breathing_schedule,
    cycle_duration,
)
from tools.mood_sounds import (
    MOOD_SOUND_CONFIGS,
    Tone,
    tone_schedule,
    SoundPlayer,
)

__all__ = [
    "BreathingMode",
    "BreathingPhase",
    "BreathingStep",
    "BREATHING_PATTERNS",
    "breathing_schedule",
    "cycle_duration",
    "MOOD_SOUND_CONFIGS",
    "Tone",
    "tone_schedule",
    "SoundPlayer",
]
