"""Guided breathing patterns for Calm Mode.

Deterministic helpers: the UI owns the one-second timer, these functions only
say which phase to show and how many seconds remain in it.
"""
from typing import Dict, Iterator, NamedTuple, Tuple
from enum import Enum


class BreathingMode(Enum):
    CALM = "calm"
    BOX = "box"


class BreathingPhase(Enum):
    INHALE = "inhale"
    HOLD1 = "hold1"
    EXHALE = "exhale"
    HOLD2 = "hold2"


PHASE_ORDER: Tuple[BreathingPhase, ...] = (
    BreathingPhase.INHALE,
    BreathingPhase.HOLD1,
    BreathingPhase.EXHALE,
    BreathingPhase.HOLD2,
)

PHASE_LABELS: Dict[BreathingPhase, str] = {
    BreathingPhase.INHALE: "Breathe In",
    BreathingPhase.HOLD1: "Hold",
    BreathingPhase.EXHALE: "Breathe Out",
    BreathingPhase.HOLD2: "Hold",
}

# Seconds per phase, in PHASE_ORDER; 0 means the phase is skipped
BREATHING_PATTERNS: Dict[BreathingMode, Tuple[int, int, int, int]] = {
    BreathingMode.CALM: (4, 0, 6, 0),
    BreathingMode.BOX: (4, 4, 4, 4),
}

MODE_NAMES: Dict[BreathingMode, str] = {
    BreathingMode.CALM: "Calm Breathing",
    BreathingMode.BOX: "Box Breathing",
}

MODE_INSTRUCTIONS: Dict[BreathingMode, str] = {
    BreathingMode.CALM: "Breathe in for 4 seconds, out for 6 seconds. "
                        "This activates your relaxation response.",
    BreathingMode.BOX: "Equal breaths in, hold, out, hold. "
                       "Box breathing helps reduce stress and improve focus.",
}


class BreathingStep(NamedTuple):
    """One tick of the countdown."""
    cycle: int                # 1-based
    phase: BreathingPhase
    seconds_remaining: int

    @property
    def label(self) -> str:
        return PHASE_LABELS[self.phase]


def cycle_duration(mode: BreathingMode) -> int:
    """Seconds in one full breathing cycle."""
    return sum(BREATHING_PATTERNS[mode])


def breathing_schedule(mode: BreathingMode, cycles: int = 1) -> Iterator[BreathingStep]:
    """Yield one step per second for the requested number of cycles."""
    if cycles < 1:
        raise ValueError("cycles must be at least 1")
    pattern = BREATHING_PATTERNS[mode]
    for cycle in range(1, cycles + 1):
        for phase, seconds in zip(PHASE_ORDER, pattern):
            for remaining in range(seconds, 0, -1):
                yield BreathingStep(cycle, phase, remaining)
