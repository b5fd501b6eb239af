"""Mood feedback tones.

Each mood gets a short chord or interval with a gentle attack and decay.
Audio output itself belongs to the UI; a player subscribes to MOOD_SOUND
events and receives the tone schedule below. Players that cannot produce
sound are expected to fail quietly.
"""
import logging
from typing import Callable, Dict, List, NamedTuple, Tuple
from core.events import EventBus, FeedbackEvent, FeedbackEventType
from models.mood import MoodType

logger = logging.getLogger(__name__)


class ToneConfig(NamedTuple):
    frequencies: Tuple[float, ...]
    duration: float
    waveform: str = "sine"


MOOD_SOUND_CONFIGS: Dict[MoodType, ToneConfig] = {
    MoodType.HAPPY: ToneConfig((523.25, 659.25, 783.99), 0.3),   # C5 E5 G5, bright major
    MoodType.OKAY: ToneConfig((392.0, 493.88), 0.4),              # G4 B4, calm interval
    MoodType.SAD: ToneConfig((293.66, 349.23), 0.5),              # D4 F4, gentle minor
    MoodType.STRESSED: ToneConfig((440.0, 392.0, 349.23), 0.4),  # A4 G4 F4, descending
}

NOTE_STAGGER = 0.1   # Seconds between successive notes
PEAK_GAIN = 0.15
ATTACK = 0.05


class Tone(NamedTuple):
    frequency: float
    start: float
    peak: float      # Time the gain reaches PEAK_GAIN
    end: float
    waveform: str


def tone_schedule(mood: MoodType) -> List[Tone]:
    """Staggered notes with their envelope times, relative to playback start."""
    config = MOOD_SOUND_CONFIGS[mood]
    tones = []
    for index, frequency in enumerate(config.frequencies):
        start = round(index * NOTE_STAGGER, 3)
        tones.append(Tone(
            frequency=frequency,
            start=start,
            peak=round(start + ATTACK, 3),
            end=round(start + config.duration, 3),
            waveform=config.waveform,
        ))
    return tones


class SoundPlayer:
    """Bridges MOOD_SOUND events to an audio backend.

    Args:
        play: Callable receiving the tone list. Any failure (no audio device,
            blocked autoplay) is logged and ignored.
    """

    def __init__(self, play: Callable[[List[Tone]], None]):
        self._play = play

    def attach(self, bus: EventBus):
        bus.subscribe(FeedbackEventType.MOOD_SOUND, self.handle)

    def handle(self, event: FeedbackEvent):
        try:
            mood = MoodType(event.payload.get("mood"))
            self._play(tone_schedule(mood))
        except Exception as e:
            logger.warning(f"Audio not supported or blocked: {e}")
