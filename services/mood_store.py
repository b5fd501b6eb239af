"""Mood Store Module

Append-only log of mood check-ins, newest first, persisted as a JSON list.

This module provides:
1. Saving a mood (with optional reflection) and announcing it for feedback
2. Today's check-in and the weekly window used by the trend views
3. Weekly counts per mood and a per-day breakdown for charts
4. The chat deep-link hint for sad/stressed check-ins
"""
import json
import logging
from typing import Dict, Optional, List, Union
from datetime import datetime, timedelta
from pathlib import Path
from config.settings import MOOD_STORAGE_PATH, WEEKLY_WINDOW_DAYS
from core.events import EventBus, FeedbackEvent, FeedbackEventType
from models.mood import MoodEntry, MoodType, display_date
from models.session import MoodHint

logger = logging.getLogger(__name__)

# Check-ins that open the chat with a mood-triggered greeting
CHAT_HINTS = {
    MoodType.SAD: MoodHint.SAD,
    MoodType.STRESSED: MoodHint.STRESSED,
}


class MoodStore:
    """
    Mood check-in storage.

    Features:
    - Save/list mood entries (newest first)
    - Weekly statistics and daily breakdown
    - Optional persistence to a JSON file
    """

    def __init__(self, path: Path = MOOD_STORAGE_PATH, persist: bool = True,
                 event_bus: Optional[EventBus] = None):
        self.path = Path(path)
        self._persist = persist
        self._event_bus = event_bus
        self._moods: List[MoodEntry] = []

        if persist:
            self._load_from_disk()

    @property
    def moods(self) -> List[MoodEntry]:
        return list(self._moods)

    def save_mood(self, mood: Union[MoodType, str], reflection: str = None,
                  now: datetime = None) -> MoodEntry:
        """Record a check-in. Raises ValueError for an unknown mood."""
        mood = mood if isinstance(mood, MoodType) else MoodType(str(mood).strip().lower())
        reflection = reflection.strip() if reflection and reflection.strip() else None
        now = now or datetime.now()

        entry = MoodEntry(mood=mood, reflection=reflection, timestamp=now.isoformat())
        self._moods.insert(0, entry)
        logger.info(f"Saved mood: {mood.value}" + (" (with reflection)" if reflection else ""))

        if self._persist:
            self._save_to_disk()

        if self._event_bus is not None:
            self._event_bus.publish(FeedbackEvent(
                event_type=FeedbackEventType.MOOD_SOUND,
                source_id="mood_store",
                payload={"mood": mood.value, "entry_id": entry.entry_id},
            ))
        return entry

    def get_today_mood(self, now: datetime = None) -> Optional[MoodEntry]:
        """Most recent check-in made today, if any."""
        today = (now or datetime.now()).date()
        for entry in self._moods:
            if entry.moment.date() == today:
                return entry
        return None

    def get_weekly_moods(self, now: datetime = None) -> List[MoodEntry]:
        """Check-ins from the last WEEKLY_WINDOW_DAYS days."""
        since = (now or datetime.now()) - timedelta(days=WEEKLY_WINDOW_DAYS)
        return [m for m in self._moods if m.moment >= since]

    def get_mood_stats(self, now: datetime = None) -> Dict[str, int]:
        """Weekly count per mood, zero-filled."""
        stats = {mood.value: 0 for mood in MoodType}
        for entry in self.get_weekly_moods(now):
            stats[entry.mood.value] += 1
        return stats

    def get_daily_breakdown(self, days: int = WEEKLY_WINDOW_DAYS,
                            now: datetime = None) -> List[Dict[str, object]]:
        """Per-day mood counts, oldest day first, for the trend chart."""
        now = now or datetime.now()
        breakdown = []
        for offset in range(days - 1, -1, -1):
            day = (now - timedelta(days=offset)).date()
            counts = {mood.value: 0 for mood in MoodType}
            for entry in self._moods:
                if entry.moment.date() == day:
                    counts[entry.mood.value] += 1
            breakdown.append({
                "date": day.isoformat(),
                "label": display_date(datetime.combine(day, datetime.min.time())),
                "counts": counts,
                "total": sum(counts.values()),
            })
        return breakdown

    @staticmethod
    def chat_hint(entry: Optional[MoodEntry]) -> Optional[MoodHint]:
        """Mood hint for opening chat from this check-in (sad/stressed only)."""
        if entry is None:
            return None
        return CHAT_HINTS.get(entry.mood)

    # === Persistence ===

    def _save_to_disk(self):
        """Save all entries to disk."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w") as f:
            json.dump([m.to_dict() for m in self._moods], f, indent=2)

    def _load_from_disk(self):
        """Load entries from disk; unreadable storage starts empty."""
        if not self.path.exists():
            return
        try:
            with open(self.path) as f:
                data = json.load(f)
            self._moods = [MoodEntry.from_dict(item) for item in data]
        except Exception as e:
            logger.warning(f"Failed to load moods from {self.path}: {e}")
            self._moods = []
            return

        logger.info(f"Loaded {len(self._moods)} mood entries")
