"""Mood check-in records kept by the mood store."""
import uuid
from typing import Dict, Any, Optional
from dataclasses import dataclass, field, asdict
from datetime import datetime
from enum import Enum


class MoodType(Enum):
    HAPPY = "happy"
    OKAY = "okay"
    SAD = "sad"
    STRESSED = "stressed"


def display_date(moment: datetime) -> str:
    """Short label like 'Mon, Oct 12' used by the trend views."""
    return f"{moment.strftime('%a')}, {moment.strftime('%b')} {moment.day}"


@dataclass
class MoodEntry:
    """A single mood check-in, optionally with a written reflection."""
    mood: MoodType
    reflection: Optional[str] = None
    timestamp: str = field(default_factory=lambda: datetime.now().isoformat())
    date: str = ""
    entry_id: str = field(default_factory=lambda: str(uuid.uuid4()))

    def __post_init__(self):
        if not self.date:
            self.date = display_date(self.moment)

    @property
    def moment(self) -> datetime:
        return datetime.fromisoformat(self.timestamp)

    def to_dict(self) -> dict:
        data = asdict(self)
        data["mood"] = self.mood.value
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MoodEntry":
        data = dict(data)
        data["mood"] = MoodType(data["mood"])
        return cls(**data)
