import uuid
from typing import Dict, Any, Optional
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class Category(Enum):
    """What the classifier heard in a single utterance."""
    SEVERE_STRESS = "severe_stress"
    HAPPY = "happy"
    SAD = "sad"
    STRESSED = "stressed"
    ACCEPTANCE = "acceptance"
    DECLINE = "decline"
    BREATHING = "breathing"
    CLOSING = "closing"
    GREETING = "greeting"
    GENERAL = "general"


class Milestone(Enum):
    """Coarse progress markers shown to the user."""
    OPENING = "opening"
    SHARING = "sharing"
    BREATHING = "breathing"
    CLOSING = "closing"

    @property
    def index(self) -> int:
        return list(Milestone).index(self)


class Stage(Enum):
    """Where the conversation currently is."""
    INITIAL = "initial"
    LISTENING = "listening"
    SUGGESTED_BREATHING = "suggested_breathing"
    POST_BREATHING = "post_breathing"
    CLOSING = "closing"

    @property
    def milestone(self) -> Milestone:
        return STAGE_MILESTONES[self]


STAGE_MILESTONES = {
    Stage.INITIAL: Milestone.OPENING,
    Stage.LISTENING: Milestone.SHARING,
    Stage.SUGGESTED_BREATHING: Milestone.BREATHING,
    Stage.POST_BREATHING: Milestone.BREATHING,
    Stage.CLOSING: Milestone.CLOSING,
}


class Role(Enum):
    USER = "user"
    ASSISTANT = "assistant"


class MoodHint(Enum):
    """Mood that deep-linked the user into chat (sad/stressed check-ins)."""
    SAD = "sad"
    STRESSED = "stressed"

    @classmethod
    def parse(cls, value: Any) -> Optional["MoodHint"]:
        """Accept a MoodHint, its string value, or anything else as 'no hint'."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return None


@dataclass(frozen=True)
class Turn:
    """One transcript entry. Insertion order is display order."""
    role: Role
    text: str
    timestamp: datetime = field(default_factory=datetime.now)
    turn_id: str = field(default_factory=lambda: str(uuid.uuid4()))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "turn_id": self.turn_id,
            "role": self.role.value,
            "text": self.text,
            "timestamp": self.timestamp.isoformat(),
        }
