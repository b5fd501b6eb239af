"""Feedback Events - fire-and-forget notifications for the UI layer.

The dialogue core announces a few moments the interface may want to
celebrate with a sound or an animation:

1. MOOD_ACKNOWLEDGED - the conversation entered a breathing offer
2. CELEBRATION - the conversation entered its closing stage
3. MOOD_SOUND - a mood check-in was saved

Subscribers are optional side effects. A failing subscriber is logged and
skipped; it never reaches the publisher.
"""
import logging
import uuid
from collections import deque
from typing import Deque, Dict, Any, List, Callable
from dataclasses import dataclass, field, asdict
from datetime import datetime
from enum import Enum

logger = logging.getLogger(__name__)

# Recent events kept for inspection; older ones are dropped
HISTORY_LIMIT = 100


class FeedbackEventType(Enum):
    MOOD_ACKNOWLEDGED = "mood_acknowledged"
    CELEBRATION = "celebration"
    MOOD_SOUND = "mood_sound"


@dataclass
class FeedbackEvent:
    """A notification for the UI layer."""
    event_type: FeedbackEventType
    source_id: str = ""  # Session id or "mood_store"
    payload: Dict[str, Any] = field(default_factory=dict)
    event_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    timestamp: str = field(default_factory=lambda: datetime.now().isoformat())

    def to_dict(self) -> dict:
        data = asdict(self)
        data["event_type"] = self.event_type.value
        return data


EventHandler = Callable[[FeedbackEvent], None]


class EventBus:
    """Routes feedback events to subscribed handlers."""

    def __init__(self, history_limit: int = HISTORY_LIMIT):
        self._handlers: Dict[FeedbackEventType, List[EventHandler]] = {}
        self.history: Deque[FeedbackEvent] = deque(maxlen=history_limit)

    def subscribe(self, event_type: FeedbackEventType, handler: EventHandler):
        """Register a handler for one event type."""
        self._handlers.setdefault(event_type, []).append(handler)
        logger.debug(f"Subscribed {getattr(handler, '__name__', handler)} to {event_type.value}")

    def unsubscribe(self, event_type: FeedbackEventType, handler: EventHandler) -> bool:
        handlers = self._handlers.get(event_type, [])
        if handler in handlers:
            handlers.remove(handler)
            return True
        return False

    def publish(self, event: FeedbackEvent) -> int:
        """Deliver an event to every handler. Returns how many handlers succeeded."""
        self.history.append(event)
        delivered = 0
        for handler in list(self._handlers.get(event.event_type, [])):
            try:
                handler(event)
                delivered += 1
            except Exception as e:
                logger.warning(f"Feedback handler failed for {event.event_type.value}: {e}")
        logger.debug(f"Published {event.event_type.value} to {delivered} handler(s)")
        return delivered


# Global event bus instance
_event_bus = None


def get_event_bus() -> EventBus:
    """Get or create the global event bus."""
    global _event_bus
    if _event_bus is None:
        _event_bus = EventBus()
    return _event_bus
