"""Session Service Module

This module provides:
1. ConversationSession - one live conversation with the companion
2. In-memory session registry (create/get/list/discard)

Conversations are never written to disk; a session lives as long
as its owner keeps it. Discarding a session is the only way to abandon a
conversation, since an in-flight reply always runs to completion.
"""
import asyncio
import logging
import random
import uuid
from typing import Dict, Any, Optional, List, Tuple, Callable, Awaitable
from datetime import datetime
from config.settings import THINKING_DELAY_RANGE
from core.events import EventBus, FeedbackEvent, FeedbackEventType, get_event_bus
from core.observability import Tracer
from dialogue.classifier import classify
from dialogue.responses import ResponseBank
from dialogue.state_machine import transition, opening_message
from models.session import Category, Stage, Milestone, MoodHint, Role, Turn

logger = logging.getLogger(__name__)

# Stages whose entry the UI may want to celebrate
STAGE_EVENTS = {
    Stage.SUGGESTED_BREATHING: FeedbackEventType.MOOD_ACKNOWLEDGED,
    Stage.CLOSING: FeedbackEventType.CELEBRATION,
}


class ConversationSession:
    """
    A single conversation with the companion.

    Owns the transcript, the current stage, the turn count and the
    "composing" flag. Each accepted ``submit`` appends exactly one user turn
    and then exactly one assistant turn.

    Args:
        mood_hint: Mood that deep-linked the user here ("sad"/"stressed").
        bank: Response bank; pass one with a seeded rng for reproducible replies.
        event_bus: Where stage-entry feedback events are published.
        thinking_delay: (min, max) seconds of simulated thinking.
        sleep: Awaitable used for the delay (injected in tests).
        session_id: Identifier; generated when omitted.
    """

    def __init__(self, mood_hint: Optional[MoodHint] = None,
                 bank: Optional[ResponseBank] = None,
                 event_bus: Optional[EventBus] = None,
                 thinking_delay: Optional[Tuple[float, float]] = None,
                 sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
                 session_id: str = None):
        self.session_id = session_id or f"chat_{uuid.uuid4().hex[:12]}"
        self.mood_hint = MoodHint.parse(mood_hint)
        self.bank = bank or ResponseBank()
        self.event_bus = event_bus
        self.thinking_delay = thinking_delay or THINKING_DELAY_RANGE
        self._sleep = sleep
        self._lock: Optional[asyncio.Lock] = None
        self._lock_loop = None
        self.created_at = datetime.now()

        self._transcript: List[Turn] = []
        self.stage = Stage.INITIAL
        self.turn_count = 0
        self.composing = False
        self.last_category: Optional[Category] = None

        self._append(Role.ASSISTANT, opening_message(self.mood_hint, self.bank))
        logger.info(f"Started conversation {self.session_id} (mood hint: "
                    f"{self.mood_hint.value if self.mood_hint else 'none'})")

    # === Observable State ===

    @property
    def transcript(self) -> List[Turn]:
        return list(self._transcript)

    @property
    def milestone(self) -> Milestone:
        return self.stage.milestone

    def snapshot(self) -> Dict[str, Any]:
        """Everything a UI needs to render the conversation."""
        return {
            "session_id": self.session_id,
            "stage": self.stage.value,
            "milestone": self.milestone.value,
            "milestone_index": self.milestone.index,
            "turn_count": self.turn_count,
            "composing": self.composing,
            "transcript": [turn.to_dict() for turn in self._transcript],
        }

    # === Conversation ===

    async def submit(self, text: str) -> Optional[Turn]:
        """
        Accept one user message and produce the companion's reply.

        Blank input is ignored. Overlapping calls are serialized so turns
        never interleave. Cancelling the caller during the thinking delay
        still completes the reply before CancelledError is re-raised.

        Returns:
            The assistant turn, or None when the input was blank.
        """
        text = (text or "").strip()
        if not text:
            return None

        cancelled = None
        async with self._loop_lock():
            self._append(Role.USER, text)
            self.composing = True
            self.turn_count += 1
            try:
                try:
                    await self._sleep(self._draw_delay())
                except asyncio.CancelledError as e:
                    cancelled = e

                with Tracer(self.session_id, self.stage.value) as trace:
                    category = classify(text)
                    step = transition(self.stage, category, self.turn_count, self.bank)
                    trace.category = category.value
                    trace.stage_after = step.next_stage.value

                reply = self._append(Role.ASSISTANT, step.reply)
                previous_stage = self.stage
                self.stage = step.next_stage
                self.last_category = category
            finally:
                self.composing = False

        if self.stage != previous_stage:
            self._announce(self.stage)
        if cancelled is not None:
            raise cancelled
        return reply

    def _loop_lock(self) -> asyncio.Lock:
        # asyncio.Lock binds to the loop it first waits on; one lock per loop
        loop = asyncio.get_running_loop()
        if self._lock is None or self._lock_loop is not loop:
            self._lock = asyncio.Lock()
            self._lock_loop = loop
        return self._lock

    def _draw_delay(self) -> float:
        low, high = self.thinking_delay
        return random.uniform(low, high) if high > low else max(low, 0.0)

    def _append(self, role: Role, text: str) -> Turn:
        turn = Turn(role=role, text=text)
        self._transcript.append(turn)
        return turn

    def _announce(self, stage: Stage):
        event_type = STAGE_EVENTS.get(stage)
        if event_type is None or self.event_bus is None:
            return
        self.event_bus.publish(FeedbackEvent(
            event_type=event_type,
            source_id=self.session_id,
            payload={"stage": stage.value, "turn_count": self.turn_count},
        ))


class InMemorySessionService:
    """
    In-memory registry of live conversations.

    Features:
    - Create/Get/List/Discard sessions
    - Shared defaults (event bus, thinking delay) for every new session
    """

    def __init__(self, event_bus: Optional[EventBus] = None,
                 thinking_delay: Optional[Tuple[float, float]] = None):
        self._sessions: Dict[str, ConversationSession] = {}
        self._event_bus = event_bus
        self._thinking_delay = thinking_delay

    def create_session(self, mood_hint: Optional[MoodHint] = None,
                       **kwargs) -> ConversationSession:
        """Start a new conversation."""
        kwargs.setdefault("event_bus", self._event_bus)
        kwargs.setdefault("thinking_delay", self._thinking_delay)
        session = ConversationSession(mood_hint=mood_hint, **kwargs)
        self._sessions[session.session_id] = session
        logger.info(f"Created session: {session.session_id}")
        return session

    def get_session(self, session_id: str) -> Optional[ConversationSession]:
        """Get a session by ID."""
        return self._sessions.get(session_id)

    def list_sessions(self) -> List[ConversationSession]:
        """List all live sessions, oldest first."""
        return sorted(self._sessions.values(), key=lambda s: s.created_at)

    def discard_session(self, session_id: str) -> bool:
        """Drop a session. Any reply still composing finishes on the orphaned instance."""
        if self._sessions.pop(session_id, None) is not None:
            logger.info(f"Discarded session: {session_id}")
            return True
        return False


# Global session service instance
_session_service = None


def get_session_service() -> InMemorySessionService:
    """Get or create the global session service."""
    global _session_service
    if _session_service is None:
        _session_service = InMemorySessionService(event_bus=get_event_bus())
    return _session_service
