"""Shared fixtures for the MindEase test suite.

Run with: pytest tests/ -v
"""
import sys
import os
import random
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import pytest

from core.events import EventBus
from dialogue.responses import ResponseBank
from services.mood_store import MoodStore
from services.session_service import ConversationSession


class FixedRandom:
    """Random source that always picks the same template index and draw."""

    def __init__(self, index: int = 0, draw: float = 0.0):
        self.index = index
        self.value = draw

    def choice(self, seq):
        return seq[min(self.index, len(seq) - 1)]

    def random(self):
        return self.value


class RecordingSleep:
    """Async sleep stand-in that records requested delays without waiting."""

    def __init__(self, session_ref=None):
        self.delays = []
        self.composing_seen = []
        self.session = session_ref

    async def __call__(self, seconds):
        self.delays.append(seconds)
        if self.session is not None:
            self.composing_seen.append(self.session.composing)


@pytest.fixture
def seeded_bank():
    return ResponseBank(random.Random(42))


@pytest.fixture
def quiet_bank():
    """First template everywhere, never appends encouragement."""
    return ResponseBank(FixedRandom(index=0, draw=0.0))


@pytest.fixture
def event_bus():
    return EventBus()


@pytest.fixture
def make_session(quiet_bank, event_bus):
    """Factory for zero-delay sessions sharing the quiet bank and bus."""
    def _make(mood_hint=None, bank=None):
        sleep = RecordingSleep()
        session = ConversationSession(
            mood_hint=mood_hint,
            bank=bank or quiet_bank,
            event_bus=event_bus,
            thinking_delay=(0.0, 0.0),
            sleep=sleep,
        )
        sleep.session = session
        return session
    return _make


@pytest.fixture
def mood_store(tmp_path, event_bus):
    return MoodStore(path=tmp_path / "moods.json", event_bus=event_bus)
