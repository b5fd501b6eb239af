"""Unit Tests for the MoodStore collaborator."""
import json
from datetime import datetime, timedelta
import pytest
from core.events import FeedbackEventType
from models.mood import MoodEntry, MoodType
from models.session import MoodHint
from services.mood_store import MoodStore

NOW = datetime(2026, 10, 12, 18, 30)


class TestSaveMood:

    def test_newest_first(self, mood_store):
        mood_store.save_mood("happy", now=NOW - timedelta(hours=2))
        mood_store.save_mood(MoodType.SAD, "rough meeting", now=NOW)
        moods = mood_store.moods
        assert [m.mood for m in moods] == [MoodType.SAD, MoodType.HAPPY]
        assert moods[0].reflection == "rough meeting"
        assert moods[1].reflection is None

    def test_blank_reflection_is_dropped(self, mood_store):
        entry = mood_store.save_mood("okay", "   ", now=NOW)
        assert entry.reflection is None

    def test_display_date(self, mood_store):
        entry = mood_store.save_mood("okay", now=NOW)
        assert entry.date == "Mon, Oct 12"

    def test_unknown_mood_rejected(self, mood_store):
        with pytest.raises(ValueError):
            mood_store.save_mood("ecstatic")

    def test_publishes_mood_sound(self, mood_store, event_bus):
        received = []
        event_bus.subscribe(FeedbackEventType.MOOD_SOUND, received.append)
        mood_store.save_mood("stressed", now=NOW)
        assert len(received) == 1
        assert received[0].payload["mood"] == "stressed"


class TestPersistence:

    def test_round_trip_through_disk(self, tmp_path):
        path = tmp_path / "moods.json"
        store = MoodStore(path=path)
        store.save_mood("sad", "missing home", now=NOW)

        reloaded = MoodStore(path=path)
        assert len(reloaded.moods) == 1
        assert reloaded.moods[0].mood == MoodType.SAD
        assert reloaded.moods[0].reflection == "missing home"

    def test_file_is_a_json_list(self, tmp_path):
        path = tmp_path / "nested" / "moods.json"
        MoodStore(path=path).save_mood("happy", now=NOW)
        data = json.loads(path.read_text())
        assert data[0]["mood"] == "happy"

    def test_corrupt_file_starts_empty(self, tmp_path):
        path = tmp_path / "moods.json"
        path.write_text("{not json")
        assert MoodStore(path=path).moods == []

    def test_memory_only_store_writes_nothing(self, tmp_path):
        path = tmp_path / "moods.json"
        MoodStore(path=path, persist=False).save_mood("okay", now=NOW)
        assert not path.exists()


class TestTrends:

    @pytest.fixture
    def filled_store(self, mood_store):
        for days_ago, mood in [(10, "sad"), (6, "stressed"), (2, "happy"),
                               (1, "happy"), (0, "okay")]:
            mood_store.save_mood(mood, now=NOW - timedelta(days=days_ago))
        return mood_store

    def test_today_mood(self, filled_store):
        assert filled_store.get_today_mood(now=NOW).mood == MoodType.OKAY
        assert filled_store.get_today_mood(now=NOW + timedelta(days=3)) is None

    def test_weekly_window(self, filled_store):
        weekly = filled_store.get_weekly_moods(now=NOW)
        assert len(weekly) == 4
        assert MoodType.SAD not in [m.mood for m in weekly]

    def test_stats_are_zero_filled(self, filled_store):
        assert filled_store.get_mood_stats(now=NOW) == {
            "happy": 2, "okay": 1, "sad": 0, "stressed": 1}

    def test_daily_breakdown(self, filled_store):
        days = filled_store.get_daily_breakdown(now=NOW)
        assert len(days) == 7
        assert days[-1]["date"] == "2026-10-12"
        assert days[-1]["counts"]["okay"] == 1
        assert days[0]["date"] == "2026-10-06"
        assert days[0]["counts"]["stressed"] == 1
        assert sum(d["total"] for d in days) == 4


class TestChatHint:

    @pytest.mark.parametrize("mood,hint", [
        (MoodType.SAD, MoodHint.SAD),
        (MoodType.STRESSED, MoodHint.STRESSED),
        (MoodType.HAPPY, None),
        (MoodType.OKAY, None),
    ])
    def test_hint_for_entry(self, mood, hint):
        assert MoodStore.chat_hint(MoodEntry(mood=mood)) == hint

    def test_no_entry_no_hint(self):
        assert MoodStore.chat_hint(None) is None
