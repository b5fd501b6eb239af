"""Unit Tests for Calm Mode breathing, mood tones and the event bus."""
import logging
import pytest
from core.events import EventBus, FeedbackEvent, FeedbackEventType, HISTORY_LIMIT
from core.observability import DialogueMetrics, TurnTrace
from models.mood import MoodType
from tools.breathing import (
    BreathingMode,
    BreathingPhase,
    breathing_schedule,
    cycle_duration,
)
from tools.mood_sounds import MOOD_SOUND_CONFIGS, SoundPlayer, tone_schedule


class TestBreathing:

    def test_cycle_durations(self):
        assert cycle_duration(BreathingMode.CALM) == 10
        assert cycle_duration(BreathingMode.BOX) == 16

    def test_calm_skips_holds(self):
        steps = list(breathing_schedule(BreathingMode.CALM))
        phases = [s.phase for s in steps]
        assert BreathingPhase.HOLD1 not in phases
        assert BreathingPhase.HOLD2 not in phases
        assert [s.seconds_remaining for s in steps[:4]] == [4, 3, 2, 1]
        assert steps[4].phase == BreathingPhase.EXHALE
        assert steps[4].seconds_remaining == 6
        assert steps[0].label == "Breathe In"

    def test_box_has_four_phases(self):
        steps = list(breathing_schedule(BreathingMode.BOX, cycles=2))
        assert len(steps) == 32
        assert steps[-1].cycle == 2
        assert steps[-1].phase == BreathingPhase.HOLD2
        assert steps[4].label == "Hold"

    def test_cycles_must_be_positive(self):
        with pytest.raises(ValueError):
            list(breathing_schedule(BreathingMode.BOX, cycles=0))


class TestMoodSounds:

    @pytest.mark.parametrize("mood", list(MoodType))
    def test_schedule_follows_config(self, mood):
        tones = tone_schedule(mood)
        config = MOOD_SOUND_CONFIGS[mood]
        assert [t.frequency for t in tones] == list(config.frequencies)
        assert tones[0].start == 0.0
        for tone in tones:
            assert tone.start < tone.peak < tone.end

    def test_player_receives_tones(self):
        played = []
        bus = EventBus()
        SoundPlayer(played.append).attach(bus)
        bus.publish(FeedbackEvent(FeedbackEventType.MOOD_SOUND, payload={"mood": "happy"}))
        assert len(played) == 1
        assert len(played[0]) == 3

    def test_player_swallows_audio_failures(self):
        def no_audio(_):
            raise OSError("audio blocked")

        bus = EventBus()
        SoundPlayer(no_audio).attach(bus)
        # The player handles its own failure, so it still counts as delivered
        assert bus.publish(FeedbackEvent(FeedbackEventType.MOOD_SOUND,
                                         payload={"mood": "sad"})) == 1


class TestEventBus:

    def test_unsubscribe(self):
        bus = EventBus()
        received = []
        bus.subscribe(FeedbackEventType.CELEBRATION, received.append)
        assert bus.unsubscribe(FeedbackEventType.CELEBRATION, received.append) is True
        assert bus.unsubscribe(FeedbackEventType.CELEBRATION, received.append) is False
        bus.publish(FeedbackEvent(FeedbackEventType.CELEBRATION))
        assert received == []

    def test_failing_handler_is_isolated(self):
        bus = EventBus()
        received = []

        def explode(_):
            raise RuntimeError("boom")

        bus.subscribe(FeedbackEventType.CELEBRATION, explode)
        bus.subscribe(FeedbackEventType.CELEBRATION, received.append)
        assert bus.publish(FeedbackEvent(FeedbackEventType.CELEBRATION)) == 1
        assert len(received) == 1

    def test_event_serializes(self):
        data = FeedbackEvent(FeedbackEventType.MOOD_ACKNOWLEDGED, source_id="chat_1").to_dict()
        assert data["event_type"] == "mood_acknowledged"
        assert data["source_id"] == "chat_1"


class TestDialogueMetrics:

    def test_record_counts_categories_and_stage_entries(self):
        m = DialogueMetrics()
        for before, after, category in [("initial", "initial", "greeting"),
                                        ("initial", "listening", "sad"),
                                        ("listening", "listening", "sad")]:
            trace = TurnTrace(session_id="chat_1", stage_before=before,
                              stage_after=after, category=category)
            trace.complete()
            m.record(trace)

        summary = m.summary()
        assert summary["total_turns"] == 3
        assert summary["categories"] == {"greeting": 1, "sad": 2}
        assert summary["stage_entries"] == {"listening": 1}


class TestEventHistory:

    def test_history_is_bounded(self):
        bus = EventBus(history_limit=50)
        for n in range(1000):
            bus.publish(FeedbackEvent(FeedbackEventType.MOOD_SOUND, payload={"n": n}))
        assert len(bus.history) == 50
        assert bus.history[-1].payload["n"] == 999
        assert bus.history[0].payload["n"] == 950

    def test_default_limit(self):
        bus = EventBus()
        for _ in range(HISTORY_LIMIT + 10):
            bus.publish(FeedbackEvent(FeedbackEventType.CELEBRATION))
        assert len(bus.history) == HISTORY_LIMIT


class TestSoundFailureLogging:

    def test_audio_failure_logged_as_warning(self, caplog):
        def no_audio(_):
            raise OSError("audio blocked")

        player = SoundPlayer(no_audio)
        with caplog.at_level(logging.WARNING, logger="tools.mood_sounds"):
            player.handle(FeedbackEvent(FeedbackEventType.MOOD_SOUND, payload={"mood": "okay"}))
        assert any(r.levelno == logging.WARNING and "audio blocked" in r.getMessage()
                   for r in caplog.records)
