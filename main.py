"""MindEase Companion - Console Edition

Talk to the supportive companion from a terminal, log a mood check-in,
review the weekly trend, or follow a guided breathing countdown.

Examples:
    python main.py
    python main.py --mood stressed
    python main.py --log-mood sad --reflection "Long day at work"
    python main.py --stats
    python main.py --breathe box --cycles 2
"""
import argparse
import asyncio
import logging
import time
from typing import Optional

from config.settings import THINKING_DELAY_RANGE
from core.events import FeedbackEvent, FeedbackEventType, get_event_bus
from core.observability import configure_logging, get_metrics_summary
from models.mood import MoodType
from models.session import MoodHint
from services.mood_store import MoodStore
from services.session_service import get_session_service
from tools.breathing import BreathingMode, MODE_INSTRUCTIONS, MODE_NAMES, breathing_schedule

logger = logging.getLogger(__name__)

MOOD_ICONS = {
    MoodType.HAPPY: "😊",
    MoodType.OKAY: "😌",
    MoodType.SAD: "💙",
    MoodType.STRESSED: "🧘",
}

# Quick replies shown before the user has said much
QUICK_REPLIES = {
    MoodHint.SAD: ["I want to talk about it", "I'm feeling lonely", "Help me feel better"],
    MoodHint.STRESSED: ["Work is overwhelming", "I can't stop worrying", "Help me calm down"],
    None: ["I'm feeling stressed", "I need to talk", "Help me relax"],
}


def _print_feedback(event: FeedbackEvent):
    if event.event_type == FeedbackEventType.CELEBRATION:
        print("  ✨🌸✨")
    elif event.event_type == FeedbackEventType.MOOD_ACKNOWLEDGED:
        print("  🌿")


async def chat(mood_hint: Optional[MoodHint], thinking_delay):
    """Interactive chat loop."""
    bus = get_event_bus()
    bus.subscribe(FeedbackEventType.CELEBRATION, _print_feedback)
    bus.subscribe(FeedbackEventType.MOOD_ACKNOWLEDGED, _print_feedback)

    service = get_session_service()
    session = service.create_session(mood_hint=mood_hint, thinking_delay=thinking_delay)

    print("=== MindEase Chat Support ===")
    print("A safe space to share. Type 'exit' to quit.\n")
    print(f"MindEase: {session.transcript[0].text}")
    print("  Try: " + " | ".join(QUICK_REPLIES[session.mood_hint]))

    while True:
        user_input = await asyncio.to_thread(input, "\nYou: ")
        if user_input.strip().lower() in ["exit", "quit"]:
            print("MindEase: Take care of yourself. 💙")
            break

        print("  MindEase is typing...")
        reply = await session.submit(user_input)
        if reply is None:
            continue
        print(f"MindEase: {reply.text}")
        milestone = session.milestone
        print(f"  [{milestone.index + 1}/4 {milestone.value}]")

    service.discard_session(session.session_id)
    logger.info(f"Chat finished. Metrics: {get_metrics_summary()}")


def log_mood(store: MoodStore, mood: str, reflection: Optional[str]):
    entry = store.save_mood(mood, reflection)
    print(f"{MOOD_ICONS[entry.mood]} Mood saved! Take care of yourself today 💙")
    hint = store.chat_hint(entry)
    if hint is not None:
        print(f"Want to talk it through?  python main.py --mood {hint.value}")


def show_stats(store: MoodStore):
    print("=== This Week ===")
    for mood, count in store.get_mood_stats().items():
        print(f"  {MOOD_ICONS[MoodType(mood)]} {mood:9} {count}")
    print("\n=== Daily Trend ===")
    for day in store.get_daily_breakdown():
        bar = "".join(MOOD_ICONS[MoodType(m)] * c for m, c in day["counts"].items())
        print(f"  {day['label']:12} {bar or '·'}")


def breathe(mode: BreathingMode, cycles: int):
    print(f"=== {MODE_NAMES[mode]} ===")
    print(MODE_INSTRUCTIONS[mode] + "\n")
    current = None
    for step in breathing_schedule(mode, cycles):
        if (step.cycle, step.phase) != current:
            current = (step.cycle, step.phase)
            print(f"\n[{step.cycle}/{cycles}] {step.label}: ", end="", flush=True)
        print(step.seconds_remaining, end=" ", flush=True)
        time.sleep(1)
    print(f"\n\nCycles completed: {cycles}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="MindEase wellness companion")
    parser.add_argument("--mood", choices=[h.value for h in MoodHint],
                        help="Open chat from a sad/stressed check-in")
    parser.add_argument("--no-delay", action="store_true",
                        help="Reply without the simulated typing delay")
    parser.add_argument("--log-mood", choices=[m.value for m in MoodType],
                        help="Save a mood check-in and exit")
    parser.add_argument("--reflection", help="Optional reflection for --log-mood")
    parser.add_argument("--stats", action="store_true", help="Show weekly mood stats")
    parser.add_argument("--breathe", choices=[m.value for m in BreathingMode],
                        help="Run a guided breathing countdown")
    parser.add_argument("--cycles", type=int, default=3)
    return parser


def main():
    configure_logging()
    args = build_parser().parse_args()

    if args.log_mood or args.stats:
        store = MoodStore(event_bus=get_event_bus())
        if args.log_mood:
            log_mood(store, args.log_mood, args.reflection)
        if args.stats:
            show_stats(store)
        return

    if args.breathe:
        breathe(BreathingMode(args.breathe), args.cycles)
        return

    thinking_delay = (0.0, 0.0) if args.no_delay else THINKING_DELAY_RANGE
    try:
        asyncio.run(chat(MoodHint.parse(args.mood) if args.mood else None, thinking_delay))
    except (KeyboardInterrupt, EOFError):
        print("\nMindEase: Take care! Goodbye.")


if __name__ == "__main__":
    main()
