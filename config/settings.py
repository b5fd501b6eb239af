"""Central Configuration for MindEase Companion."""
import os
from pathlib import Path
from dotenv import load_dotenv

# Base Directory (Root of the project)
BASE_DIR = Path(__file__).resolve().parent.parent

# Load Environment Variables
load_dotenv(BASE_DIR / ".env")

# Logging
LOG_LEVEL = os.getenv("MINDEASE_LOG_LEVEL", "INFO").upper()

# Simulated "thinking" time before the companion replies (seconds)
THINKING_DELAY_RANGE = (
    float(os.getenv("MINDEASE_THINKING_DELAY_MIN", "1.0")),
    float(os.getenv("MINDEASE_THINKING_DELAY_MAX", "2.0")),
)

# Paths
MOOD_STORAGE_PATH = Path(
    os.getenv("MINDEASE_MOOD_STORAGE_PATH", str(BASE_DIR / ".moods" / "mindease_moods.json"))
)

# Dialogue Settings
ESCALATION_TURN_THRESHOLD = 2   # Turns before sad/stressed replies offer breathing
ENCOURAGEMENT_THRESHOLD = 0.6   # Random draw above this appends encouragement

# Mood Trend Settings
WEEKLY_WINDOW_DAYS = 7
