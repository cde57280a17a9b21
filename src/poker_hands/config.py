"""Configuration loading from environment variables and defaults."""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env file if it exists
env_path = Path(__file__).parent.parent.parent / ".env"
if env_path.exists():
    load_dotenv(dotenv_path=env_path)


def _env_flag(name: str, default: str = "0") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


# Matchup file read by `poker-hands count` when no path is given
MATCHUP_FILE = Path(os.getenv("POKER_HANDS_FILE", "p054_poker.txt"))

# Reject hands holding the same card twice
STRICT_DECK = _env_flag("POKER_HANDS_STRICT")

# Level used when --verbose is passed
LOG_LEVEL = os.getenv("POKER_HANDS_LOG_LEVEL", "DEBUG").upper()
