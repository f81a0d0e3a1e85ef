"""
Configuration module for ChatLens
Loads environment variables and provides default settings
"""

import os
from pathlib import Path
from typing import Dict, Any
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# Project root directory
PROJECT_ROOT = Path(__file__).parent.parent

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Result store (save/restore last result)
RESULT_STORE_DIR = PROJECT_ROOT / os.getenv("RESULT_STORE_DIR", ".chatlens")

# Parser settings
PARSE_CHUNK_SIZE = int(os.getenv("PARSE_CHUNK_SIZE", "100"))
PARSE_LARGE_CHUNK_SIZE = int(os.getenv("PARSE_LARGE_CHUNK_SIZE", "50"))
PARSE_LARGE_FILE_LINES = int(os.getenv("PARSE_LARGE_FILE_LINES", "10000"))

# Report sizes
TOP_EMOJI_COUNT = int(os.getenv("TOP_EMOJI_COUNT", "20"))
TOP_ACTIVE_DAYS = int(os.getenv("TOP_ACTIVE_DAYS", "10"))
TOP_TOPICS = int(os.getenv("TOP_TOPICS", "15"))
MOST_INTENSE_COUNT = int(os.getenv("MOST_INTENSE_COUNT", "5"))

# ============================================================================
# Analysis constants (fixed behaviour, not read from the environment)
# ============================================================================

# Only the most recent N messages are analysed
MAX_MESSAGES = 30000

# Conversation initiation gaps (seconds)
BASE_CONVERSATION_GAP_SECONDS = 3 * 60 * 60
DYNAMICS_CONVERSATION_GAP_SECONDS = 2 * 60 * 60

# Replies slower than this are treated as a new conversation (seconds)
RESPONSE_CUTOFF_SECONDS = 24 * 60 * 60

# Sentiment
SENTIMENT_POSITIVE_THRESHOLD = 0.2
SENTIMENT_NEGATIVE_THRESHOLD = -0.2
SENTIMENT_RAW_CLAMP = 5.0
NEGATION_WINDOW = 3

# Day parts, half-open hour ranges [start, end)
TIME_OF_DAY_BUCKETS = {
    "morning": (6, 12),
    "afternoon": (12, 18),
    "evening": (18, 22),
}

# Sleep pattern windows, half-open hour ranges
NIGHT_HOURS = (22, 3)  # wraps past midnight
MORNING_HOURS = (5, 9)

# Compatibility
TIME_COMPATIBILITY_MATCH = 90
TIME_COMPATIBILITY_MISMATCH = 40
EMOJI_COMPATIBILITY_DEFAULT = 50

LONGEST_MESSAGE_PREVIEW_CHARS = 50


def get_config_summary() -> Dict[str, Any]:
    """Return a summary of current configuration."""
    return {
        "logging": {
            "level": LOG_LEVEL,
        },
        "store": {
            "dir": str(RESULT_STORE_DIR),
        },
        "parser": {
            "chunk_size": PARSE_CHUNK_SIZE,
            "large_chunk_size": PARSE_LARGE_CHUNK_SIZE,
            "large_file_lines": PARSE_LARGE_FILE_LINES,
        },
        "report": {
            "top_emojis": TOP_EMOJI_COUNT,
            "top_active_days": TOP_ACTIVE_DAYS,
            "top_topics": TOP_TOPICS,
            "most_intense": MOST_INTENSE_COUNT,
        },
        "analysis": {
            "max_messages": MAX_MESSAGES,
            "base_conversation_gap_hours": BASE_CONVERSATION_GAP_SECONDS / 3600,
            "dynamics_conversation_gap_hours": DYNAMICS_CONVERSATION_GAP_SECONDS / 3600,
            "response_cutoff_hours": RESPONSE_CUTOFF_SECONDS / 3600,
        },
    }


def validate_config() -> tuple[bool, str]:
    """Validate configuration. Returns (is_valid, message)."""
    if LOG_LEVEL not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
        return False, f"LOG_LEVEL={LOG_LEVEL} is not a logging level name"

    for name, value in (
        ("PARSE_CHUNK_SIZE", PARSE_CHUNK_SIZE),
        ("PARSE_LARGE_CHUNK_SIZE", PARSE_LARGE_CHUNK_SIZE),
        ("TOP_EMOJI_COUNT", TOP_EMOJI_COUNT),
        ("TOP_ACTIVE_DAYS", TOP_ACTIVE_DAYS),
        ("TOP_TOPICS", TOP_TOPICS),
        ("MOST_INTENSE_COUNT", MOST_INTENSE_COUNT),
    ):
        if value <= 0:
            return False, f"{name} must be positive, got {value}"

    return True, "Configuration valid"


if __name__ == "__main__":
    # Print config summary for debugging
    import json
    print("ChatLens Configuration:")
    print(json.dumps(get_config_summary(), indent=2))
    print()
    valid, msg = validate_config()
    print(f"Validation: {msg}")
