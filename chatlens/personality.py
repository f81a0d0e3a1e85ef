"""
Personality-type classifier for ChatLens

Maps a participant's chat profile to a fixed, playful label through an
ordered rule cascade. The first matching rule wins, so rule order is part
of the contract; when nothing matches, the label comes from a generic list
indexed by message count.

PROFILE FIELDS:
- avg_length: mean content length (characters)
- message_count: number of messages
- emoji_ratio: emojis per message
- morning/afternoon/evening/night: share of messages per day part (0-1)
"""

import logging
from typing import Any, Callable, Dict, List, Tuple
import pandas as pd

from .time_patterns import day_part

logger = logging.getLogger(__name__)

Profile = Dict[str, float]
Rule = Tuple[Callable[[Profile], bool], str]

# ============================================================================
# RULE CASCADE (order matters)
# ============================================================================

PERSONALITY_RULES: List[Rule] = [
    (lambda p: p["night"] >= 0.5 and p["message_count"] >= 50, "night vampire"),
    (lambda p: p["morning"] >= 0.5, "dawn patrol"),
    (lambda p: p["avg_length"] < 15 and p["message_count"] >= 200, "quick-draw specialist"),
    (lambda p: p["avg_length"] >= 150, "novelist"),
    (lambda p: p["avg_length"] >= 80 and p["emoji_ratio"] < 0.05, "essayist"),
    (lambda p: p["emoji_ratio"] >= 2, "emoji overlord"),
    (lambda p: p["emoji_ratio"] >= 1, "emoji enthusiast"),
    (lambda p: p["message_count"] >= 5000, "chat marathoner"),
    (lambda p: p["message_count"] >= 1000 and p["avg_length"] < 30, "rapid-fire texter"),
    (lambda p: p["evening"] >= 0.5, "evening storyteller"),
    (lambda p: p["afternoon"] >= 0.5, "lunch-break chatter"),
    (lambda p: p["message_count"] < 10, "ghost"),
    (lambda p: p["message_count"] < 50 and p["avg_length"] < 20, "silent observer"),
    (lambda p: p["avg_length"] < 10, "one-word wonder"),
    (lambda p: p["emoji_ratio"] == 0 and p["avg_length"] >= 40, "serious writer"),
    (lambda p: p["emoji_ratio"] == 0, "minimalist"),
    (lambda p: p["night"] >= 0.3, "midnight philosopher"),
    (lambda p: p["morning"] >= 0.3, "early riser"),
    (lambda p: p["emoji_ratio"] >= 0.5 and p["avg_length"] < 30, "expressive sprinter"),
    (lambda p: p["avg_length"] >= 50, "detail lover"),
    (lambda p: p["message_count"] >= 500, "social butterfly"),
]

GENERIC_LABELS = [
    "easygoing conversationalist",
    "balanced communicator",
    "steady companion",
    "casual chatter",
]


def classify_personality(profile: Profile) -> str:
    """Return the label of the first matching rule, else a generic label."""
    for predicate, label in PERSONALITY_RULES:
        if predicate(profile):
            return label
    return GENERIC_LABELS[int(profile["message_count"]) % len(GENERIC_LABELS)]


def build_profile(messages: pd.DataFrame) -> Profile:
    """Profile one sender's messages."""
    count = len(messages)
    if count == 0:
        return {
            "avg_length": 0.0, "message_count": 0, "emoji_ratio": 0.0,
            "morning": 0.0, "afternoon": 0.0, "evening": 0.0, "night": 0.0,
        }

    parts = {"morning": 0, "afternoon": 0, "evening": 0, "night": 0}
    for hour in messages["timestamp"].dt.hour:
        parts[day_part(int(hour))] += 1

    return {
        "avg_length": float(messages["content"].str.len().mean()),
        "message_count": count,
        "emoji_ratio": sum(len(e) for e in messages["emojis"]) / count,
        **{name: n / count for name, n in parts.items()},
    }


def personality_types(df: pd.DataFrame, participants: List[str]) -> Dict[str, Any]:
    """Personality label and profile for every participant."""
    result = {}
    for sender in participants:
        profile = build_profile(df[df["sender"] == sender])
        result[sender] = {"type": classify_personality(profile), "profile": profile}
        logger.debug(f"Personality for {sender}: {result[sender]['type']}")
    return result
