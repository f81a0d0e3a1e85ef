"""
Premium / lexical analyzer for ChatLens
Word frequency, top active days, media cadence, crude topics, and the
custom date range re-analysis.
"""

import re
import logging
from collections import Counter
from datetime import date, datetime, time
from typing import Any, Dict, List, Union
import pandas as pd

from . import config
from .chatstats import (
    compute_message_stats,
    date_keys,
    get_participants,
    histogram,
    most_active,
)
from .lexicon import STOP_WORDS

logger = logging.getLogger(__name__)

PUNCTUATION_RE = re.compile(r"[^\w\s]")

DateLike = Union[date, datetime, str]


def word_frequency(contents: List[str]) -> Counter:
    """Count content words: lowercase, no punctuation, >2 chars, no stop words."""
    counts: Counter = Counter()
    for content in contents:
        cleaned = PUNCTUATION_RE.sub("", content.lower())
        counts.update(
            w for w in cleaned.split()
            if len(w) > 2 and w not in STOP_WORDS
        )
    return counts


def media_cadence(df: pd.DataFrame, participants: List[str]) -> Dict[str, Dict[str, Any]]:
    """Per-sender daily media average and peak day."""
    cadence = {
        sender: {"daily_average": 0.0, "peak_day": "", "peak_count": 0}
        for sender in participants
    }

    media = df[df["type"] == "media"]
    if len(media) == 0:
        return cadence

    per_day = media.groupby([media["sender"], date_keys(media)]).size()
    for sender in participants:
        if sender not in per_day.index.get_level_values(0):
            continue
        days = per_day.loc[sender].sort_index()
        cadence[sender] = {
            "daily_average": float(days.mean()),
            "peak_day": str(days.idxmax()),
            "peak_count": int(days.max()),
        }
    return cadence


def analyze_premium(df: pd.DataFrame, analysis: Dict[str, Any]) -> Dict[str, Any]:
    """Enrich the aggregate with premium_features."""
    participants = analysis["participants"]
    words = word_frequency(df.loc[df["type"] == "text", "content"].tolist())

    by_date = analysis["time_stats"]["by_date"]
    top_days = sorted(by_date.items(), key=lambda kv: kv[1], reverse=True)[:config.TOP_ACTIVE_DAYS]

    topics = [
        {"word": w, "count": c}
        for w, c in words.most_common(config.TOP_TOPICS)
    ]

    logger.info(f"Premium features: {len(words)} distinct words")

    return {
        **analysis,
        "premium_features": {
            "word_frequency": dict(words),
            "most_active_days": [{"date": d, "count": c} for d, c in top_days],
            "media_cadence": media_cadence(df, participants),
            "topics": topics,
        },
    }


# ============================================================================
# CUSTOM DATE RANGE
# ============================================================================

def _as_bound(value: DateLike, end: bool) -> pd.Timestamp:
    """Turn a date, datetime or ISO string into an inclusive bound."""
    if isinstance(value, str):
        value = datetime.fromisoformat(value) if "T" in value or ":" in value else date.fromisoformat(value)
    if isinstance(value, datetime):
        return pd.Timestamp(value)
    # plain date: cover the whole day
    return pd.Timestamp(datetime.combine(value, time.max if end else time.min))


def custom_date_range_analysis(
    messages_df: pd.DataFrame,
    start: DateLike,
    end: DateLike,
) -> Dict[str, Any]:
    """
    Re-run a reduced statistical core over messages in [start, end].

    The result is a reduced aggregate holding participants, total_messages,
    date_range, message_stats and time_stats only. Plain dates include the
    whole end day. An empty window returns the same keys zeroed, with no
    participants.
    """
    lo, hi = _as_bound(start, end=False), _as_bound(end, end=True)
    window = messages_df[(messages_df["timestamp"] >= lo) & (messages_df["timestamp"] <= hi)]

    logger.info(f"Custom range {lo} .. {hi}: {len(window)} messages")

    if len(window) == 0:
        return {
            "participants": [],
            "total_messages": 0,
            "date_range": {"start": None, "end": None},
            "message_stats": [],
            "time_stats": {"by_date": {}, "most_active_date": ""},
        }

    participants = get_participants(window)
    by_date = histogram(date_keys(window))

    return {
        "participants": participants,
        "total_messages": len(window),
        "date_range": {
            "start": window["timestamp"].min().to_pydatetime(),
            "end": window["timestamp"].max().to_pydatetime(),
        },
        "message_stats": compute_message_stats(window, participants),
        "time_stats": {"by_date": by_date, "most_active_date": most_active(by_date, "")},
    }
