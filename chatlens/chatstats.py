"""
Statistical core for ChatLens
Builds the base ChatAnalysis: participants, per-sender counts, time
histograms, conversation initiations, response times, silences and media.
"""

import logging
from typing import Any, Dict, Iterable, List, Optional
import numpy as np
import pandas as pd

from . import config

logger = logging.getLogger(__name__)


# ============================================================================
# SHARED HELPERS
# ============================================================================

def participant_map(participants: Iterable[str], default: Any = 0) -> Dict[str, Any]:
    """
    Build a per-user map with one entry per participant.

    Mutable defaults (dict, list) are copied for every participant.
    """
    if isinstance(default, (dict, list)):
        return {p: type(default)(default) for p in participants}
    return {p: default for p in participants}


def get_participants(df: pd.DataFrame) -> List[str]:
    """Unique senders in order of first appearance."""
    return list(dict.fromkeys(df["sender"]))


def date_keys(df: pd.DataFrame) -> pd.Series:
    """ISO date string (YYYY-MM-DD) for every message."""
    return df["timestamp"].dt.strftime("%Y-%m-%d")


def weekday_keys(df: pd.DataFrame) -> pd.Series:
    """Day of week with 0 = Sunday .. 6 = Saturday."""
    return (df["timestamp"].dt.dayofweek + 1) % 7


def histogram(keys: pd.Series) -> Dict[Any, int]:
    """Count occurrences per key, keys in ascending order."""
    counts = keys.value_counts().sort_index()
    return {_plain(k): int(v) for k, v in counts.items()}


def most_active(counts: Dict[Any, int], default: Any = None) -> Any:
    """
    Key with the highest count.

    Ties resolve to the first key in iteration order; histograms are built
    in ascending key order, so ties pick the smallest hour/day/month and the
    earliest date.
    """
    best_key, best_count = default, -1
    for key, count in counts.items():
        if count > best_count:
            best_key, best_count = key, count
    return best_key


def message_record(row: pd.Series) -> Dict[str, Any]:
    """Plain-dict view of a message row."""
    return {
        "msg_id": int(row["msg_id"]),
        "timestamp": row["timestamp"].to_pydatetime(),
        "sender": row["sender"],
        "content": row["content"],
        "type": row["type"],
        "media_type": row["media_type"],
        "emojis": list(row["emojis"]),
    }


def _plain(value: Any) -> Any:
    """Convert numpy scalars to Python scalars."""
    return value.item() if isinstance(value, np.generic) else value


def _gap_seconds(df: pd.DataFrame) -> pd.Series:
    """Seconds since the previous message (NaN for the first)."""
    return df["timestamp"].diff().dt.total_seconds()


# ============================================================================
# BASE ANALYSIS
# ============================================================================

def base_analysis(df: pd.DataFrame) -> Dict[str, Any]:
    """
    Compute the base ChatAnalysis from an ordered message table.

    Args:
        df: Message table from the parser (sorted by timestamp)

    Returns:
        Aggregate dict with participants, total_messages, date_range,
        message_stats, emoji_stats (empty, filled by the emoji stage),
        time_stats, media_stats, first_message, longest_conversation_date,
        conversation_initiations, response_time_average, longest_silence
    """
    logger.info(f"Computing base statistics for {len(df)} messages")

    if len(df) == 0:
        logger.warning("Empty message table provided")
        return empty_analysis()

    participants = get_participants(df)
    time_stats = compute_time_stats(df)

    analysis = {
        "participants": participants,
        "total_messages": len(df),
        "date_range": {
            "start": df["timestamp"].min().to_pydatetime(),
            "end": df["timestamp"].max().to_pydatetime(),
        },
        "message_stats": compute_message_stats(df, participants),
        "emoji_stats": {
            "total_emojis": 0,
            "emoji_counts": {},
            "emoji_counts_by_user": participant_map(participants, {}),
            "most_used_emojis": [],
        },
        "time_stats": time_stats,
        "media_stats": compute_media_stats(df, participants),
        "first_message": message_record(df.iloc[0]),
        "longest_conversation_date": time_stats["most_active_date"],
        "conversation_initiations": compute_initiations(
            df, participants, config.BASE_CONVERSATION_GAP_SECONDS
        ),
        "response_time_average": compute_response_time_average(df, participants),
        "longest_silence": compute_longest_silence(df),
    }

    logger.info(f"Base statistics complete for {len(participants)} participants")
    return analysis


def compute_message_stats(df: pd.DataFrame, participants: List[str]) -> List[Dict[str, Any]]:
    """Message count and mean content length per sender."""
    lengths = df["content"].str.len()
    grouped = lengths.groupby(df["sender"]).agg(["count", "mean"])

    return [
        {
            "sender": sender,
            "count": int(grouped.at[sender, "count"]) if sender in grouped.index else 0,
            "average_length": float(grouped.at[sender, "mean"]) if sender in grouped.index else 0.0,
        }
        for sender in participants
    ]


def compute_time_stats(df: pd.DataFrame) -> Dict[str, Any]:
    """Histograms by hour, weekday (0=Sunday), month (0-indexed) and date."""
    by_hour = histogram(df["timestamp"].dt.hour)
    by_day = histogram(weekday_keys(df))
    by_month = histogram(df["timestamp"].dt.month - 1)
    by_date = histogram(date_keys(df))

    return {
        "by_hour": by_hour,
        "by_day": by_day,
        "by_month": by_month,
        "by_date": by_date,
        "most_active_hour": most_active(by_hour, 0),
        "most_active_day": most_active(by_day, 0),
        "most_active_date": most_active(by_date, ""),
    }


def compute_initiations(
    df: pd.DataFrame,
    participants: List[str],
    gap_seconds: float,
) -> Dict[str, int]:
    """
    Count conversation initiations per sender.

    A message starts a conversation when it is the first message or when
    more than gap_seconds passed since the previous message.
    """
    gaps = _gap_seconds(df)
    starts = gaps.isna() | (gaps > gap_seconds)
    counts = df.loc[starts, "sender"].value_counts()

    initiations = participant_map(participants, 0)
    for sender, count in counts.items():
        initiations[sender] = int(count)
    return initiations


def compute_response_time_average(df: pd.DataFrame, participants: List[str]) -> Dict[str, float]:
    """
    Mean response time in minutes per sender.

    Every adjacent pair with different senders counts as a response by the
    later sender; gaps above the 24h cutoff are ignored.
    """
    gaps = _gap_seconds(df)
    sender_changed = df["sender"] != df["sender"].shift(1)
    mask = sender_changed & gaps.notna() & (gaps <= config.RESPONSE_CUTOFF_SECONDS)

    minutes = gaps[mask] / 60.0
    averages = minutes.groupby(df.loc[mask, "sender"]).mean()

    result = participant_map(participants, 0.0)
    for sender, avg in averages.items():
        result[sender] = float(avg)
    return result


def compute_longest_silence(df: pd.DataFrame) -> Optional[Dict[str, Any]]:
    """Largest gap between consecutive messages, in hours."""
    if len(df) < 2:
        return None

    gaps = _gap_seconds(df).fillna(0.0).to_numpy()
    pos = int(np.argmax(gaps))
    if gaps[pos] <= 0:
        return None

    return {
        "start": df["timestamp"].iloc[pos - 1].to_pydatetime(),
        "end": df["timestamp"].iloc[pos].to_pydatetime(),
        "duration": float(gaps[pos] / 3600.0),
    }


def compute_media_stats(df: pd.DataFrame, participants: List[str]) -> Dict[str, Any]:
    """Media counts by subtype, globally and per sender."""
    media = df[df["type"] == "media"]
    typed = media[media["media_type"].notna()]

    by_user = participant_map(participants, {})
    for (sender, media_type), count in typed.groupby(["sender", "media_type"]).size().items():
        by_user[sender][media_type] = int(count)

    return {
        "total_media": len(media),
        "by_type": {k: int(v) for k, v in typed["media_type"].value_counts().items()},
        "by_user": by_user,
    }


def empty_analysis() -> Dict[str, Any]:
    """Zeroed aggregate for an empty message table."""
    return {
        "participants": [],
        "total_messages": 0,
        "date_range": {"start": None, "end": None},
        "message_stats": [],
        "emoji_stats": {
            "total_emojis": 0,
            "emoji_counts": {},
            "emoji_counts_by_user": {},
            "most_used_emojis": [],
        },
        "time_stats": {
            "by_hour": {},
            "by_day": {},
            "by_month": {},
            "by_date": {},
            "most_active_hour": 0,
            "most_active_day": 0,
            "most_active_date": "",
        },
        "media_stats": {"total_media": 0, "by_type": {}, "by_user": {}},
        "first_message": None,
        "longest_conversation_date": "",
        "conversation_initiations": {},
        "response_time_average": {},
        "longest_silence": None,
    }


if __name__ == "__main__":
    # Test with sample data
    from .parser import parse

    sample = "\n".join([
        "[01.01.23, 09:00] Ayşe: merhaba",
        "[01.01.23, 09:05] Mehmet: selam canım ❤️",
        "[01.01.23, 09:06] Ayşe: haha çok iyi",
    ])
    stats = base_analysis(parse(sample))
    for key in ("participants", "message_stats", "conversation_initiations", "response_time_average"):
        print(f"{key}: {stats[key]}")
