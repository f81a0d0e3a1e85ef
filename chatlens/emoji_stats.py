"""
Emoji analyzer for ChatLens
Counts emojis globally and per sender from the pre-extracted emoji lists.
"""

import logging
from collections import Counter
from typing import Any, Dict
import pandas as pd

from . import config
from .chatstats import participant_map

logger = logging.getLogger(__name__)


def analyze_emojis(df: pd.DataFrame, analysis: Dict[str, Any]) -> Dict[str, Any]:
    """
    Enrich the aggregate with emoji_stats.

    Top emojis are sorted by global count, descending; ties keep the order
    in which each emoji was first seen.
    """
    participants = analysis["participants"]
    totals: Counter = Counter()
    by_user = participant_map(participants, {})

    for sender, emojis in zip(df["sender"], df["emojis"]):
        if not emojis:
            continue
        totals.update(emojis)
        user_counts = by_user[sender]
        for e in emojis:
            user_counts[e] = user_counts.get(e, 0) + 1

    # Counter preserves insertion order and most_common sorts stably
    top = [
        {"emoji": e, "count": count}
        for e, count in totals.most_common(config.TOP_EMOJI_COUNT)
    ]

    logger.info(f"Emoji analysis: {sum(totals.values())} emojis, {len(totals)} distinct")

    return {
        **analysis,
        "emoji_stats": {
            "total_emojis": sum(totals.values()),
            "emoji_counts": dict(totals),
            "emoji_counts_by_user": by_user,
            "most_used_emojis": top,
        },
    }
