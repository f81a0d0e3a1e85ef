"""
Time-pattern analyzer for ChatLens
Adds year-month counts, day-part buckets and the weekday/weekend split.
"""

import logging
from typing import Any, Dict
import pandas as pd

from . import config
from .chatstats import histogram, weekday_keys

logger = logging.getLogger(__name__)

WEEKEND_DAYS = (0, 6)  # Sunday, Saturday


def day_part(hour: int) -> str:
    """Map an hour (0-23) to morning/afternoon/evening/night."""
    for name, (start, end) in config.TIME_OF_DAY_BUCKETS.items():
        if start <= hour < end:
            return name
    return "night"


def analyze_time_patterns(df: pd.DataFrame, analysis: Dict[str, Any]) -> Dict[str, Any]:
    """Enrich time_stats with by_year_month, time_of_day and weekday_vs_weekend."""
    time_of_day = {"morning": 0, "afternoon": 0, "evening": 0, "night": 0}
    for hour in df["timestamp"].dt.hour:
        time_of_day[day_part(int(hour))] += 1

    weekend = int(weekday_keys(df).isin(WEEKEND_DAYS).sum()) if len(df) else 0

    time_stats = {
        **analysis["time_stats"],
        "by_year_month": histogram(df["timestamp"].dt.strftime("%Y-%m")) if len(df) else {},
        "time_of_day": time_of_day,
        "weekday_vs_weekend": {"weekday": len(df) - weekend, "weekend": weekend},
    }

    logger.info(f"Time patterns: {time_of_day}")
    return {**analysis, "time_stats": time_stats}
