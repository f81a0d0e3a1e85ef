"""
Shared analysis pipeline for ChatLens
Single entry point used by the CLI and library callers: parse, cap to the
most recent messages, then run every analyzer stage in order.
"""

import logging
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple
import pandas as pd

from . import config
from .parser import ProgressCallback, WhatsAppParser
from .chatstats import base_analysis
from .emoji_stats import analyze_emojis
from .time_patterns import analyze_time_patterns
from .sentiment import analyze_sentiment
from .communication import analyze_communication
from .premium import analyze_premium
from .relationship import analyze_relationship
from .exceptions import StageFailure

logger = logging.getLogger(__name__)

Stage = Callable[[pd.DataFrame, Dict[str, Any]], Dict[str, Any]]

# (name, stage, progress reported when the stage finishes)
STAGES: List[Tuple[str, Stage, int]] = [
    ("base", lambda df, analysis: base_analysis(df), 35),
    ("emoji", analyze_emojis, 45),
    ("time_patterns", analyze_time_patterns, 55),
    ("sentiment", analyze_sentiment, 65),
    ("communication", analyze_communication, 75),
    ("premium", analyze_premium, 85),
    ("relationship", analyze_relationship, 95),
]

PARSE_PROGRESS_START = 5
PARSE_PROGRESS_SPAN = 20


def cap_messages(df: pd.DataFrame, limit: Optional[int] = None) -> pd.DataFrame:
    """Keep only the most recent `limit` messages (default MAX_MESSAGES)."""
    limit = limit or config.MAX_MESSAGES
    if len(df) <= limit:
        return df
    logger.info(f"Truncating {len(df)} messages to the most recent {limit}")
    return df.tail(limit).reset_index(drop=True)


def analyze_messages(
    df: pd.DataFrame,
    on_progress: Optional[ProgressCallback] = None,
) -> Dict[str, Any]:
    """
    Run every analyzer stage over an already parsed message table.

    Raises:
        StageFailure: a stage raised; the original error is chained
    """
    df = cap_messages(df)
    analysis: Dict[str, Any] = {}

    for name, stage, progress in STAGES:
        logger.info(f"Running stage: {name}")
        try:
            analysis = stage(df, analysis)
        except Exception as e:
            logger.error(f"Stage {name} failed: {e}")
            raise StageFailure(name, e) from e
        if on_progress:
            on_progress(progress)

    if on_progress:
        on_progress(100)
    return analysis


def run_pipeline(
    raw_text: str,
    on_progress: Optional[ProgressCallback] = None,
) -> Dict[str, Any]:
    """
    Run complete analysis on raw WhatsApp export text.

    Args:
        raw_text: Export text
        on_progress: Optional callback receiving a non-decreasing overall
            percentage, ending at 100

    Returns:
        The full ChatAnalysis aggregate

    Raises:
        ParseError subclasses for bad input, StageFailure for analyzer errors
    """
    def parse_progress(p: int) -> None:
        if on_progress:
            on_progress(PARSE_PROGRESS_START + p * PARSE_PROGRESS_SPAN // 100)

    if on_progress:
        on_progress(0)

    df = WhatsAppParser().parse_text(raw_text, on_progress=parse_progress)
    logger.info(f"Parsed {len(df)} messages from {df['sender'].nunique()} senders")

    analysis = analyze_messages(df, on_progress=on_progress)

    logger.info(
        f"Analysis complete: {analysis['total_messages']} messages, "
        f"{len(analysis['participants'])} participants"
    )
    return analysis


def run_file_analysis(
    filepath: Path,
    on_progress: Optional[ProgressCallback] = None,
) -> Dict[str, Any]:
    """Parse an export file from disk and analyze it."""
    logger.info(f"Parsing chat file: {filepath}")
    df = WhatsAppParser().parse_file(str(filepath))
    return analyze_messages(df, on_progress=on_progress)
