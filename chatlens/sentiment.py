"""
Sentiment engine for ChatLens
Lexicon-based Turkish sentiment scoring with negation and intensity
modifiers, plus per-user, per-date and overall aggregation.
"""

import logging
from typing import Any, Dict, List, Optional, Tuple
import pandas as pd

from . import config
from .chatstats import date_keys, participant_map
from .lexicon import (
    INTENSITY_MARKERS,
    INTENSITY_MODIFIERS,
    NEGATION_WORDS,
    SENTIMENT_LEXICON,
    TRAILING_NEGATION_WORDS,
)

logger = logging.getLogger(__name__)


# ============================================================================
# PER-MESSAGE SCORING
# ============================================================================

def classify_score(score: float) -> str:
    """Map a normalized score to positive/negative/neutral."""
    if score > config.SENTIMENT_POSITIVE_THRESHOLD:
        return "positive"
    if score < config.SENTIMENT_NEGATIVE_THRESHOLD:
        return "negative"
    return "neutral"


def _is_negated(tokens: List[str], start: int, end: int) -> bool:
    """
    Check negation around the match tokens[start:end].

    A negation word among the preceding window, or a copula negation right
    after the match ("mutlu değilim"), flips the match once.
    """
    window = tokens[max(0, start - config.NEGATION_WINDOW):start]
    if any(t in NEGATION_WORDS for t in window):
        return True
    return end < len(tokens) and tokens[end] in TRAILING_NEGATION_WORDS


def _match_score(tokens: List[str], start: int, end: int, base: float) -> float:
    score = float(base)
    if start > 0 and tokens[start - 1] in INTENSITY_MODIFIERS:
        score *= INTENSITY_MODIFIERS[tokens[start - 1]]
    if _is_negated(tokens, start, end):
        score = -score
    return score


def _find_matches(tokens: List[str]) -> List[Tuple[float, str]]:
    """All (score, category) matches for single tokens and bigrams."""
    matches = []

    for i, token in enumerate(tokens):
        entry = SENTIMENT_LEXICON.get(token)
        if entry:
            matches.append((_match_score(tokens, i, i + 1, entry[0]), entry[1]))

    for i in range(len(tokens) - 1):
        entry = SENTIMENT_LEXICON.get(f"{tokens[i]} {tokens[i + 1]}")
        if entry:
            matches.append((_match_score(tokens, i, i + 2, entry[0]), entry[1]))

    return matches


def analyze_message_sentiment(content: str) -> Dict[str, Any]:
    """
    Score one message.

    Returns:
        Dict with score in [-1, 1], sentiment label, emotional_categories
        (category -> accumulated absolute score) and dominant_category
        (None when nothing matched)
    """
    tokens = content.lower().split()
    raw = 0.0
    categories: Dict[str, float] = {}

    for score, category in _find_matches(tokens):
        raw += score
        categories[category] = categories.get(category, 0.0) + abs(score)

    clamp = config.SENTIMENT_RAW_CLAMP
    normalized = max(-clamp, min(clamp, raw)) / clamp

    dominant = None
    best = 0.0
    for category, value in categories.items():
        if value > best:
            dominant, best = category, value

    return {
        "score": normalized,
        "sentiment": classify_score(normalized),
        "emotional_categories": categories,
        "dominant_category": dominant,
    }


def analyze_message_intensity(content: str) -> float:
    """Emphasis level in [0, 1] from caps, exclamation marks and markers."""
    words = content.split()
    if not words:
        return 0.0

    caps = sum(1 for w in words if len(w) > 2 and w == w.upper() and w != w.lower())
    intensity = (caps / len(words)) * 2
    intensity += content.count("!") * 0.2

    lowered = content.lower()
    for marker in INTENSITY_MARKERS:
        haystack = content if marker != marker.lower() else lowered
        if marker in haystack:
            intensity += 0.3

    return min(1.0, intensity)


# ============================================================================
# AGGREGATION
# ============================================================================

def _mean(values: List[float]) -> float:
    return sum(values) / len(values) if values else 0.0


def _top_key(counts: Dict[str, int], default: str) -> str:
    best_key, best = default, 0
    for key, count in counts.items():
        if count > best:
            best_key, best = key, count
    return best_key


def _extreme_day(by_date: Dict[str, Dict[str, Any]], highest: bool) -> Dict[str, Any]:
    """First date with the highest (or lowest) mean score."""
    chosen: Optional[str] = None
    for date, stats in by_date.items():
        if chosen is None:
            chosen = date
            continue
        current = by_date[chosen]["score"]
        if (highest and stats["score"] > current) or (not highest and stats["score"] < current):
            chosen = date

    if chosen is None:
        return {"date": "", "score": 0.0}
    return {"date": chosen, "score": by_date[chosen]["score"]}


def analyze_sentiment(df: pd.DataFrame, analysis: Dict[str, Any]) -> Dict[str, Any]:
    """Enrich the aggregate with sentiment_analysis over text messages."""
    participants = analysis["participants"]
    text = df[df["type"] == "text"]
    dates = date_keys(text) if len(text) else pd.Series(dtype=str)

    by_message: List[Dict[str, Any]] = []
    user_scores = participant_map(participants, [])
    user_emotions = participant_map(participants, {})
    date_scores: Dict[str, List[float]] = {}
    date_categories: Dict[str, Dict[str, float]] = {}
    global_emotions: Dict[str, int] = {}

    for idx, row in text.iterrows():
        result = analyze_message_sentiment(row["content"])
        intensity = analyze_message_intensity(row["content"])
        score = result["score"]
        dominant = result["dominant_category"]
        date = dates.at[idx]

        by_message.append({
            "message_id": int(idx),
            "sender": row["sender"],
            "content": row["content"],
            "timestamp": row["timestamp"].to_pydatetime(),
            "score": score,
            "sentiment": result["sentiment"],
            "intensity": intensity,
            "dominant_category": dominant,
        })

        user_scores[row["sender"]].append(score)
        date_scores.setdefault(date, []).append(score)

        tally = date_categories.setdefault(date, {})
        for category, value in result["emotional_categories"].items():
            tally[category] = tally.get(category, 0.0) + value

        if dominant:
            emotions = user_emotions[row["sender"]]
            emotions[dominant] = emotions.get(dominant, 0) + 1
            global_emotions[dominant] = global_emotions.get(dominant, 0) + 1

    by_user = {}
    for sender in participants:
        mean = _mean(user_scores[sender])
        by_user[sender] = {
            "score": mean,
            "sentiment": classify_score(mean),
            "dominant_emotion": _top_key(user_emotions[sender], "neutral"),
            "message_count": len(user_scores[sender]),
        }

    by_date = {
        date: {
            "score": _mean(scores),
            "message_count": len(scores),
            "emotional_categories": date_categories.get(date, {}),
        }
        for date, scores in sorted(date_scores.items())
    }

    ranked = sorted(
        by_message,
        key=lambda m: m["intensity"] * abs(m["score"]),
        reverse=True,
    )
    most_intense = ranked[:config.MOST_INTENSE_COUNT]

    overall = _mean([m["score"] for m in by_message])
    logger.info(f"Sentiment analysis: {len(by_message)} text messages, overall {overall:.3f}")

    return {
        **analysis,
        "sentiment_analysis": {
            "overall_score": overall,
            "overall_sentiment": classify_score(overall),
            "sentiment_by_user": by_user,
            "sentiment_by_date": by_date,
            "sentiment_by_message": by_message,
            "emotional_categories": global_emotions,
            "dominant_emotion": _top_key(global_emotions, "neutral"),
            "happiest_day": _extreme_day(by_date, highest=True),
            "saddest_day": _extreme_day(by_date, highest=False),
            "most_intense_messages": most_intense,
        },
    }
