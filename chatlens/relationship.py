"""
Relationship analyzer for ChatLens

Keyword-driven relationship signals per participant:
1. Romance: romantic words + heart emojis
2. Conflict: apologies vs. argument words
3. Humor: funny words + laugh emojis
4. Timing: night owl vs. early bird
5. Talkativeness: average and longest message
6. Funny stats: excuses, food, photos, emoji personality, slow responder

Compatibility scores are computed only for two-person chats. Each
sub-score lies in [0, 100] and does not depend on participant order.
"""

import logging
from typing import Any, Dict, List, Optional, Tuple
import pandas as pd

from . import config
from .chatstats import participant_map
from .lexicon import (
    APOLOGY_WORDS,
    ARGUMENT_WORDS,
    EMOJI_PERSONALITIES,
    EMOJI_PERSONALITY_DEFAULT,
    EMOJI_PERSONALITY_NONE,
    EXCUSE_PHRASES,
    FOOD_WORDS,
    HEART_EMOJIS,
    HUMOR_WORDS,
    LAUGH_EMOJIS,
    ROMANTIC_WORDS,
)
from .personality import personality_types

logger = logging.getLogger(__name__)


# ============================================================================
# UTILITY FUNCTIONS
# ============================================================================

def safe_divide(numerator: float, denominator: float, default: float = 0.0) -> float:
    """Safe division with default fallback."""
    if denominator == 0:
        return default
    return numerator / denominator


def similarity(a: float, b: float) -> float:
    """Smaller over larger, scaled to [0, 100]; 0 when both are zero."""
    return safe_divide(min(a, b), max(a, b)) * 100


def pick_winner(values: Dict[str, float], participants: List[str]) -> Tuple[str, float]:
    """Participant with the highest value; ties go to the earlier participant."""
    winner, best = "", -1.0
    for p in participants:
        if values[p] > best:
            winner, best = p, values[p]
    return winner, max(best, 0.0)


def count_hits(content: str, words: List[str]) -> int:
    """Number of listed words/phrases occurring in lowercase content."""
    return sum(1 for w in words if w in content)


def is_heart(e: str) -> bool:
    return "❤" in e or e in HEART_EMOJIS


def emoji_personality(emoji_counts: Dict[str, int]) -> str:
    """Label from a sender's single most used emoji."""
    if not emoji_counts:
        return EMOJI_PERSONALITY_NONE

    dominant, best = "", 0
    for e, count in emoji_counts.items():
        if count > best:
            dominant, best = e, count

    if "❤" in dominant:
        return "romantic"
    for emojis, label in EMOJI_PERSONALITIES:
        if dominant in emojis:
            return label
    return EMOJI_PERSONALITY_DEFAULT


def sleep_pattern(night: int, morning: int) -> str:
    if night > morning * 2:
        return "nightOwl"
    if morning > night * 2:
        return "earlyBird"
    return "balanced"


def _is_night(hour: int) -> bool:
    start, end = config.NIGHT_HOURS
    return hour >= start or hour < end


def _is_morning(hour: int) -> bool:
    start, end = config.MORNING_HOURS
    return start <= hour < end


def _longest_runs(senders: List[str], participants: List[str]) -> Dict[str, int]:
    """Longest streak of consecutive messages per sender."""
    runs = participant_map(participants, 0)
    current, length = None, 0
    for sender in senders:
        length = length + 1 if sender == current else 1
        current = sender
        runs[sender] = max(runs[sender], length)
    return runs


# ============================================================================
# COMPATIBILITY
# ============================================================================

def compatibility_scores(
    participants: List[str],
    funny_words: Dict[str, int],
    sleep_types: Dict[str, str],
    avg_lengths: Dict[str, float],
    emoji_by_user: Dict[str, Dict[str, int]],
) -> Optional[Dict[str, float]]:
    """Pairwise scores for exactly two participants, else None."""
    if len(participants) != 2:
        return None

    p1, p2 = participants
    comedy = similarity(funny_words[p1], funny_words[p2])
    timing = (
        config.TIME_COMPATIBILITY_MATCH
        if sleep_types[p1] == sleep_types[p2]
        else config.TIME_COMPATIBILITY_MISMATCH
    )
    communication = similarity(avg_lengths[p1], avg_lengths[p2])

    set1 = set(emoji_by_user.get(p1, {}))
    set2 = set(emoji_by_user.get(p2, {}))
    union = set1 | set2
    emoji_score = (
        len(set1 & set2) / len(union) * 100
        if union
        else config.EMOJI_COMPATIBILITY_DEFAULT
    )

    return {
        "comedy_compatibility": comedy,
        "time_compatibility": float(timing),
        "communication_compatibility": communication,
        "emoji_compatibility": float(emoji_score),
        "overall_compatibility": (comedy + timing + communication + emoji_score) / 4,
    }


# ============================================================================
# MAIN ANALYSIS
# ============================================================================

def analyze_relationship(df: pd.DataFrame, analysis: Dict[str, Any]) -> Dict[str, Any]:
    """Enrich the aggregate with relationship_analysis."""
    participants = analysis["participants"]
    logger.info(f"Relationship analysis for {len(participants)} participants")

    romantic = participant_map(participants, 0)
    hearts = participant_map(participants, 0)
    apologies = participant_map(participants, 0)
    arguments = participant_map(participants, 0)
    funny = participant_map(participants, 0)
    laughs = participant_map(participants, 0)
    food = participant_map(participants, 0)
    photos = participant_map(participants, 0)
    night = participant_map(participants, 0)
    morning = participant_map(participants, 0)
    questions = participant_map(participants, 0)
    caps_words = participant_map(participants, 0)
    total_words = participant_map(participants, 0)
    char_counts = participant_map(participants, 0)
    msg_counts = participant_map(participants, 0)
    excuses = {p: {kind: 0 for kind in EXCUSE_PHRASES} for p in participants}
    longest = {"sender": "", "length": 0, "preview": ""}

    for row in df.itertuples(index=False):
        sender = row.sender
        raw = row.content
        content = raw.lower()
        hour = row.timestamp.hour

        msg_counts[sender] += 1
        char_counts[sender] += len(raw)

        if len(raw) > longest["length"]:
            limit = config.LONGEST_MESSAGE_PREVIEW_CHARS
            longest = {
                "sender": sender,
                "length": len(raw),
                "preview": raw[:limit] + ("..." if len(raw) > limit else ""),
            }

        if _is_night(hour):
            night[sender] += 1
        if _is_morning(hour):
            morning[sender] += 1

        romantic[sender] += count_hits(content, ROMANTIC_WORDS)
        apologies[sender] += count_hits(content, APOLOGY_WORDS)
        arguments[sender] += count_hits(content, ARGUMENT_WORDS)
        funny[sender] += count_hits(content, HUMOR_WORDS)
        food[sender] += count_hits(content, FOOD_WORDS)
        for kind, phrases in EXCUSE_PHRASES.items():
            excuses[sender][kind] += count_hits(content, phrases)

        if any(is_heart(e) for e in row.emojis):
            hearts[sender] += 1
        if any(e in LAUGH_EMOJIS for e in row.emojis):
            laughs[sender] += 1

        if row.type == "media" and row.media_type == "image":
            photos[sender] += 1

        if row.type == "text":
            words = raw.split()
            total_words[sender] += len(words)
            caps_words[sender] += sum(
                1 for w in words if len(w) > 2 and w == w.upper() and w != w.lower()
            )
            if "?" in raw:
                questions[sender] += 1

    avg_lengths = {p: safe_divide(char_counts[p], msg_counts[p]) for p in participants}
    sleep_types = {p: sleep_pattern(night[p], morning[p]) for p in participants}

    most_romantic, romantic_score = pick_winner(
        {p: romantic[p] + hearts[p] * 2 for p in participants}, participants
    )
    most_apologetic, _ = pick_winner(apologies, participants)
    most_argumentative, _ = pick_winner(arguments, participants)
    funniest, humor_score = pick_winner(
        {p: funny[p] + laughs[p] * 2 for p in participants}, participants
    )
    most_talkative, _ = pick_winner(avg_lengths, participants)
    food_lover, _ = pick_winner(food, participants)
    selfie_taker, _ = pick_winner(photos, participants)

    total_apologies = sum(apologies.values())
    total_arguments = sum(arguments.values())
    conflict_resolution = safe_divide(total_apologies, total_arguments, 1.0) * 100

    favorite_excuse = {}
    for p in participants:
        kind, count = "", 0
        for k, v in excuses[p].items():
            if v > count:
                kind, count = k, v
        favorite_excuse[p] = kind

    emoji_by_user = analysis["emoji_stats"]["emoji_counts_by_user"]
    response_avg = analysis.get("response_time_average", {})

    slow_person, slow_time = "", 0.0
    best = -1.0
    for p in participants:
        t = response_avg.get(p, 0.0)
        if t > best:
            slow_person, slow_time, best = p, t, t

    relationship = {
        "romantic_analysis": {
            "romantic_word_counts": romantic,
            "heart_emoji_counts": hearts,
            "most_romantic_person": most_romantic,
            "romantic_score": romantic_score,
        },
        "conflict_analysis": {
            "apology_word_counts": apologies,
            "argument_word_counts": arguments,
            "most_apologetic_person": most_apologetic,
            "most_argumentative_person": most_argumentative,
            "conflict_resolution_score": conflict_resolution,
        },
        "humor_analysis": {
            "funny_word_counts": funny,
            "laugh_emoji_counts": laughs,
            "funniest_person": funniest,
            "humor_score": humor_score,
        },
        "timing_analysis": {
            "night_owl_score": night,
            "early_bird_score": morning,
            "sleep_pattern_type": sleep_types,
        },
        "talkativeness_analysis": {
            "average_message_length": avg_lengths,
            "longest_message": longest,
            "most_talkative_person": most_talkative,
        },
        "funny_stats": {
            "excuse_analysis": excuses,
            "favorite_excuse": favorite_excuse,
            "food_obsession": food,
            "food_lover": food_lover,
            "photo_share_count": photos,
            "selfie_taker": selfie_taker,
            "emoji_personality": {
                p: emoji_personality(emoji_by_user.get(p, {})) for p in participants
            },
            "slow_responder": {"person": slow_person, "average_time": slow_time},
        },
        "compatibility_scores": compatibility_scores(
            participants, funny, sleep_types, avg_lengths, emoji_by_user
        ),
        "funny_titles": _funny_titles(
            participants, longest, emoji_by_user, response_avg, night,
            caps_words, total_words, questions, df["sender"].tolist(),
        ),
        "personality_types": personality_types(df, participants),
    }

    logger.info(f"Relationship analysis complete (most romantic: {most_romantic or '-'})")
    return {**analysis, "relationship_analysis": relationship}


def _funny_titles(
    participants: List[str],
    longest: Dict[str, Any],
    emoji_by_user: Dict[str, Dict[str, int]],
    response_avg: Dict[str, float],
    night: Dict[str, int],
    caps_words: Dict[str, int],
    total_words: Dict[str, int],
    questions: Dict[str, int],
    senders: List[str],
) -> Dict[str, str]:
    emoji_artist, _ = pick_winner(
        {p: len(emoji_by_user.get(p, {})) for p in participants}, participants
    )

    patience_test, fastest = "", float("inf")
    for p in participants:
        t = response_avg.get(p, 0.0)
        if 0 < t < fastest:
            patience_test, fastest = p, t

    night_bomber, _ = pick_winner(night, participants)
    caps_king, _ = pick_winner(
        {p: safe_divide(caps_words[p], total_words[p]) for p in participants}, participants
    )
    question_machine, _ = pick_winner(questions, participants)
    monolog_master, _ = pick_winner(_longest_runs(senders, participants), participants)

    return {
        "shakespeare": longest["sender"],
        "emoji_artist": emoji_artist,
        "patience_test": patience_test,
        "night_bomber": night_bomber,
        "caps_lock_king": caps_king,
        "question_machine": question_machine,
        "monolog_master": monolog_master,
    }
