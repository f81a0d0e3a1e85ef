"""
Communication dynamics analyzer for ChatLens
Response-time distributions, interaction flow between senders and
conversation initiations (2-hour rule) over text messages.
"""

import logging
from typing import Any, Dict, List
import pandas as pd

from . import config
from .chatstats import compute_initiations, participant_map

logger = logging.getLogger(__name__)


def _response_stats(times: List[float]) -> Dict[str, float]:
    """Mean, median, fastest and slowest response in minutes."""
    if not times:
        return {"average": 0.0, "median": 0.0, "fastest": 0.0, "slowest": 0.0}

    ordered = sorted(times)
    return {
        "average": sum(ordered) / len(ordered),
        # upper median for even counts
        "median": ordered[len(ordered) // 2],
        "fastest": ordered[0],
        "slowest": ordered[-1],
    }


def analyze_communication(df: pd.DataFrame, analysis: Dict[str, Any]) -> Dict[str, Any]:
    """
    Enrich the aggregate with communication_dynamics.

    Response times and initiations use text messages only. A response is
    a text message whose previous text message came from another sender,
    at most 24h earlier. The interaction flow counts every adjacent pair
    of messages from different senders, media and system lines included.
    """
    participants = analysis["participants"]
    text = df[df["type"] == "text"].reset_index(drop=True)

    response_times = participant_map(participants, [])
    flow = {p: {q: 0 for q in participants if q != p} for p in participants}

    pairs = pd.DataFrame({"sender": df["sender"], "previous": df["sender"].shift(1)})
    crossed = pairs[pairs["previous"].notna() & (pairs["sender"] != pairs["previous"])]
    for (sender, prev_sender), count in crossed.groupby(["sender", "previous"]).size().items():
        flow[sender][prev_sender] += int(count)

    cutoff_minutes = config.RESPONSE_CUTOFF_SECONDS / 60.0

    senders = text["sender"].tolist()
    stamps = text["timestamp"].tolist()

    for i in range(1, len(senders)):
        prev_sender, sender = senders[i - 1], senders[i]
        if sender == prev_sender:
            continue

        gap = (stamps[i] - stamps[i - 1]).total_seconds() / 60.0
        if gap <= cutoff_minutes:
            response_times[sender].append(gap)

    initiations = compute_initiations(
        text, participants, config.DYNAMICS_CONVERSATION_GAP_SECONDS
    ) if len(text) else participant_map(participants, 0)

    most_active = ""
    best = 0
    for sender, count in initiations.items():
        if count > best:
            most_active, best = sender, count

    all_times = [t for times in response_times.values() for t in times]

    logger.info(f"Communication dynamics: {len(all_times)} responses across {len(participants)} senders")

    return {
        **analysis,
        "communication_dynamics": {
            "response_times": {p: _response_stats(response_times[p]) for p in participants},
            "interaction_flow": flow,
            "conversation_initiations": initiations,
            "most_active_conversator": most_active,
            "avg_response_time": sum(all_times) / len(all_times) if all_times else 0.0,
        },
    }
