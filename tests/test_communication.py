"""
Tests for communication dynamics analyzer
"""

import pytest
from chatlens.chatstats import base_analysis
from chatlens.communication import analyze_communication
from chatlens.parser import parse


@pytest.fixture
def dynamics(sample_df):
    return analyze_communication(sample_df, base_analysis(sample_df))["communication_dynamics"]


def test_response_time_distribution(dynamics):
    bob = dynamics["response_times"]["Bob"]
    assert bob["average"] == pytest.approx((5 + 863) / 2)
    assert bob["median"] == pytest.approx(863)
    assert bob["fastest"] == pytest.approx(5)
    assert bob["slowest"] == pytest.approx(863)

    alice = dynamics["response_times"]["Alice"]
    assert alice["average"] == pytest.approx(1)


def test_interaction_flow(dynamics):
    """Media and system lines count as adjacent messages."""
    assert dynamics["interaction_flow"] == {"Alice": {"Bob": 3}, "Bob": {"Alice": 3}}


def test_two_hour_initiations(dynamics):
    assert dynamics["conversation_initiations"] == {"Alice": 1, "Bob": 2}
    assert dynamics["most_active_conversator"] == "Bob"


def test_base_fields_untouched(sample_df):
    base = base_analysis(sample_df)
    result = analyze_communication(sample_df, base)
    assert result["conversation_initiations"] == base["conversation_initiations"]
    assert result["response_time_average"] == base["response_time_average"]


def test_silent_participant_gets_defaults():
    df = parse("\n".join([
        "[01.01.23, 10:00] Alice: merhaba",
        "[01.01.23, 10:01] Bob: <Media omitted>",
    ]))
    dynamics = analyze_communication(df, base_analysis(df))["communication_dynamics"]

    assert dynamics["response_times"]["Bob"] == {
        "average": 0.0, "median": 0.0, "fastest": 0.0, "slowest": 0.0,
    }
    assert dynamics["interaction_flow"] == {"Alice": {"Bob": 0}, "Bob": {"Alice": 1}}
    assert dynamics["avg_response_time"] == 0.0


def test_flow_counts_media_between_text():
    df = parse("\n".join([
        "[01.01.23, 10:00] Alice: merhaba",
        "[01.01.23, 10:01] Bob: <Media omitted>",
        "[01.01.23, 10:02] Alice: güzel",
    ]))
    dynamics = analyze_communication(df, base_analysis(df))["communication_dynamics"]

    assert dynamics["interaction_flow"] == {"Alice": {"Bob": 1}, "Bob": {"Alice": 1}}


def test_same_minute_reply_counts():
    df = parse("\n".join([
        "[01.01.23, 10:00] Alice: geldin mi",
        "[01.01.23, 10:00] Bob: geldim",
        "[01.01.23, 10:04] Alice: tamam",
    ]))
    dynamics = analyze_communication(df, base_analysis(df))["communication_dynamics"]

    assert dynamics["response_times"]["Bob"]["fastest"] == 0.0
    assert dynamics["response_times"]["Alice"]["average"] == pytest.approx(4)
    assert dynamics["avg_response_time"] == pytest.approx(2)


def test_reply_past_cutoff_is_ignored():
    df = parse("\n".join([
        "[01.01.23, 10:00] Alice: merhaba",
        "[02.01.23, 11:00] Bob: selam",
    ]))
    dynamics = analyze_communication(df, base_analysis(df))["communication_dynamics"]

    assert dynamics["response_times"]["Bob"]["average"] == 0.0
    assert dynamics["interaction_flow"]["Bob"] == {"Alice": 1}
