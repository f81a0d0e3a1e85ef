"""
Tests for the statistical core
"""

import pytest
from datetime import datetime
from chatlens.chatstats import base_analysis, empty_analysis, most_active
from chatlens.parser import parse


@pytest.fixture
def stats(sample_df):
    return base_analysis(sample_df)


def test_participants_in_first_appearance_order(stats):
    assert stats["participants"] == ["Alice", "Bob"]
    assert stats["total_messages"] == 8


def test_message_stats(stats):
    by_sender = {s["sender"]: s for s in stats["message_stats"]}
    assert by_sender["Alice"]["count"] == 5
    assert by_sender["Bob"]["count"] == 3
    assert by_sender["Alice"]["average_length"] > 0


def test_time_histograms(stats):
    time_stats = stats["time_stats"]
    assert time_stats["by_hour"] == {9: 4, 10: 2, 12: 1, 23: 1}
    # 2023-01-01 was a Sunday
    assert time_stats["by_day"] == {0: 5, 1: 2, 2: 1}
    assert time_stats["by_month"] == {0: 8}
    assert time_stats["by_date"] == {"2023-01-01": 5, "2023-01-02": 2, "2023-01-03": 1}
    assert time_stats["most_active_hour"] == 9
    assert time_stats["most_active_day"] == 0
    assert time_stats["most_active_date"] == "2023-01-01"
    assert stats["longest_conversation_date"] == "2023-01-01"


def test_most_active_tie_picks_first_key():
    assert most_active({"2023-01-01": 2, "2023-01-02": 2}) == "2023-01-01"


def test_conversation_initiations_three_hour_gap(stats):
    assert stats["conversation_initiations"] == {"Alice": 3, "Bob": 1}


def test_response_time_average(stats):
    avg = stats["response_time_average"]
    assert avg["Bob"] == pytest.approx((5 + 863 + 2) / 3)
    assert avg["Alice"] == pytest.approx((1 + 630) / 2)


def test_response_over_24h_is_excluded():
    df = parse("\n".join([
        "[01.01.23, 10:00] Alice: merhaba",
        "[02.01.23, 11:00] Bob: geç cevap",
    ]))
    stats = base_analysis(df)
    assert stats["response_time_average"] == {"Alice": 0.0, "Bob": 0.0}


def test_scenario_response_time(scenario_text):
    stats = base_analysis(parse(scenario_text))
    assert stats["response_time_average"]["Bob"] == pytest.approx(5.0)


def test_longest_silence(stats):
    silence = stats["longest_silence"]
    assert silence["start"] == datetime(2023, 1, 2, 10, 2)
    assert silence["end"] == datetime(2023, 1, 3, 12, 0)
    assert silence["duration"] == pytest.approx(25 + 58 / 60)


def test_media_stats(stats):
    media = stats["media_stats"]
    assert media["total_media"] == 1
    assert media["by_type"] == {"image": 1}
    assert media["by_user"] == {"Alice": {"image": 1}, "Bob": {}}


def test_first_message_and_date_range(stats):
    assert stats["first_message"]["content"] == "merhaba"
    assert stats["date_range"]["start"] == datetime(2023, 1, 1, 9, 0)
    assert stats["date_range"]["end"] == datetime(2023, 1, 3, 12, 0)


def test_empty_table():
    df = parse("[01.01.23, 10:00] Alice: selam").iloc[0:0]
    assert base_analysis(df) == empty_analysis()
