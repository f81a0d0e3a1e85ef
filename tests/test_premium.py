"""
Tests for premium / lexical analyzer
"""

from datetime import date, datetime
from chatlens.chatstats import base_analysis
from chatlens.premium import analyze_premium, custom_date_range_analysis, word_frequency


def test_word_frequency_filters():
    counts = word_frequency(["Merhaba, çok iyi mi?", "merhaba!"])
    assert counts == {"merhaba": 2}


def test_premium_features(sample_df):
    premium = analyze_premium(sample_df, base_analysis(sample_df))["premium_features"]

    assert premium["word_frequency"]["kaldım"] == 2
    assert "çok" not in premium["word_frequency"]
    assert premium["topics"][0] == {"word": "kaldım", "count": 2}
    assert premium["most_active_days"] == [
        {"date": "2023-01-01", "count": 5},
        {"date": "2023-01-02", "count": 2},
        {"date": "2023-01-03", "count": 1},
    ]
    assert premium["media_cadence"] == {
        "Alice": {"daily_average": 1.0, "peak_day": "2023-01-02", "peak_count": 1},
        "Bob": {"daily_average": 0.0, "peak_day": "", "peak_count": 0},
    }


def test_custom_range_includes_whole_end_day(sample_df):
    result = custom_date_range_analysis(sample_df, date(2023, 1, 2), date(2023, 1, 2))

    assert result["total_messages"] == 2
    assert result["participants"] == ["Alice", "Bob"]
    assert result["time_stats"]["by_date"] == {"2023-01-02": 2}
    assert result["date_range"]["end"] == datetime(2023, 1, 2, 10, 2)


def test_custom_range_accepts_iso_strings(sample_df):
    result = custom_date_range_analysis(sample_df, "2023-01-01", "2023-01-01")
    assert result["total_messages"] == 5
    assert result["time_stats"]["most_active_date"] == "2023-01-01"


def test_custom_range_empty(sample_df):
    result = custom_date_range_analysis(sample_df, "2024-01-01", "2024-01-31")
    assert result["participants"] == []
    assert result["total_messages"] == 0
    assert result["date_range"] == {"start": None, "end": None}


def test_custom_range_empty_has_same_shape(sample_df):
    empty = custom_date_range_analysis(sample_df, "2024-01-01", "2024-01-31")
    full = custom_date_range_analysis(sample_df, "2023-01-01", "2023-01-03")
    assert set(empty) == set(full)
    assert "emoji_stats" not in full
