"""
Tests for sentiment engine
"""

import pytest
from chatlens.chatstats import base_analysis
from chatlens.sentiment import (
    analyze_message_intensity,
    analyze_message_sentiment,
    analyze_sentiment,
    classify_score,
)


def test_romantic_message_is_positive():
    result = analyze_message_sentiment("selam canım ❤️")
    assert result["score"] == pytest.approx(0.6)
    assert result["sentiment"] == "positive"
    assert result["dominant_category"] == "romantic"


def test_humor_category():
    result = analyze_message_sentiment("haha çok iyi")
    assert result["score"] == pytest.approx(0.5)
    assert "humor" in result["emotional_categories"]


def test_amplifier():
    assert analyze_message_sentiment("çok mutluyum")["score"] == pytest.approx(0.3)


def test_negation_flips_sign():
    assert analyze_message_sentiment("çok mutluyum")["score"] > 0
    assert analyze_message_sentiment("mutlu değilim")["score"] <= 0
    assert analyze_message_sentiment("hiç güzel değil")["score"] < 0


def test_bigram_match():
    result = analyze_message_sentiment("kusura bakma")
    assert result["emotional_categories"] == {"regret": 0.5}


def test_score_is_clamped():
    result = analyze_message_sentiment("harika harika harika harika harika")
    assert result["score"] == 1.0


def test_no_match_is_neutral():
    result = analyze_message_sentiment("yarın görüşürüz")
    assert result == {
        "score": 0.0,
        "sentiment": "neutral",
        "emotional_categories": {},
        "dominant_category": None,
    }


@pytest.mark.parametrize("score,label", [
    (0.2, "neutral"),
    (-0.2, "neutral"),
    (0.21, "positive"),
    (-0.21, "negative"),
])
def test_thresholds(score, label):
    assert classify_score(score) == label


def test_intensity():
    assert analyze_message_intensity("") == 0.0
    assert analyze_message_intensity("tamam") == 0.0
    assert analyze_message_intensity("ASLA OLMAZ!!!") == 1.0
    assert analyze_message_intensity("selam!") == pytest.approx(0.2)


def test_aggregate(sample_df):
    result = analyze_sentiment(sample_df, base_analysis(sample_df))["sentiment_analysis"]

    assert len(result["sentiment_by_message"]) == 6
    assert set(result["sentiment_by_user"]) == {"Alice", "Bob"}
    assert result["overall_score"] == pytest.approx(1.4 / 6)
    assert result["happiest_day"]["date"] == "2023-01-01"
    assert len(result["most_intense_messages"]) == 5
    for m in result["sentiment_by_message"]:
        assert -1 <= m["score"] <= 1
        assert (m["sentiment"] == "neutral") == (-0.2 <= m["score"] <= 0.2)
