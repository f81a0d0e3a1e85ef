"""
Tests for the personality-type cascade
"""

from chatlens.personality import GENERIC_LABELS, PERSONALITY_RULES, classify_personality


def make_profile(**overrides):
    profile = {
        "avg_length": 35.0,
        "message_count": 100,
        "emoji_ratio": 0.2,
        "morning": 0.2,
        "afternoon": 0.4,
        "evening": 0.4,
        "night": 0.0,
    }
    profile.update(overrides)
    return profile


def test_rule_order_is_fixed():
    labels = [label for _, label in PERSONALITY_RULES]
    assert labels[:4] == ["night vampire", "dawn patrol", "quick-draw specialist", "novelist"]
    assert labels[-1] == "social butterfly"
    assert len(labels) == 21


def test_first_matching_rule_wins():
    # matches both "night vampire" and "novelist"
    profile = make_profile(night=0.6, morning=0.0, avg_length=200.0)
    assert classify_personality(profile) == "night vampire"

    profile = make_profile(avg_length=200.0)
    assert classify_personality(profile) == "novelist"


def test_emoji_rules():
    assert classify_personality(make_profile(emoji_ratio=2.5)) == "emoji overlord"
    assert classify_personality(make_profile(emoji_ratio=1.0)) == "emoji enthusiast"
    assert classify_personality(make_profile(emoji_ratio=0.0)) == "minimalist"
    assert classify_personality(make_profile(emoji_ratio=0.0, avg_length=45.0)) == "serious writer"


def test_small_counts():
    assert classify_personality(make_profile(message_count=5)) == "ghost"
    assert classify_personality(make_profile(message_count=30, avg_length=12.0)) == "silent observer"


def test_generic_fallback_indexed_by_count():
    assert classify_personality(make_profile(message_count=100)) == GENERIC_LABELS[0]
    assert classify_personality(make_profile(message_count=101)) == GENERIC_LABELS[1]
