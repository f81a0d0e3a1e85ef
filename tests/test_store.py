"""
Tests for the result store
"""

import pytest
from datetime import datetime
from chatlens.pipeline import run_pipeline
from chatlens.store import ResultStore, dumps, loads


@pytest.fixture
def store(tmp_path):
    return ResultStore(store_dir=tmp_path / "store")


def test_load_last_when_empty(store):
    assert store.load_last() is None


def test_save_and_restore(store, sample_text):
    analysis = run_pipeline(sample_text)
    store.save(analysis)

    restored = store.load_last()
    assert restored["participants"] == analysis["participants"]
    assert restored["date_range"]["start"] == datetime(2023, 1, 1, 9, 0)
    assert restored["time_stats"]["by_hour"] == analysis["time_stats"]["by_hour"]
    assert restored["sentiment_analysis"]["overall_score"] == pytest.approx(
        analysis["sentiment_analysis"]["overall_score"]
    )


def test_load_last_returns_newest(store):
    store.save({"total_messages": 1})
    store.save({"total_messages": 2})
    assert store.load_last() == {"total_messages": 2}


def test_clear(store):
    store.save({"total_messages": 1})
    assert store.clear() == 1
    assert store.load_last() is None


def test_datetime_round_trip():
    payload = {"when": datetime(2023, 5, 1, 12, 30), "nested": [{"at": datetime(2024, 1, 1)}]}
    assert loads(dumps(payload)) == payload
