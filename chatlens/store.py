"""
Result store for ChatLens
SQLite-based save/restore of analysis results (JSON encoded)
"""

import sqlite3
import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Optional, Dict, Any

from . import config

logger = logging.getLogger(__name__)

DATETIME_TAG = "__datetime__"

# time_stats histograms keyed by integers; JSON turns them into strings
INT_KEYED_HISTOGRAMS = ("by_hour", "by_day", "by_month")


class AnalysisEncoder(json.JSONEncoder):
    """JSON encoder that tags datetimes as ISO-8601 strings."""

    def default(self, o):
        if isinstance(o, datetime):
            return {DATETIME_TAG: o.isoformat()}
        return super().default(o)


def _decode_object(obj: Dict[str, Any]) -> Any:
    if len(obj) == 1 and DATETIME_TAG in obj:
        return datetime.fromisoformat(obj[DATETIME_TAG])
    return obj


def dumps(analysis: Dict[str, Any], **kwargs) -> str:
    """Serialize an aggregate to JSON."""
    return json.dumps(analysis, cls=AnalysisEncoder, ensure_ascii=False, **kwargs)


def loads(payload: str) -> Dict[str, Any]:
    """Deserialize an aggregate produced by dumps()."""
    analysis = json.loads(payload, object_hook=_decode_object)

    time_stats = analysis.get("time_stats")
    if isinstance(time_stats, dict):
        for key in INT_KEYED_HISTOGRAMS:
            if key in time_stats:
                time_stats[key] = {int(k): v for k, v in time_stats[key].items()}
    return analysis


class ResultStore:
    """SQLite store keeping saved analysis results, newest last."""

    def __init__(self, store_dir: Optional[Path] = None):
        """
        Initialize store.

        Args:
            store_dir: Directory for the database (default from config)
        """
        self.store_dir = Path(store_dir) if store_dir else config.RESULT_STORE_DIR
        self.store_dir.mkdir(parents=True, exist_ok=True)
        self.db_path = self.store_dir / "results.db"

        self._init_db()

    def _init_db(self):
        """Initialize database schema."""
        with sqlite3.connect(self.db_path) as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS results (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    saved_at TEXT NOT NULL,
                    total_messages INTEGER NOT NULL,
                    payload TEXT NOT NULL
                )
            """)
            conn.commit()
        logger.debug(f"Result store initialized at {self.db_path}")

    def save(self, analysis: Dict[str, Any]) -> int:
        """Store an aggregate. Returns its row id."""
        with sqlite3.connect(self.db_path) as conn:
            cursor = conn.execute(
                "INSERT INTO results (saved_at, total_messages, payload) VALUES (?, ?, ?)",
                (datetime.now().isoformat(), analysis.get("total_messages", 0), dumps(analysis)),
            )
            conn.commit()
            row_id = cursor.lastrowid

        logger.info(f"Saved analysis #{row_id} ({analysis.get('total_messages', 0)} messages)")
        return row_id

    def load_last(self) -> Optional[Dict[str, Any]]:
        """Most recently saved aggregate, or None if nothing was saved."""
        with sqlite3.connect(self.db_path) as conn:
            row = conn.execute(
                "SELECT payload FROM results ORDER BY id DESC LIMIT 1"
            ).fetchone()

        if row is None:
            logger.debug("No saved analysis found")
            return None
        return loads(row[0])

    def clear(self) -> int:
        """Delete all saved results."""
        with sqlite3.connect(self.db_path) as conn:
            cursor = conn.execute("DELETE FROM results")
            deleted = cursor.rowcount
            conn.commit()

        logger.info(f"Cleared {deleted} saved results")
        return deleted
