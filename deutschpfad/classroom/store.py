"""
Key-value stores for learner state.

Everything the app persists (XP, streak, lesson scores, the review pool blob)
lives under flat string keys, so persistence is a three-method interface:
- SqliteStore: durable store in ~/.deutschpfad/state.db
- MemoryStore: dict-backed store for tests and throwaway sessions
"""

import json
import logging
import sqlite3
from pathlib import Path
from typing import Any, Optional, Protocol, Union


logger = logging.getLogger(__name__)

Value = Union[str, int]

DEFAULT_STATE_DIR = Path.home() / ".deutschpfad"
DEFAULT_STATE_DB = DEFAULT_STATE_DIR / "state.db"


class KeyValueStore(Protocol):
    def get(self, key: str, default: Any = None) -> Any: ...

    def set(self, key: str, value: Value) -> None: ...

    def remove(self, key: str) -> None: ...


class MemoryStore:
    """In-process store; contents are lost with the object."""

    def __init__(self, initial: Optional[dict[str, Value]] = None):
        self._data: dict[str, Value] = dict(initial or {})

    def get(self, key: str, default: Any = None) -> Any:
        return self._data.get(key, default)

    def set(self, key: str, value: Value) -> None:
        self._data[key] = value

    def remove(self, key: str) -> None:
        self._data.pop(key, None)

    def keys(self) -> list[str]:
        return sorted(self._data)


class SqliteStore:
    """
    Persist values in a single SQLite table.

    Values are stored JSON-encoded so ints come back as ints. Each call opens
    its own connection, so one store can be shared across Streamlit reruns.
    """

    def __init__(self, db_path: Optional[Path] = None):
        """
        Initialize the store.

        Args:
            db_path: Path to the SQLite file (default: ~/.deutschpfad/state.db)
        """
        self.db_path = Path(db_path) if db_path else DEFAULT_STATE_DB
        self._ensure_database()

    def _ensure_database(self):
        """Create database and table if they don't exist."""
        self.db_path.parent.mkdir(parents=True, exist_ok=True)

        conn = sqlite3.connect(str(self.db_path))
        try:
            conn.executescript("""
                CREATE TABLE IF NOT EXISTS kv (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL,
                    updated_at TEXT NOT NULL DEFAULT CURRENT_TIMESTAMP
                );
            """)
            conn.commit()
        finally:
            conn.close()

    def _get_connection(self) -> sqlite3.Connection:
        """Get a new database connection."""
        conn = sqlite3.connect(str(self.db_path))
        conn.row_factory = sqlite3.Row
        return conn

    def get(self, key: str, default: Any = None) -> Any:
        conn = self._get_connection()
        try:
            row = conn.execute("SELECT value FROM kv WHERE key = ?", (key,)).fetchone()
        finally:
            conn.close()
        if row is None:
            return default
        try:
            return json.loads(row["value"])
        except json.JSONDecodeError:
            logger.warning(f"Discarding undecodable value for key {key!r}")
            return default

    def set(self, key: str, value: Value) -> None:
        conn = self._get_connection()
        try:
            conn.execute(
                """INSERT INTO kv (key, value, updated_at)
                   VALUES (?, ?, CURRENT_TIMESTAMP)
                   ON CONFLICT(key) DO UPDATE SET
                     value = excluded.value,
                     updated_at = excluded.updated_at""",
                (key, json.dumps(value, ensure_ascii=False))
            )
            conn.commit()
        finally:
            conn.close()

    def remove(self, key: str) -> None:
        conn = self._get_connection()
        try:
            conn.execute("DELETE FROM kv WHERE key = ?", (key,))
            conn.commit()
        finally:
            conn.close()

    def keys(self) -> list[str]:
        conn = self._get_connection()
        try:
            return [row["key"] for row in conn.execute("SELECT key FROM kv ORDER BY key")]
        finally:
            conn.close()
