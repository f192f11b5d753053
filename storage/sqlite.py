"""SQLite-backed key-value store."""

from typing import List, Optional
from storage.base import KeyValueStore


class SqliteStore(KeyValueStore):
    """Store backed by the kv_store table.

    Args:
        db_manager: Database manager providing connections. The schema must
            already be migrated.
    """

    def __init__(self, db_manager):
        """Initialize the store.

        Args:
            db_manager: Database manager instance for database operations.
        """
        self.db_manager = db_manager

    def get(self, key: str) -> Optional[str]:
        with self.db_manager.connect() as conn:
            cursor = conn.execute("SELECT value FROM kv_store WHERE key = ?", (key,))
            row = cursor.fetchone()
            return row[0] if row else None

    def set(self, key: str, value: str) -> None:
        with self.db_manager.connect() as conn:
            conn.execute(
                """
                INSERT INTO kv_store (key, value) VALUES (?, ?)
                ON CONFLICT(key) DO UPDATE SET
                    value = excluded.value,
                    updated_at = CURRENT_TIMESTAMP
                """,
                (key, value),
            )
            conn.commit()

    def keys(self) -> List[str]:
        """Get all stored keys, sorted.

        Returns:
            List of keys.
        """
        with self.db_manager.connect() as conn:
            cursor = conn.execute("SELECT key FROM kv_store ORDER BY key")
            return [row[0] for row in cursor.fetchall()]
