"""Key-value storage backends for month documents."""

from storage.base import KeyValueStore
from storage.memory import InMemoryStore
from storage.sqlite import SqliteStore

__all__ = ["KeyValueStore", "InMemoryStore", "SqliteStore"]
