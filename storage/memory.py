"""Dictionary-backed store, used in tests and for throwaway sessions."""

from typing import Dict, List, Optional
from storage.base import KeyValueStore


class InMemoryStore(KeyValueStore):
    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def keys(self) -> List[str]:
        return sorted(self._data)
