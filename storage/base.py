"""Base interface for key-value stores."""

from abc import ABC, abstractmethod
from typing import List, Optional


class KeyValueStore(ABC):
    """Abstract string key-value store.

    Month documents are stored under their YYYY-MM key; auxiliary keys such
    as "lastMonth" share the same namespace.
    """

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Get the value stored under key.

        Args:
            key: Storage key.

        Returns:
            Stored string, or None if nothing is stored under key.
        """
        pass

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store value under key, replacing any previous value.

        Args:
            key: Storage key.
            value: String to store.
        """
        pass

    @abstractmethod
    def keys(self) -> List[str]:
        """Get all stored keys, sorted."""
        pass
