"""
Environment table abstraction.

The validator reads and writes variables through an EnvironmentTable rather
than touching os.environ directly, so tests can inject an isolated store.
"""
import os
from typing import Dict, Iterator, MutableMapping, Optional


class EnvironmentTable:
    """Mutable string key-value store backed by a mapping (os.environ by default)."""

    def __init__(self, store: Optional[MutableMapping[str, str]] = None):
        self._store = os.environ if store is None else store

    @classmethod
    def from_dict(cls, values: Dict[str, str] = None) -> "EnvironmentTable":
        """Create an isolated table holding a copy of ``values``."""
        return cls(dict(values or {}))

    def __contains__(self, key: str) -> bool:
        return key in self._store

    def __getitem__(self, key: str) -> str:
        return self._store[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._store)

    def __len__(self) -> int:
        return len(self._store)

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self._store.get(key, default)

    def set(self, key: str, value: str) -> None:
        self._store[key] = value

    def setdefault(self, key: str, value: str) -> bool:
        """Write ``value`` only if ``key`` is absent.

        Returns:
            True if the value was written
        """
        if key in self._store:
            return False
        self._store[key] = value
        return True

    def snapshot(self) -> Dict[str, str]:
        return dict(self._store)
