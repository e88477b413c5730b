"""Protocol for the key-value string store (implemented in memory, and with SQL Alchemy in sql_repository.py)"""

from typing import Protocol


class KeyValueStore(Protocol):
    """Persistence layer orchestration. Values are opaque strings, the caller owns the format."""

    def get(self, key: str) -> str | None:
        """Get the value stored under key, if any."""
        ...

    def set(self, key: str, value: str) -> None:
        """Create or overwrite the value under key."""
        ...

    def remove(self, key: str) -> None:
        """Drop the key. Removing a missing key is not an error."""
        ...


class InMemoryStore:
    """Dictionary backed store. Lives as long as the process does."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def remove(self, key: str) -> None:
        self._data.pop(key, None)

    def keys(self) -> list[str]:
        return list(self._data.keys())
