"""
Shared keyed store for derived underlying objects.

The catalog owns one of these but never writes to it; collaborators use it to
memoize objects they build around a definition. Entries are only considered
stale if the definitions are reloaded, which does not happen within a process.
"""

import threading
from collections.abc import Callable
from typing import Any

from finance_underlying.logging import get_logger

logger = get_logger(__name__)


class UnderlyingCache:
    """
    Thread-safe mapping of symbol to an arbitrary cached object.

    All access goes through a re-entrant lock, so a factory passed to
    get_or_create may itself read from the cache.
    """

    def __init__(self) -> None:
        self._entries: dict[str, Any] = {}
        self._lock = threading.RLock()

    def get(self, symbol: str) -> Any | None:
        """
        Get a cached object.

        Args:
            symbol: Underlying symbol

        Returns:
            Cached object, or None if absent
        """
        with self._lock:
            return self._entries.get(symbol)

    def set(self, symbol: str, value: Any) -> None:
        """Store an object, replacing any existing entry."""
        with self._lock:
            self._entries[symbol] = value

    def get_or_create(self, symbol: str, factory: Callable[[], Any]) -> Any:
        """
        Return the cached object, building it with factory if absent.

        The factory runs at most once per symbol, even under concurrent callers.
        """
        with self._lock:
            if symbol not in self._entries:
                self._entries[symbol] = factory()
            return self._entries[symbol]

    def delete(self, symbol: str) -> bool:
        """
        Delete a cached object.

        Returns:
            True if an entry was removed
        """
        with self._lock:
            if symbol in self._entries:
                del self._entries[symbol]
                return True
            return False

    def clear(self) -> None:
        """Drop every entry."""
        with self._lock:
            count = len(self._entries)
            self._entries.clear()
        logger.debug("Cleared %d cached underlyings", count)

    def keys(self) -> list[str]:
        with self._lock:
            return list(self._entries)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, symbol: object) -> bool:
        with self._lock:
            return symbol in self._entries
