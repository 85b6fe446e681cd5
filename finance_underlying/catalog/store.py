"""
In-memory catalogue of underlying definitions.
"""

import threading
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType

from finance_underlying.catalog import categories
from finance_underlying.catalog.cache import UnderlyingCache
from finance_underlying.catalog.loader import load_definitions
from finance_underlying.catalog.models import Market, UnderlyingDefinition
from finance_underlying.config import get_settings
from finance_underlying.logging import get_logger

logger = get_logger(__name__)


class UnderlyingCatalog:
    """
    Read-only catalogue of underlying definitions keyed by symbol.

    Definitions are fixed at construction. Most callers should use the shared
    instance() rather than building their own.
    """

    def __init__(self, definitions: Mapping[str, UnderlyingDefinition]) -> None:
        """
        Initialize catalogue.

        Args:
            definitions: Mapping of symbol to definition. Copied on construction.

        Raises:
            ValueError: If a key does not match its definition's symbol
        """
        for symbol, definition in definitions.items():
            if definition.symbol != symbol:
                raise ValueError(
                    f"Catalogue key {symbol!r} does not match definition symbol "
                    f"{definition.symbol!r}"
                )

        self._definitions = MappingProxyType(dict(definitions))
        self._cached_underlyings = UnderlyingCache()

        logger.debug("UnderlyingCatalog initialized with %d underlyings", len(self._definitions))

    @classmethod
    def from_file(cls, path: Path | str) -> "UnderlyingCatalog":
        """
        Build a catalogue from a definitions file.

        Raises:
            LoadError: If the file cannot be loaded
        """
        return cls(load_definitions(path))

    @property
    def all_parameters(self) -> Mapping[str, UnderlyingDefinition]:
        """Get the read-only mapping of every definition."""
        return self._definitions

    def get_parameters_for(self, symbol: str) -> UnderlyingDefinition | None:
        """
        Get the definition for a symbol.

        Args:
            symbol: Underlying symbol, matched exactly (case-sensitive)

        Returns:
            Definition or None if not found
        """
        return self._definitions.get(symbol)

    def symbols(self) -> list[str]:
        """Get every known symbol."""
        return list(self._definitions)

    def cached_underlyings(self) -> UnderlyingCache:
        """
        Get the shared store of previously created underlying objects.

        The catalogue never writes to it.
        """
        return self._cached_underlyings

    def get_by_market(self, market: Market | str) -> list[UnderlyingDefinition]:
        """
        Get definitions in a market.

        Args:
            market: Market to filter by

        Returns:
            List of matching definitions
        """
        market = Market(market)
        return [d for d in self._definitions.values() if d.market == market]

    def get_by_submarket(self, submarket: str) -> list[UnderlyingDefinition]:
        """Get definitions in a submarket."""
        return [d for d in self._definitions.values() if d.submarket == submarket]

    def count(self) -> int:
        """Get total number of underlyings."""
        return len(self._definitions)

    def __len__(self) -> int:
        return len(self._definitions)

    def __contains__(self, symbol: object) -> bool:
        return symbol in self._definitions

    available_contract_categories = staticmethod(categories.available_contract_categories)
    available_expiry_types = staticmethod(categories.available_expiry_types)
    available_start_types = staticmethod(categories.available_start_types)
    available_barrier_categories = staticmethod(categories.available_barrier_categories)
    available_iv_categories = staticmethod(categories.available_iv_categories)


_instance: UnderlyingCatalog | None = None
_instance_lock = threading.Lock()


def instance() -> UnderlyingCatalog:
    """
    Get the process-wide catalogue, loading it on first use.

    The definitions file is read at most once, even when several threads race
    on the first call. A failed load leaves no instance behind.

    Raises:
        LoadError: If the first load fails
    """
    global _instance
    if _instance is None:
        with _instance_lock:
            if _instance is None:
                path = get_settings().resolved_definitions_path
                _instance = UnderlyingCatalog.from_file(path)
    return _instance


def reset_instance() -> None:
    """Reset the process-wide catalogue (for testing)."""
    global _instance
    with _instance_lock:
        _instance = None
