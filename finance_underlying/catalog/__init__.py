"""
Underlying catalogue.

Provides:
- Typed models for underlying definitions
- Loading of the packaged definitions file
- The shared, lazily built catalogue instance
- Fixed contract taxonomies
"""

from finance_underlying.catalog.cache import UnderlyingCache
from finance_underlying.catalog.categories import (
    available_barrier_categories,
    available_contract_categories,
    available_expiry_types,
    available_iv_categories,
    available_start_types,
)
from finance_underlying.catalog.loader import LoadError, load_definitions
from finance_underlying.catalog.models import (
    InstrumentType,
    Market,
    MarketConvention,
    UnderlyingDefinition,
)
from finance_underlying.catalog.store import UnderlyingCatalog, instance, reset_instance

__all__ = [
    "InstrumentType",
    "LoadError",
    "Market",
    "MarketConvention",
    "UnderlyingCache",
    "UnderlyingCatalog",
    "UnderlyingDefinition",
    "available_barrier_categories",
    "available_contract_categories",
    "available_expiry_types",
    "available_iv_categories",
    "available_start_types",
    "instance",
    "load_definitions",
    "reset_instance",
]
