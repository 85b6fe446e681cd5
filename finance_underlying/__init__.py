"""
Finance Underlying

Read-only access to the catalogue of underlying asset definitions:
- Lazily loaded, process-wide catalogue instance
- Lookup of definitions by symbol
- Fixed contract taxonomies used to classify contracts
"""

__version__ = "0.1.0"

from finance_underlying.catalog import LoadError, UnderlyingCatalog, UnderlyingDefinition, instance
from finance_underlying.config import Settings, get_settings

__all__ = [
    "__version__",
    "LoadError",
    "Settings",
    "UnderlyingCatalog",
    "UnderlyingDefinition",
    "get_settings",
    "instance",
]
