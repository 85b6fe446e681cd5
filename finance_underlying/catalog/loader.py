"""
Loading of the underlying definitions file.

This is the only module in the package that touches the filesystem.
"""

from collections.abc import Hashable
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from finance_underlying.catalog.models import UnderlyingDefinition
from finance_underlying.logging import get_logger

logger = get_logger(__name__)


class LoadError(Exception):
    """Raised when the definitions file is missing, unreadable or malformed."""

    def __init__(self, message: str, path: Path | None = None):
        super().__init__(message)
        self.path = path


class _UniqueKeyLoader(yaml.SafeLoader):
    """SafeLoader that rejects a key repeated within one mapping."""

    def construct_mapping(self, node: yaml.MappingNode, deep: bool = False) -> dict[Any, Any]:
        seen: set[Any] = set()
        for key_node, _ in node.value:
            # "<<" merge keys are expanded by the base class
            if key_node.tag == "tag:yaml.org,2002:merge":
                continue
            key = self.construct_object(key_node, deep=deep)
            if not isinstance(key, Hashable):
                continue
            if key in seen:
                raise yaml.constructor.ConstructorError(
                    "while constructing a mapping",
                    node.start_mark,
                    f"found duplicate key {key!r}",
                    key_node.start_mark,
                )
            seen.add(key)
        return super().construct_mapping(node, deep=deep)


def _fail(message: str, path: Path) -> LoadError:
    logger.error("Failed to load underlyings from %s: %s", path, message)
    return LoadError(message, path=path)


def _build_definition(symbol: Any, fields: Any, path: Path) -> UnderlyingDefinition:
    if not isinstance(symbol, str) or not symbol:
        raise _fail(f"Symbol keys must be non-empty strings, got {symbol!r}", path)
    if not isinstance(fields, dict):
        raise _fail(f"Entry for {symbol} must be a mapping, got {type(fields).__name__}", path)

    declared = fields.get("symbol", symbol)
    if declared != symbol:
        raise _fail(f"Entry {symbol} declares a different symbol {declared!r}", path)

    try:
        return UnderlyingDefinition.model_validate({**fields, "symbol": symbol})
    except ValidationError as e:
        raise _fail(f"Invalid definition for {symbol}: {e}", path) from e


def _warn_case_collisions(symbols: list[str]) -> None:
    seen: dict[str, str] = {}
    for symbol in symbols:
        folded = symbol.casefold()
        if folded in seen:
            logger.warning(
                "Symbols %s and %s differ only by case; lookups are case-sensitive",
                seen[folded],
                symbol,
            )
        else:
            seen[folded] = symbol


def load_definitions(path: Path | str) -> dict[str, UnderlyingDefinition]:
    """
    Load underlying definitions from a YAML (or JSON) file.

    The file must hold a top-level mapping of symbol to field mapping.

    Args:
        path: Location of the definitions file

    Returns:
        Mapping of symbol to its definition

    Raises:
        LoadError: If the file is missing, unreadable, not a mapping of
            mappings, or any entry fails validation
    """
    path = Path(path)

    try:
        # Binary mode lets the YAML reader report bad encodings as YAMLError
        with open(path, "rb") as f:
            data = yaml.load(f, Loader=_UniqueKeyLoader)
    except OSError as e:
        raise _fail(f"Cannot read definitions file: {e}", path) from e
    except yaml.YAMLError as e:
        raise _fail(f"Definitions file is not valid YAML: {e}", path) from e

    if not isinstance(data, dict):
        raise _fail(
            f"Definitions file must contain a mapping, got {type(data).__name__}", path
        )

    definitions = {
        symbol: _build_definition(symbol, fields, path) for symbol, fields in data.items()
    }
    _warn_case_collisions(list(definitions))

    logger.info("Loaded %d underlyings from %s", len(definitions), path)
    return definitions
