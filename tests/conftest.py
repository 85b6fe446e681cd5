"""
Pytest configuration and shared fixtures.
"""

import copy
from collections.abc import Callable, Generator
from pathlib import Path
from typing import Any

import pytest
import yaml

EURUSD_FIELDS: dict[str, Any] = {
    "display_name": "EUR/USD",
    "pip_size": 0.0001,
    "market": "forex",
    "submarket": "major_pairs",
    "asset": "EUR",
    "quoted_currency": "USD",
    "instrument_type": "forex",
    "exchange_name": "FOREX",
    "market_convention": {
        "atm_setting": "atm_spot",
        "delta_premium_adjusted": 0,
        "delta_style": "spot_delta",
        "rr": "call-put",
        "bf": "(call+put)/2-atm",
    },
}


@pytest.fixture
def eurusd_fields() -> dict[str, Any]:
    """Field mapping for a single frxEURUSD definition."""
    return copy.deepcopy(EURUSD_FIELDS)


@pytest.fixture
def write_definitions(tmp_path: Path) -> Callable[[Any], Path]:
    """Write a definitions mapping to a YAML file and return its path."""

    def _write(data: Any, name: str = "underlyings.yml") -> Path:
        path = tmp_path / name
        path.write_text(yaml.safe_dump(data), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def definitions_file(write_definitions: Callable[[Any], Path]) -> Path:
    """Definitions file holding only frxEURUSD."""
    return write_definitions({"frxEURUSD": copy.deepcopy(EURUSD_FIELDS)})


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure local environment settings don't leak into tests."""
    for var in [
        "FINANCE_UNDERLYING_DEFINITIONS_PATH",
        "FINANCE_UNDERLYING_LOG_LEVEL",
        "FINANCE_UNDERLYING_LOG_JSON",
    ]:
        monkeypatch.delenv(var, raising=False)


@pytest.fixture(autouse=True)
def reset_singletons() -> Generator[None, None, None]:
    """Reset module-level singletons around each test."""
    from finance_underlying.catalog import store
    from finance_underlying.config import get_settings

    get_settings.cache_clear()
    store.reset_instance()

    yield

    get_settings.cache_clear()
    store.reset_instance()
