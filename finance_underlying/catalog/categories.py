"""
Fixed contract taxonomies.

Order is significant and must not change.
"""

CONTRACT_CATEGORIES = ("asian", "digits", "callput", "endsinout", "touchnotouch", "staysinout")

# Bet sub types
EXPIRY_TYPES = ("intraday", "daily", "tick")

START_TYPES = ("spot", "forward")

BARRIER_CATEGORIES = ("euro_atm", "euro_non_atm", "american", "non_financial", "asian")

# Contract categories priced off implied volatility
IV_CATEGORIES = ("callput", "endsinout", "touchnotouch", "staysinout")


def available_contract_categories() -> list[str]:
    """Return all available contract categories."""
    return list(CONTRACT_CATEGORIES)


def available_expiry_types() -> list[str]:
    """Return all available expiry types."""
    return list(EXPIRY_TYPES)


def available_start_types() -> list[str]:
    """Return all available start types."""
    return list(START_TYPES)


def available_barrier_categories() -> list[str]:
    """Return all available barrier categories."""
    return list(BARRIER_CATEGORIES)


def available_iv_categories() -> list[str]:
    """Return all available implied volatility contract categories."""
    return list(IV_CATEGORIES)
