"""
Pydantic models for underlying definitions.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Market(str, Enum):
    """Market an underlying is traded in."""

    COMMODITIES = "commodities"
    FOREX = "forex"
    FUTURES = "futures"
    INDICES = "indices"
    STOCKS = "stocks"
    VOLIDX = "volidx"


class InstrumentType(str, Enum):
    """Instrument classification of an underlying."""

    COMMODITIES = "commodities"
    FOREX = "forex"
    FUTURE = "future"
    INDIVIDUAL_STOCK = "individualstock"
    SMART_FX = "smart_fx"
    STOCK_INDEX = "stockindex"
    SYNTHETIC = "synthetic"


class MarketConvention(BaseModel):
    """
    Volatility quoting convention for an underlying.

    Mirrors the Bloomberg composite vol data conventions. Values are carried
    through as-is; nothing in this package interprets them.

    Known values:
    - atm_setting: atm_delta_neutral_straddle, atm_forward, atm_spot
    - delta_premium_adjusted: 1 if the hedge quantity is adjusted by a premium
      paid in foreign currency, else 0
    - delta_style: spot_delta, forward_delta
    - rr (risk reversal): call-put, put-call
    - bf (butterfly): (call+put)/2-atm, Base currency strangle - ATM,
      Foreign currency strangle - ATM
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    atm_setting: str
    delta_premium_adjusted: int = Field(..., ge=0, le=1)
    delta_style: str
    rr: str
    bf: str


class UnderlyingDefinition(BaseModel):
    """
    A tradable underlying as described in the definitions file.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    symbol: str = Field(
        ...,
        description="Unique symbol (e.g., frxEURUSD)",
        min_length=1,
    )
    display_name: str = Field(
        ...,
        description="User-friendly English name",
    )
    asset: str = Field(
        ...,
        description="Asset being quoted, e.g. USD for frxUSDJPY",
    )
    quoted_currency: str = Field(
        ...,
        description="Currency the asset is quoted in",
    )
    market: Market
    submarket: str
    instrument_type: InstrumentType
    exchange_name: str = Field(
        ...,
        description="Name of the exchange this underlying is traded on",
    )
    pip_size: float = Field(
        ...,
        description="Minimum quoting increment",
        gt=0,
    )
    market_convention: MarketConvention
