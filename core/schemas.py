"""
Response Schemas

This module defines Pydantic models for the Binance futures "general"
endpoints: server time and exchange information.

Field names follow Python conventions (snake_case); the Binance wire names
(camelCase) are declared as aliases, so models are validated straight from
the raw JSON body:

    ServerTime.model_validate_json('{"serverTime": 1499827319559}')

Models:
    - ServerTime: Server clock in milliseconds since epoch
    - RateLimit: One rate limit rule (REQUEST_WEIGHT, ORDERS, ...)
    - Asset: Margin asset info (USDT-futures only)
    - Symbol filters: PRICE_FILTER, LOT_SIZE, MARKET_LOT_SIZE, ...
    - FuturesSymbol / DeliverySymbol: One tradable instrument per segment
    - ExchangeInformation: Snapshot of trading rules and symbols
    - ErrorPayload: Binance error body {"code", "msg"}

All models are immutable. Only the fields that the client itself relies on
are required (`serverTime`, `symbols`, `symbol`); everything else is
optional so that Binance adding or dropping metadata does not break decoding.
"""

from datetime import datetime
from decimal import Decimal
from typing import Annotated, Generic, List, Literal, Optional, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field

from core.utils.time import to_utc_datetime


# ============================================
# Base Model
# ============================================

class BinanceModel(BaseModel):
    """
    Base model for all Binance response schemas.

    - Immutable (frozen)
    - Accepts both wire aliases and Python field names
    - Ignores fields we don't model
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        extra="ignore"
    )


# ============================================
# Server Time
# ============================================

class ServerTime(BinanceModel):
    """
    Server clock as reported by GET {prefix}/time.

    Response Format:
        {"serverTime": 1499827319559}

    Example:
        >>> t = ServerTime(server_time=1704110400000)
        >>> t.as_datetime
        datetime.datetime(2024, 1, 1, 12, 0, tzinfo=datetime.timezone.utc)
    """

    server_time: int = Field(
        ...,
        alias="serverTime",
        description="Server time in milliseconds since epoch"
    )

    @property
    def as_datetime(self) -> datetime:
        """Server time as a timezone-aware UTC datetime"""
        return to_utc_datetime(self.server_time)


# ============================================
# Exchange-wide Metadata
# ============================================

class RateLimit(BinanceModel):
    """
    One rate limit rule.

    Response Format:
        {
          "rateLimitType": "REQUEST_WEIGHT",
          "interval": "MINUTE",
          "intervalNum": 1,
          "limit": 2400
        }
    """

    rate_limit_type: str = Field(..., alias="rateLimitType")
    interval: str
    interval_num: int = Field(..., alias="intervalNum")
    limit: int


class Asset(BinanceModel):
    """Margin asset entry (only present in USDT-futures exchange info)"""

    asset: str
    margin_available: Optional[bool] = Field(default=None, alias="marginAvailable")
    auto_asset_exchange: Optional[Decimal] = Field(default=None, alias="autoAssetExchange")


# ============================================
# Symbol Filters
# ============================================

class PriceFilter(BinanceModel):
    """PRICE_FILTER: price range and tick size"""

    filter_type: Literal["PRICE_FILTER"] = Field(..., alias="filterType")
    min_price: Decimal = Field(..., alias="minPrice")
    max_price: Decimal = Field(..., alias="maxPrice")
    tick_size: Decimal = Field(..., alias="tickSize")


class LotSizeFilter(BinanceModel):
    """LOT_SIZE: quantity range and step for limit orders"""

    filter_type: Literal["LOT_SIZE"] = Field(..., alias="filterType")
    min_qty: Decimal = Field(..., alias="minQty")
    max_qty: Decimal = Field(..., alias="maxQty")
    step_size: Decimal = Field(..., alias="stepSize")


class MarketLotSizeFilter(BinanceModel):
    """MARKET_LOT_SIZE: quantity range and step for market orders"""

    filter_type: Literal["MARKET_LOT_SIZE"] = Field(..., alias="filterType")
    min_qty: Decimal = Field(..., alias="minQty")
    max_qty: Decimal = Field(..., alias="maxQty")
    step_size: Decimal = Field(..., alias="stepSize")


class MaxNumOrdersFilter(BinanceModel):
    """MAX_NUM_ORDERS: open order cap per symbol"""

    filter_type: Literal["MAX_NUM_ORDERS"] = Field(..., alias="filterType")
    limit: int


class MaxNumAlgoOrdersFilter(BinanceModel):
    """MAX_NUM_ALGO_ORDERS: open algo (stop/take-profit) order cap per symbol"""

    filter_type: Literal["MAX_NUM_ALGO_ORDERS"] = Field(..., alias="filterType")
    limit: int


class MinNotionalFilter(BinanceModel):
    """MIN_NOTIONAL: minimum order value (USDT-futures)"""

    filter_type: Literal["MIN_NOTIONAL"] = Field(..., alias="filterType")
    notional: Decimal


class PercentPriceFilter(BinanceModel):
    """PERCENT_PRICE: allowed distance of the order price from the mark price"""

    filter_type: Literal["PERCENT_PRICE"] = Field(..., alias="filterType")
    multiplier_up: Decimal = Field(..., alias="multiplierUp")
    multiplier_down: Decimal = Field(..., alias="multiplierDown")
    multiplier_decimal: Optional[Decimal] = Field(default=None, alias="multiplierDecimal")


class OtherFilter(BinanceModel):
    """Any filter type not modeled above; raw fields are kept as extras"""

    model_config = ConfigDict(extra="allow")

    filter_type: str = Field(..., alias="filterType")


# Tried left to right: OtherFilter must stay last
SymbolFilter = Annotated[
    Union[
        PriceFilter,
        LotSizeFilter,
        MarketLotSizeFilter,
        MaxNumOrdersFilter,
        MaxNumAlgoOrdersFilter,
        MinNotionalFilter,
        PercentPriceFilter,
        OtherFilter,
    ],
    Field(union_mode="left_to_right")
]


# ============================================
# Symbols
# ============================================

class Symbol(BinanceModel):
    """
    One tradable instrument.

    Fields shared by both futures segments. `symbol` is the only required
    field: it is what symbol lookup compares against. Binance sends it in
    uppercase (e.g. "BTCUSDT", "BTCUSD_PERP").
    """

    symbol: str = Field(
        ...,
        description="Ticker name in uppercase",
        examples=["BTCUSDT", "BTCUSD_PERP", "ETHUSD_240927"]
    )

    pair: Optional[str] = None
    contract_type: Optional[str] = Field(default=None, alias="contractType")
    delivery_date: Optional[int] = Field(default=None, alias="deliveryDate")
    onboard_date: Optional[int] = Field(default=None, alias="onboardDate")

    base_asset: Optional[str] = Field(default=None, alias="baseAsset")
    quote_asset: Optional[str] = Field(default=None, alias="quoteAsset")
    margin_asset: Optional[str] = Field(default=None, alias="marginAsset")

    price_precision: Optional[int] = Field(default=None, alias="pricePrecision")
    quantity_precision: Optional[int] = Field(default=None, alias="quantityPrecision")
    base_asset_precision: Optional[int] = Field(default=None, alias="baseAssetPrecision")
    quote_precision: Optional[int] = Field(default=None, alias="quotePrecision")

    maint_margin_percent: Optional[Decimal] = Field(default=None, alias="maintMarginPercent")
    required_margin_percent: Optional[Decimal] = Field(default=None, alias="requiredMarginPercent")
    trigger_protect: Optional[Decimal] = Field(default=None, alias="triggerProtect")
    liquidation_fee: Optional[Decimal] = Field(default=None, alias="liquidationFee")
    market_take_bound: Optional[Decimal] = Field(default=None, alias="marketTakeBound")

    underlying_type: Optional[str] = Field(default=None, alias="underlyingType")
    underlying_sub_type: List[str] = Field(default_factory=list, alias="underlyingSubType")

    filters: List[SymbolFilter] = Field(default_factory=list)
    time_in_force: List[str] = Field(default_factory=list, alias="timeInForce")

    def get_filter(self, filter_type: str) -> Optional[BaseModel]:
        """
        Return the first filter of the given type, or None.

        Example:
            >>> symbol.get_filter("PRICE_FILTER").tick_size
            Decimal('0.10')
        """
        for item in self.filters:
            if item.filter_type == filter_type:
                return item
        return None


class FuturesSymbol(Symbol):
    """
    USDT-margined futures symbol (GET /fapi/v1/exchangeInfo).

    Response Format (abridged):
        {
          "symbol": "BTCUSDT",
          "pair": "BTCUSDT",
          "contractType": "PERPETUAL",
          "status": "TRADING",
          "baseAsset": "BTC",
          "quoteAsset": "USDT",
          "marginAsset": "USDT",
          "filters": [...],
          "orderTypes": ["LIMIT", "MARKET", ...],
          ...
        }
    """

    status: Optional[str] = None
    settle_plan: Optional[int] = Field(default=None, alias="settlePlan")
    order_types: List[str] = Field(default_factory=list, alias="orderTypes")


class DeliverySymbol(Symbol):
    """
    Coin-margined delivery futures symbol (GET /dapi/v1/exchangeInfo).

    Differs from the USDT-futures shape:
        - "contractStatus" instead of "status"
        - "contractSize" and "equalQtyPrecision" are present
        - order types are listed under "OrderType" (capitalized)
    """

    contract_status: Optional[str] = Field(default=None, alias="contractStatus")
    contract_size: Optional[int] = Field(default=None, alias="contractSize")
    equal_qty_precision: Optional[int] = Field(default=None, alias="equalQtyPrecision")
    order_types: List[str] = Field(default_factory=list, alias="OrderType")


# ============================================
# Exchange Information
# ============================================

SymbolT = TypeVar("SymbolT", bound=Symbol)


class ExchangeInformation(BinanceModel, Generic[SymbolT]):
    """
    Snapshot of trading rules and the list of tradable symbols.

    Parameterized by the segment's symbol model; use the concrete aliases
    FuturesExchangeInformation / DeliveryExchangeInformation.

    Response Format (abridged):
        {
          "timezone": "UTC",
          "serverTime": 1565613908500,
          "rateLimits": [...],
          "exchangeFilters": [],
          "symbols": [{...}, {...}]
        }

    Notes:
        - Symbol names are assumed unique within one snapshot; this is
          not validated
        - Regenerated on every request, never cached
    """

    timezone: str = "UTC"
    server_time: Optional[int] = Field(default=None, alias="serverTime")
    rate_limits: List[RateLimit] = Field(default_factory=list, alias="rateLimits")
    exchange_filters: List[dict] = Field(default_factory=list, alias="exchangeFilters")
    assets: List[Asset] = Field(default_factory=list)
    symbols: List[SymbolT]


FuturesExchangeInformation = ExchangeInformation[FuturesSymbol]
DeliveryExchangeInformation = ExchangeInformation[DeliverySymbol]


# ============================================
# Error Payload
# ============================================

class ErrorPayload(BinanceModel):
    """
    Body Binance sends with a failed request.

    Response Format:
        {"code": -1121, "msg": "Invalid symbol."}
    """

    code: int
    msg: str
