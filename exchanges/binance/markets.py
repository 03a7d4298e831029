"""
Binance Futures Market Segments

Binance serves its two futures families from structurally identical REST
APIs that differ only in host, path prefix and symbol schema:

    Segment        Host               Prefix     Symbol model
    -------------  -----------------  ---------  --------------
    USDT-futures   fapi.binance.com   /fapi/v1   FuturesSymbol
    Delivery       dapi.binance.com   /dapi/v1   DeliverySymbol

A MarketSegment captures exactly that difference, so one client class can
serve both.
"""

from typing import Type

from pydantic import BaseModel, ConfigDict

from core.schemas import (
    DeliveryExchangeInformation,
    ExchangeInformation,
    FuturesExchangeInformation,
)


class MarketSegment(BaseModel):
    """
    One Binance futures API family.

    Attributes:
        name: Segment key used for configuration ("futures" or "delivery")
        path_prefix: Versioned path prefix, e.g. "/fapi/v1"
        exchange_info_model: Model that GET {prefix}/exchangeInfo decodes into
    """

    model_config = ConfigDict(frozen=True)

    name: str
    path_prefix: str
    exchange_info_model: Type[ExchangeInformation]

    def path(self, endpoint: str) -> str:
        """
        Full request path for an endpoint.

        Example:
            >>> USDT_FUTURES.path("exchangeInfo")
            '/fapi/v1/exchangeInfo'
        """
        return f"{self.path_prefix}/{endpoint}"


USDT_FUTURES = MarketSegment(
    name="futures",
    path_prefix="/fapi/v1",
    exchange_info_model=FuturesExchangeInformation,
)

DELIVERY = MarketSegment(
    name="delivery",
    path_prefix="/dapi/v1",
    exchange_info_model=DeliveryExchangeInformation,
)

SEGMENTS = {
    USDT_FUTURES.name: USDT_FUTURES,
    DELIVERY.name: DELIVERY,
}
