"""
Binance Futures General Endpoints

Read-only exchange-level queries shared by both futures segments:

    GET {prefix}/ping           - connectivity check
    GET {prefix}/time           - server time
    GET {prefix}/exchangeInfo   - trading rules and symbol list

where prefix is "/fapi/v1" (USDT-futures) or "/dapi/v1" (delivery).

Usage:
    async with BinanceAPIClient.from_settings(DELIVERY) as client:
        general = delivery_general(client)
        symbol = await general.get_symbol_info("btcusd_perp")
"""

from core.errors import UnknownSymbol
from core.logging import get_logger
from core.schemas import ExchangeInformation, ServerTime, Symbol
from .api_client import BinanceAPIClient
from .markets import DELIVERY, USDT_FUTURES, MarketSegment


class GeneralInfoClient:
    """
    Exchange-level queries for one Binance futures segment.

    Stateless: every call issues a fresh request, nothing is cached, and
    concurrent calls share nothing but the underlying HTTP session. Errors
    from the transport (TransportError, BinanceAPIError, DecodeError)
    propagate unchanged; no method retries, logs or wraps them.

    Attributes:
        client: Open BinanceAPIClient for the segment's host
        segment: Market segment supplying path prefix and symbol schema
    """

    def __init__(self, client: BinanceAPIClient, segment: MarketSegment):
        self.client = client
        self.segment = segment
        self.logger = get_logger(__name__)

    async def ping(self) -> str:
        """
        Test connectivity.

        The response body is discarded; any successful response yields "pong".
        """
        await self.client.get(self.segment.path("ping"))
        return "pong"

    async def get_server_time(self) -> ServerTime:
        """Check server time"""
        return await self.client.get_typed(self.segment.path("time"), ServerTime)

    async def exchange_info(self) -> ExchangeInformation:
        """
        Obtain exchange information: current trading rules and symbol list.

        Returns:
            The segment's ExchangeInformation model (FuturesSymbol or
            DeliverySymbol entries)
        """
        self.logger.info(f"Fetching exchange info ({self.segment.name})")
        return await self.client.get_typed(
            self.segment.path("exchangeInfo"),
            self.segment.exchange_info_model
        )

    async def get_symbol_info(self, symbol: str) -> Symbol:
        """
        Get information for one symbol.

        Matching is case-insensitive: the input is uppercased and compared
        against each entry's `symbol`. The first match wins; duplicate names
        within one snapshot are not checked for.

        Args:
            symbol: Ticker name in any case (e.g. "btcusdt", "BTCUSD_PERP")

        Returns:
            The matching Symbol

        Raises:
            UnknownSymbol: No entry matches; carries `symbol` as passed in
        """
        upper_symbol = symbol.upper()
        info = await self.exchange_info()

        for item in info.symbols:
            if item.symbol == upper_symbol:
                return item

        raise UnknownSymbol(symbol)


def futures_general(client: BinanceAPIClient) -> GeneralInfoClient:
    """General endpoints for USDT-margined futures (/fapi/v1)"""
    return GeneralInfoClient(client, USDT_FUTURES)


def delivery_general(client: BinanceAPIClient) -> GeneralInfoClient:
    """General endpoints for coin-margined delivery futures (/dapi/v1)"""
    return GeneralInfoClient(client, DELIVERY)
