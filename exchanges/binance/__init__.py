"""
Binance Futures Connector

General (exchange-level) REST queries for Binance's two futures families:

    USDT-futures (USD-M):  https://fapi.binance.com  /fapi/v1/...
    Delivery (COIN-M):     https://dapi.binance.com  /dapi/v1/...

API Documentation:
    https://binance-docs.github.io/apidocs/futures/en/
    https://binance-docs.github.io/apidocs/delivery/en/

Structure:
    exchanges/binance/
    ├── __init__.py      # This file (public exports)
    ├── api_client.py    # aiohttp REST transport with retry logic
    ├── markets.py       # MarketSegment definitions (prefix + schema)
    └── general.py       # GeneralInfoClient (ping, time, exchangeInfo, symbol lookup)

Example:
    >>> async with BinanceAPIClient.from_settings(USDT_FUTURES) as client:
    ...     general = futures_general(client)
    ...     print(await general.ping())
    pong
"""

from .api_client import BinanceAPIClient
from .general import GeneralInfoClient, delivery_general, futures_general
from .markets import DELIVERY, SEGMENTS, USDT_FUTURES, MarketSegment

__all__ = [
    "BinanceAPIClient",
    "GeneralInfoClient",
    "MarketSegment",
    "DELIVERY",
    "USDT_FUTURES",
    "SEGMENTS",
    "delivery_general",
    "futures_general",
]
