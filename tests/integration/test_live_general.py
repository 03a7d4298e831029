"""
Live Tests for the General Endpoints

These tests hit the real Binance futures APIs and are skipped unless
BINANCE_LIVE_TESTS=1 is set. Set BINANCE_TESTNET=true to run them against
the futures testnet instead of production.

Run with:
    BINANCE_LIVE_TESTS=1 pytest tests/integration/test_live_general.py -v
"""

import os

import pytest
import pytest_asyncio

from core.config import Settings
from core.errors import UnknownSymbol
from exchanges.binance import DELIVERY, USDT_FUTURES, BinanceAPIClient, GeneralInfoClient


pytestmark = pytest.mark.skipif(
    os.getenv("BINANCE_LIVE_TESTS") != "1",
    reason="Live Binance tests disabled (set BINANCE_LIVE_TESTS=1)"
)

KNOWN_SYMBOLS = {
    USDT_FUTURES.name: "BTCUSDT",
    DELIVERY.name: "BTCUSD_PERP",
}


@pytest_asyncio.fixture(params=[USDT_FUTURES, DELIVERY], ids=lambda s: s.name)
async def general(request):
    segment = request.param
    async with BinanceAPIClient.from_settings(segment, Settings()) as client:
        yield GeneralInfoClient(client, segment)


@pytest.mark.asyncio
async def test_ping(general):
    assert await general.ping() == "pong"


@pytest.mark.asyncio
async def test_get_server_time(general):
    server_time = await general.get_server_time()
    assert server_time.server_time > 1_600_000_000_000


@pytest.mark.asyncio
async def test_exchange_info(general):
    info = await general.exchange_info()
    assert len(info.symbols) > 0
    assert len(info.rate_limits) > 0


@pytest.mark.asyncio
async def test_get_symbol_info(general):
    name = KNOWN_SYMBOLS[general.segment.name]
    symbol = await general.get_symbol_info(name.lower())
    assert symbol.symbol == name


@pytest.mark.asyncio
async def test_get_symbol_info_unknown(general):
    with pytest.raises(UnknownSymbol) as exc_info:
        await general.get_symbol_info("not_a_symbol")
    assert exc_info.value.symbol == "not_a_symbol"
