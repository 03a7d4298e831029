"""
Client Exceptions

Every failure surfaced by this package is one of the exceptions below.
They are raised where the failure is detected and propagated unchanged.

Hierarchy:
    BinanceError
    ├── TransportError        - network/HTTP-level failure
    │   └── BinanceAPIError   - Binance returned an error payload {"code", "msg"}
    ├── DecodeError           - response body does not match the expected model
    └── UnknownSymbol         - symbol lookup finished without a match

Usage:
    try:
        info = await general.get_symbol_info("btcusdt")
    except UnknownSymbol as e:
        print(f"No such symbol: {e.symbol}")
    except TransportError as e:
        print(f"Request failed (HTTP {e.status}): {e}")
"""

from typing import Optional


class BinanceError(Exception):
    """Base class for all errors raised by this package"""


class TransportError(BinanceError):
    """
    Network or HTTP-level failure.

    Attributes:
        status: HTTP status code, or None when no response was received
            (connection refused, timeout, ...)
    """

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.status = status


class BinanceAPIError(TransportError):
    """
    Binance answered with a non-success status and an error payload.

    Binance error bodies look like:
        {"code": -1121, "msg": "Invalid symbol."}

    Attributes:
        code: Binance error code (negative integer)
        msg: Binance error message
    """

    def __init__(self, status: int, code: int, msg: str):
        super().__init__(f"Binance error {code}: {msg} (HTTP {status})", status=status)
        self.code = code
        self.msg = msg


class DecodeError(BinanceError):
    """
    Response body could not be decoded into the expected model.

    Attributes:
        path: API path whose response failed to decode
    """

    def __init__(self, path: str, detail: str):
        super().__init__(f"Failed to decode response from {path}: {detail}")
        self.path = path


class UnknownSymbol(BinanceError):
    """
    Symbol not present in exchange information.

    Attributes:
        symbol: The symbol exactly as the caller supplied it (not uppercased)
    """

    def __init__(self, symbol: str):
        super().__init__(f"Unknown symbol: {symbol}")
        self.symbol = symbol
