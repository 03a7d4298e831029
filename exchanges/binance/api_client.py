"""
Binance REST API Client

This module provides an async HTTP client for the Binance futures REST APIs
(USDT-margined /fapi and coin-margined /dapi).
It handles:
- HTTP GET requests with retry logic
- Rate limit handling (429, 418, 503 errors)
- Mapping failures to TransportError / BinanceAPIError / DecodeError
- Decoding response bodies into Pydantic models

API Documentation:
    https://binance-docs.github.io/apidocs/futures/en/
    https://binance-docs.github.io/apidocs/delivery/en/

Usage:
    async with BinanceAPIClient("https://fapi.binance.com") as client:
        body = await client.get("/fapi/v1/ping")
        server_time = await client.get_typed("/fapi/v1/time", ServerTime)
"""

import asyncio
from typing import Any, Dict, Optional, Type, TypeVar

import aiohttp
from pydantic import BaseModel, ValidationError

from core.config import Settings, settings
from core.errors import BinanceAPIError, DecodeError, TransportError
from core.logging import get_logger, log_api_request, log_api_response
from core.schemas import ErrorPayload


ModelT = TypeVar("ModelT", bound=BaseModel)


class BinanceAPIClient:
    """
    Async HTTP client for one Binance futures REST host.

    Attributes:
        base_url: API host, e.g. "https://fapi.binance.com"
        api_key: Optional API key for X-MBX-APIKEY header
        timeout: Total timeout per attempt in seconds
        max_retries: Attempts for retryable failures
        retry_delay: Base backoff in seconds
        session: aiohttp ClientSession for HTTP requests

    Example:
        >>> async with BinanceAPIClient.from_settings(USDT_FUTURES) as client:
        ...     info = await client.get_typed("/fapi/v1/exchangeInfo", FuturesExchangeInformation)

    Notes:
        - Uses context manager for automatic session cleanup
        - A session passed to the constructor is used but never closed here
        - asyncio.CancelledError is never caught, so cancelling the caller
          cancels the in-flight request
    """

    RETRYABLE_STATUSES = (429, 418, 503)

    def __init__(
        self,
        base_url: str,
        api_key: Optional[str] = None,
        timeout: float = 10,
        max_retries: int = 3,
        retry_delay: float = 1.5,
        session: Optional[aiohttp.ClientSession] = None
    ):
        """
        Initialize the Binance API client.

        Args:
            base_url: API host without trailing slash
            api_key: Optional Binance API key (not needed for public endpoints)
            timeout: Request timeout in seconds
            max_retries: Maximum attempts for retryable failures
            retry_delay: Base backoff in seconds
            session: Optional externally managed aiohttp session
        """
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.timeout = timeout
        self.max_retries = max_retries
        self.retry_delay = retry_delay
        self.logger = get_logger(__name__)
        self.session: Optional[aiohttp.ClientSession] = session
        self._owns_session = session is None

    @classmethod
    def from_settings(cls, segment, config: Optional[Settings] = None) -> "BinanceAPIClient":
        """
        Build a client for a market segment from configuration.

        Args:
            segment: MarketSegment (USDT_FUTURES or DELIVERY)
            config: Settings to use (defaults to the global settings)

        Returns:
            Unopened client; use it with `async with`
        """
        config = config or settings
        return cls(
            base_url=config.base_url_for(segment.name),
            api_key=config.binance_api_key or None,
            timeout=config.request_timeout,
            max_retries=config.max_retries,
            retry_delay=config.retry_delay
        )

    # ============================================
    # Context Manager for Session Management
    # ============================================

    async def __aenter__(self):
        if self.session is None:
            self.session = aiohttp.ClientSession()
            self._owns_session = True
            self.logger.debug(f"BinanceAPIClient session created for {self.base_url}")
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        if self.session and self._owns_session:
            await self.session.close()
            self.session = None
            self.logger.debug(f"BinanceAPIClient session closed for {self.base_url}")

    # ============================================
    # HTTP Request Handler with Retry Logic
    # ============================================

    def _headers(self) -> Dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self.api_key:
            headers["X-MBX-APIKEY"] = self.api_key
        return headers

    def _error_from_response(self, path: str, status: int, body: bytes) -> TransportError:
        """Binance error payloads become BinanceAPIError, anything else TransportError"""
        try:
            payload = ErrorPayload.model_validate_json(body)
        except ValidationError:
            text = body.decode("utf-8", errors="replace")
            return TransportError(f"HTTP {status} on {path}: {text}", status=status)
        return BinanceAPIError(status, payload.code, payload.msg)

    async def _get(self, path: str, params: Optional[Dict[str, Any]] = None) -> bytes:
        """
        Make GET request to the Binance API with retry logic.

        Args:
            path: API endpoint path (e.g., "/fapi/v1/time")
            params: Optional query parameters

        Returns:
            Raw response body (undecoded bytes)

        Raises:
            TransportError: Session not open, retries exhausted, or
                non-retryable HTTP status
            BinanceAPIError: Non-retryable status with a Binance error payload

        Rate Limit Handling:
            - 429: Too many requests
            - 418: IP banned (temporary)
            - 503: Service unavailable

            Retry delay: retry_delay * (attempt + 1)
        """
        if not self.session:
            raise TransportError("Client session not initialized. Use 'async with' statement.")

        url = f"{self.base_url}{path}"
        loop = asyncio.get_running_loop()
        last_error = "no attempts made"
        last_status: Optional[int] = None

        log_api_request(self.base_url, path, params)

        for attempt in range(self.max_retries):
            delay = self.retry_delay * (attempt + 1)
            is_last = attempt + 1 >= self.max_retries
            started = loop.time()

            try:
                async with self.session.get(
                    url,
                    params=params,
                    headers=self._headers(),
                    timeout=aiohttp.ClientTimeout(total=self.timeout)
                ) as resp:
                    body = await resp.read()
                    log_api_response(self.base_url, path, resp.status, loop.time() - started)

                    if resp.status == 200:
                        self.logger.debug(f"GET {path} - Success (attempt {attempt + 1})")
                        return body

                    if resp.status not in self.RETRYABLE_STATUSES:
                        raise self._error_from_response(path, resp.status, body)

                    last_status = resp.status
                    last_error = f"HTTP {resp.status}: {body.decode('utf-8', errors='replace')}"
                    self.logger.warning(
                        f"Rate limited (HTTP {resp.status}) on {path} "
                        f"(attempt {attempt + 1}/{self.max_retries})"
                    )

            except asyncio.TimeoutError:
                last_status = None
                last_error = f"timeout after {self.timeout}s"
                self.logger.warning(f"Timeout on {path} (attempt {attempt + 1}/{self.max_retries})")

            except aiohttp.ClientError as e:
                last_status = None
                last_error = str(e) or type(e).__name__
                self.logger.warning(f"Request failed on {path}: {last_error} (attempt {attempt + 1}/{self.max_retries})")

            if not is_last:
                await asyncio.sleep(delay)

        raise TransportError(
            f"Failed to fetch {url} after {self.max_retries} attempts: {last_error}",
            status=last_status
        )

    # ============================================
    # Public Request Methods
    # ============================================

    async def get(self, path: str, params: Optional[Dict[str, Any]] = None) -> bytes:
        """
        GET a path and return the raw body.

        Raises:
            TransportError: On any network or HTTP failure
        """
        return await self._get(path, params)

    async def get_typed(
        self,
        path: str,
        model: Type[ModelT],
        params: Optional[Dict[str, Any]] = None
    ) -> ModelT:
        """
        GET a path and decode the JSON body into a model.

        Args:
            path: API endpoint path
            model: Pydantic model to validate the body against
            params: Optional query parameters

        Returns:
            Validated model instance

        Raises:
            TransportError: On any network or HTTP failure
            DecodeError: If the body is not valid JSON or does not match the model
        """
        body = await self._get(path, params)

        try:
            return model.model_validate_json(body)
        except ValidationError as e:
            raise DecodeError(path, str(e)) from e
