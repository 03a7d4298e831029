"""
Configuration Management Module

This module loads and validates client configuration from environment
variables (.env file).

Uses Pydantic Settings for automatic validation and type conversion.

Key Features:
- Loads configuration from .env file
- Per-segment base URLs (USDT-futures, coin-margined delivery)
- Testnet switch
- Transport tuning (timeout, retries, backoff)

Usage:
    from core.config import settings

    print(settings.base_url_for("futures"))    # https://fapi.binance.com
    print(settings.base_url_for("delivery"))   # https://dapi.binance.com
"""

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """
    Client Settings

    Values are loaded from environment variables or the .env file
    (case-insensitive).

    Attributes:
        binance_futures_base_url: Base URL for USDT-margined futures (/fapi)
        binance_delivery_base_url: Base URL for coin-margined futures (/dapi)
        binance_testnet: Route both segments to the futures testnet
        binance_testnet_base_url: Futures testnet base URL (serves /fapi and /dapi)
        binance_api_key: API key sent as X-MBX-APIKEY (optional for public endpoints)
        request_timeout: Total timeout per HTTP request in seconds
        max_retries: Attempts per request for retryable failures
        retry_delay: Base backoff in seconds (delay = retry_delay * attempt)
        log_level: Logging level
    """

    # ============================================
    # Binance API Configuration
    # ============================================

    binance_futures_base_url: str = Field(
        default="https://fapi.binance.com",
        description="USDT-margined futures API base URL"
    )

    binance_delivery_base_url: str = Field(
        default="https://dapi.binance.com",
        description="Coin-margined delivery futures API base URL"
    )

    binance_testnet: bool = Field(
        default=False,
        description="Use the futures testnet for all segments"
    )

    binance_testnet_base_url: str = Field(
        default="https://testnet.binancefuture.com",
        description="Futures testnet base URL"
    )

    binance_api_key: str = Field(
        default="",
        validation_alias=AliasChoices("binance_api_key", "binance_key"),
        description="Binance API key (optional for public endpoints)"
    )

    # ============================================
    # Transport Configuration
    # ============================================

    request_timeout: float = Field(
        default=10,
        description="HTTP request timeout in seconds"
    )

    max_retries: int = Field(
        default=3,
        description="Maximum attempts for rate-limited or timed-out requests"
    )

    retry_delay: float = Field(
        default=1.5,
        description="Base retry backoff in seconds"
    )

    # ============================================
    # Logging
    # ============================================

    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
        case_sensitive=False
    )

    # ============================================
    # Helpers
    # ============================================

    def base_url_for(self, segment_name: str) -> str:
        """
        Base URL for a market segment.

        Args:
            segment_name: "futures" or "delivery"

        Returns:
            Base URL without trailing slash

        Raises:
            ValueError: If the segment name is unknown

        Example:
            >>> settings.base_url_for("delivery")
            'https://dapi.binance.com'
        """
        if segment_name not in ("futures", "delivery"):
            raise ValueError(f"Unknown market segment: '{segment_name}'")

        if self.binance_testnet:
            return self.binance_testnet_base_url.rstrip("/")

        if segment_name == "delivery":
            return self.binance_delivery_base_url.rstrip("/")
        return self.binance_futures_base_url.rstrip("/")


# ============================================
# Global Settings Instance
# ============================================

settings = Settings()


def validate_configuration(config: Settings = None) -> None:
    """
    Validate configuration before creating clients.

    Args:
        config: Settings to check (defaults to the global settings)

    Raises:
        ValueError: If any setting is invalid
    """
    # Import logger here to avoid circular import
    # (logging.py imports config.py, so we can't import at module level)
    from core.logging import logger

    config = config or settings

    for name in ("binance_futures_base_url", "binance_delivery_base_url", "binance_testnet_base_url"):
        url = getattr(config, name)
        if not url.startswith(("http://", "https://")):
            raise ValueError(f"Invalid {name.upper()}: '{url}'. Must start with http:// or https://")

    if config.request_timeout <= 0:
        raise ValueError(f"Invalid REQUEST_TIMEOUT: {config.request_timeout}. Must be positive")

    if config.max_retries < 1:
        raise ValueError(f"Invalid MAX_RETRIES: {config.max_retries}. Must be at least 1")

    if config.retry_delay < 0:
        raise ValueError(f"Invalid RETRY_DELAY: {config.retry_delay}. Cannot be negative")

    if config.log_level.upper() not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Invalid LOG_LEVEL: '{config.log_level}'. "
            f"Must be one of: {', '.join(VALID_LOG_LEVELS)}"
        )

    logger.info("Configuration validated successfully")
    logger.info(f"USDT-futures API: {config.base_url_for('futures')}")
    logger.info(f"Delivery API: {config.base_url_for('delivery')}")
    logger.info(f"Testnet: {'on' if config.binance_testnet else 'off'}")
