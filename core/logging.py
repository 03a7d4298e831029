"""
Unified Logging Configuration

Sets up one logging configuration for the whole package. Modules get their
logger through get_logger(__name__) so everything lives under the
"futuresgeneral" namespace and can be filtered or silenced in one place.

Usage:
    from core.logging import get_logger

    logger = get_logger(__name__)
    logger.info("Fetching exchange info")

Configuration:
    Log level is controlled by the LOG_LEVEL setting in .env file
    (defaults to INFO).
"""

import logging
import sys
from typing import Optional


ROOT_LOGGER_NAME = "futuresgeneral"


def setup_logging(
    log_level: str = "INFO",
    log_format: Optional[str] = None,
    include_timestamp: bool = True,
    include_module: bool = True
) -> logging.Logger:
    """
    Configure and return the package logger.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: Custom log format string (uses default if None)
        include_timestamp: Include timestamp in log messages
        include_module: Include logger name in log messages

    Returns:
        logging.Logger: Configured logger instance

    Example:
        >>> logger = setup_logging(log_level="DEBUG")
        >>> logger.info("Client started")
        2024-01-01 12:00:00 [INFO] futuresgeneral: Client started
    """
    if log_format is None:
        format_parts = []

        if include_timestamp:
            format_parts.append("%(asctime)s")

        format_parts.append("[%(levelname)s]")

        if include_module:
            format_parts.append("%(name)s")

        format_parts.append("%(message)s")

        log_format = " ".join(format_parts)

    level = getattr(logging, log_level.upper(), logging.INFO)

    logging.basicConfig(
        level=level,
        format=log_format,
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True
    )

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level)

    return logger


# ============================================
# Initialize Logger with Settings
# ============================================

try:
    from core.config import settings
    log_level = settings.log_level
except ImportError:
    log_level = "INFO"

logger = setup_logging(log_level=log_level)


# ============================================
# Convenience Functions
# ============================================

def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for a specific module.

    Args:
        name: Name for the logger (typically __name__)

    Returns:
        logging.Logger: Logger named "futuresgeneral.<name>"

    Example:
        >>> get_logger("exchanges.binance.general").name
        'futuresgeneral.exchanges.binance.general'
    """
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def set_log_level(level: str) -> None:
    """
    Change the log level at runtime.

    Args:
        level: New log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    logging.getLogger().setLevel(getattr(logging, level.upper(), logging.INFO))


# ============================================
# Log Helper Functions
# ============================================

def log_api_request(base_url: str, path: str, params: Optional[dict] = None) -> None:
    """
    Log an outgoing API request.

    Example:
        >>> log_api_request("https://fapi.binance.com", "/fapi/v1/time")
        [DEBUG] API Request: https://fapi.binance.com /fapi/v1/time
    """
    if params:
        logger.debug(f"API Request: {base_url} {path} | Params: {params}")
    else:
        logger.debug(f"API Request: {base_url} {path}")


def log_api_response(base_url: str, path: str, status: int, response_time: Optional[float] = None) -> None:
    """
    Log an API response with status and timing information.

    Example:
        >>> log_api_response("https://fapi.binance.com", "/fapi/v1/time", 200, 0.042)
        [DEBUG] API Response: https://fapi.binance.com /fapi/v1/time | Status: 200 | Time: 0.042s
    """
    time_str = f" | Time: {response_time:.3f}s" if response_time is not None else ""
    logger.debug(f"API Response: {base_url} {path} | Status: {status}{time_str}")
