"""
Time Utilities

Binance reports every timestamp (serverTime, deliveryDate, onboardDate)
as milliseconds since epoch. These helpers turn them into timezone-aware
UTC datetimes and back.
"""

from datetime import datetime, timezone
from typing import Union


def to_utc_datetime(timestamp_ms: Union[int, float]) -> datetime:
    """
    Convert a Binance millisecond timestamp to a UTC datetime.

    Args:
        timestamp_ms: Unix timestamp in milliseconds

    Returns:
        datetime: Timezone-aware datetime in UTC

    Raises:
        ValueError: If the timestamp is negative or out of range

    Example:
        >>> to_utc_datetime(1704110400000)
        datetime.datetime(2024, 1, 1, 12, 0, tzinfo=datetime.timezone.utc)
    """
    if timestamp_ms < 0:
        raise ValueError(f"Timestamp cannot be negative: {timestamp_ms}")

    try:
        return datetime.fromtimestamp(timestamp_ms / 1000.0, tz=timezone.utc)
    except (OSError, OverflowError, ValueError) as e:
        raise ValueError(f"Invalid timestamp: {timestamp_ms}. Error: {e}")


def current_utc_timestamp() -> int:
    """Current UTC time in milliseconds since epoch"""
    return int(datetime.now(timezone.utc).timestamp() * 1000)
