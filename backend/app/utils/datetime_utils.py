"""
Centralized DateTime Utilities
==============================

Provides consistent datetime handling across the entire application.
All datetime operations use the timezone configured in app.core.config.

Functions:
- now(): Returns timezone-aware datetime object
- days_from_now(): Returns now() shifted by a number of days
- year_bounds(): First and last instant of a calendar year
- to_iso(): Convert datetime object to ISO 8601 string
"""
import logging
import zoneinfo
from datetime import datetime, timedelta, timezone as dt_timezone, tzinfo
from typing import Optional, Tuple

from app.core.config import get_settings

logger = logging.getLogger(__name__)


def _get_app_timezone() -> tzinfo:
    """
    Get the application timezone from config.
    Returns timezone object (defaults to UTC if invalid).
    """
    tz_str = get_settings().timezone

    if tz_str.upper() == "UTC":
        return dt_timezone.utc

    try:
        return zoneinfo.ZoneInfo(tz_str)
    except (zoneinfo.ZoneInfoNotFoundError, ValueError):
        logger.warning(f"Invalid timezone '{tz_str}', falling back to UTC")
        return dt_timezone.utc


def now() -> datetime:
    """
    Get current datetime with application-configured timezone.

    Returns:
        timezone-aware datetime object
    """
    return datetime.now(_get_app_timezone())


def days_from_now(days: int) -> datetime:
    """Current time plus ``days`` calendar days."""
    return now() + timedelta(days=days)


def year_bounds(year: int) -> Tuple[datetime, datetime]:
    """
    Inclusive start and end of a calendar year in the application timezone.

    Args:
        year: Four digit year

    Returns:
        (start, end) where end is the last microsecond of Dec 31
    """
    app_tz = _get_app_timezone()
    start = datetime(year, 1, 1, tzinfo=app_tz)
    end = datetime(year + 1, 1, 1, tzinfo=app_tz) - timedelta(microseconds=1)
    return start, end


def to_iso(dt: Optional[datetime]) -> Optional[str]:
    """
    Convert datetime object to ISO 8601 string.
    If datetime is naive, assumes application timezone.

    Args:
        dt: datetime object (timezone-aware or naive)

    Returns:
        ISO 8601 formatted string, or None if dt is None
    """
    if dt is None:
        return None

    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=_get_app_timezone())

    # Format with timezone offset, or 'Z' if UTC
    if dt.tzinfo == dt_timezone.utc:
        return dt.replace(microsecond=0).isoformat().replace("+00:00", "Z")
    return dt.replace(microsecond=0).isoformat()
