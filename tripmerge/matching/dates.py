"""
Date comparison for duplicate detection.

Stored travel dates are UTC instants. Values arrive either as datetime
objects or as ISO-like strings from an exported JSON file, and legacy
exports may contain strings that do not parse at all. None of the helpers
here raise for such values; an unusable date simply does not match.
"""

import logging
from datetime import date, datetime
from typing import Any, Optional

from dateutil import parser as dateparser
from dateutil import tz

logger = logging.getLogger(__name__)

# Fills in parts missing from partial date strings instead of today's date
_PARSE_DEFAULT = datetime(1970, 1, 1)


def to_iso_string(value: Any) -> str:
    """
    Normalize a date value to an ISO string.

    Strings pass through untouched. Aware datetimes are shifted to UTC,
    naive datetimes are taken to already be UTC.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            try:
                value = value.astimezone(tz.UTC)
            except OverflowError:
                # Keeps its own offset when UTC is out of range
                pass
        return value.isoformat()
    if isinstance(value, date):
        return value.isoformat()
    return str(value)


def parse_datetime(value: Any) -> Optional[datetime]:
    """
    Parse a date value into an aware UTC datetime.

    Numbers are read as epoch milliseconds.

    Returns:
        Aware datetime, or None if the value cannot be parsed
    """
    try:
        if isinstance(value, datetime):
            parsed = value
        elif isinstance(value, date):
            parsed = datetime(value.year, value.month, value.day)
        elif isinstance(value, (int, float)) and not isinstance(value, bool):
            return datetime.fromtimestamp(value / 1000, tz=tz.UTC)
        elif isinstance(value, str):
            parsed = dateparser.parse(value, default=_PARSE_DEFAULT)
        else:
            return None
    except (ValueError, OverflowError, OSError, TypeError) as e:
        logger.debug(f"Could not parse date {value!r}: {e}")
        return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=tz.UTC)
    return parsed


def compare_dates(date1: Any, date2: Any, tolerance_ms: int = 0) -> bool:
    """
    Compare two dates.

    With no tolerance only the calendar-day part of the ISO strings is
    compared (UTC day, time of day ignored). With a tolerance the two
    instants must lie within ``tolerance_ms`` milliseconds of each other.

    Args:
        date1: datetime or ISO-like string
        date2: datetime or ISO-like string
        tolerance_ms: Allowed difference in milliseconds (0 = same day)

    Returns:
        True if the dates match
    """
    if not date1 or not date2:
        return False

    if tolerance_ms == 0:
        day1 = to_iso_string(date1).split('T')[0]
        day2 = to_iso_string(date2).split('T')[0]
        return day1 == day2

    d1 = parse_datetime(date1)
    d2 = parse_datetime(date2)
    if d1 is None or d2 is None:
        return False

    diff_ms = abs((d1 - d2).total_seconds()) * 1000
    return diff_ms <= tolerance_ms


def compare_dates_by_timezone(date1: Any, date2: Any, timezone: Optional[str]) -> bool:
    """
    Compare the local calendar dates of two UTC instants in a timezone.

    Two instants on different UTC days can still fall on the same day at
    the venue, e.g. 23:00 in New York and 04:00 UTC the next morning.
    If either value does not parse, or the timezone is unknown, this falls
    back to the plain UTC day comparison of ``compare_dates``.

    Args:
        date1: datetime or ISO-like string
        date2: datetime or ISO-like string
        timezone: IANA zone name; UTC when empty

    Returns:
        True if both instants fall on the same local date
    """
    if not date1 or not date2:
        return False

    zone_name = timezone or 'UTC'
    zone = tz.gettz(zone_name)
    d1 = parse_datetime(date1)
    d2 = parse_datetime(date2)

    if zone is None or d1 is None or d2 is None:
        logger.debug(
            f"Falling back to UTC day comparison for {date1!r} / {date2!r} "
            f"(timezone={zone_name!r})"
        )
        return compare_dates(date1, date2)

    try:
        local1 = d1.astimezone(zone).strftime('%m/%d/%Y')
        local2 = d2.astimezone(zone).strftime('%m/%d/%Y')
    except (OverflowError, ValueError) as e:
        # Instants near year 1 or 9999 can shift out of the datetime range
        logger.debug(f"Cannot convert {date1!r} / {date2!r} to {zone_name}: {e}")
        return compare_dates(date1, date2)

    logger.debug(
        f"compare_dates_by_timezone: {date1!r} -> {local1}, "
        f"{date2!r} -> {local2} in {zone_name}"
    )
    return local1 == local2
