"""Parsing, clock formatting and humanized distances for schedule times."""

import logging
import math
from datetime import UTC, datetime
from zoneinfo import ZoneInfo

logger = logging.getLogger(__name__)

# 12-hour clock with seconds, e.g. "08:05:00 AM"
CLOCK_FORMAT = "%I:%M:%S %p"

MINUTES_IN_DAY = 1440
MINUTES_IN_ALMOST_TWO_DAYS = 2520
MINUTES_IN_MONTH = 43200
MINUTES_IN_TWO_MONTHS = 86400


def parse_instant(time_str: str | None) -> datetime | None:
    """Parse an ISO 8601 string into a UTC instant.

    Returns None for empty, non-string or unparseable input. Naive values are
    taken as UTC.
    """
    if time_str is None or time_str == "":
        return None
    if not isinstance(time_str, str):
        logger.warning(f"Ignoring non-string time value: {time_str!r}")
        return None

    try:
        parsed = datetime.fromisoformat(time_str.replace("Z", "+00:00"))
    except (TypeError, ValueError):
        logger.warning(f"Ignoring unparseable time value: {time_str!r}")
        return None

    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=UTC)
    return parsed.astimezone(UTC)


def format_clock_time(instant: datetime, timezone: str) -> str:
    """Format an instant as hh:mm:ss AM/PM in the given IANA timezone."""
    return instant.astimezone(ZoneInfo(timezone)).strftime(CLOCK_FORMAT)


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def _months_between(earlier: datetime, later: datetime) -> int:
    """Number of full calendar months from earlier to later."""
    months = (later.year - earlier.year) * 12 + (later.month - earlier.month)
    if (later.day, later.time()) < (earlier.day, earlier.time()):
        months -= 1
    return max(months, 0)


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}" if count == 1 else f"{count} {unit}s"


def format_distance(first: datetime, second: datetime) -> str:
    """Describe the distance between two instants in words.

    The result does not depend on the order of the arguments, e.g.
    "less than a minute", "5 minutes", "about 2 hours", "3 days".
    """
    earlier, later = sorted((first, second))
    seconds = int((later - earlier).total_seconds())
    minutes = _round_half_up(seconds / 60)

    if minutes < 2:
        return "less than a minute" if minutes == 0 else "1 minute"
    if minutes < 45:
        return _plural(minutes, "minute")
    if minutes < 90:
        return "about 1 hour"
    if minutes < MINUTES_IN_DAY:
        return f"about {_plural(_round_half_up(minutes / 60), 'hour')}"
    if minutes < MINUTES_IN_ALMOST_TWO_DAYS:
        return "1 day"
    if minutes < MINUTES_IN_MONTH:
        return _plural(_round_half_up(minutes / MINUTES_IN_DAY), "day")
    if minutes < MINUTES_IN_TWO_MONTHS:
        return f"about {_plural(_round_half_up(minutes / MINUTES_IN_MONTH), 'month')}"

    months = _months_between(earlier, later)
    if months < 12:
        return _plural(_round_half_up(minutes / MINUTES_IN_MONTH), "month")

    years = months // 12
    months_into_year = months % 12
    if months_into_year < 3:
        return f"about {_plural(years, 'year')}"
    if months_into_year < 9:
        return f"over {_plural(years, 'year')}"
    return f"almost {_plural(years + 1, 'year')}"
