"""
Wall-clock time helpers.

ClockTime values are plain `datetime.time` objects. All arithmetic is done in
minutes since midnight and wraps around the day in both directions, so only
the time of day is ever observable.
"""

import re
from datetime import datetime, time
from typing import Optional

import pytz

from .constants import MINUTES_PER_DAY

_TIME_24H_PATTERN = re.compile(r"([0-9]{1,2}):([0-9]{2})")
_TIME_12H_PATTERN = re.compile(r"([0-9]{1,2}):([0-9]{2})\s*(AM|PM)", re.IGNORECASE)


class ParseError(ValueError):
    """Raised when a string is not a valid "HH:MM" clock time."""


def parse_time(time_str: str) -> time:
    """
    Parse a 24-hour "HH:MM" string to a time object.

    The hour may have one or two digits, the minute exactly two.
    Out-of-range fields are rejected rather than clamped or wrapped.

    Raises:
        ParseError: if the string is malformed or out of range
    """
    match = _TIME_24H_PATTERN.fullmatch(time_str.strip())
    if match is None:
        raise ParseError(f"Invalid time format: {time_str!r} (expected HH:MM)")

    hour, minute = int(match.group(1)), int(match.group(2))
    if hour > 23 or minute > 59:
        raise ParseError(f"Time out of range: {time_str!r}")
    return time(hour, minute)


def parse_time_12h(time_str: str) -> Optional[time]:
    """
    Parse "H:MM AM/PM" to a time object, or None if it doesn't match.

    The AM/PM marker is case-insensitive. 12 AM is midnight, 12 PM is noon.
    """
    match = _TIME_12H_PATTERN.fullmatch(time_str.strip())
    if match is None:
        return None

    hour, minute = int(match.group(1)), int(match.group(2))
    if not 1 <= hour <= 12 or minute > 59:
        return None

    period = match.group(3).upper()
    if period == "AM" and hour == 12:
        hour = 0
    elif period == "PM" and hour < 12:
        hour += 12
    return time(hour, minute)


def parse_time_input(time_str: str) -> time:
    """Parse user input in either "7:30 PM" or "19:30" form."""
    parsed = parse_time_12h(time_str)
    if parsed is not None:
        return parsed
    return parse_time(time_str)


def time_to_minutes(t: time) -> int:
    """Convert time to minutes since midnight."""
    return t.hour * 60 + t.minute


def minutes_to_time(minutes: int) -> time:
    """Convert minutes since midnight to time (handles wrap-around)."""
    minutes = minutes % MINUTES_PER_DAY
    return time(minutes // 60, minutes % 60)


def shift_time(base_time: time, minutes: int) -> time:
    """
    Shift a time by a number of minutes.

    Args:
        base_time: Starting time
        minutes: Minutes to shift (positive = later, negative = earlier)

    Returns:
        Shifted time (wraps around midnight)
    """
    return minutes_to_time(time_to_minutes(base_time) + minutes)


def minutes_between(start: time, end: time) -> int:
    """Minutes from start forward to end, crossing midnight if needed."""
    return (time_to_minutes(end) - time_to_minutes(start)) % MINUTES_PER_DAY


def format_time(t: time) -> str:
    """Format time as "HH:MM" (24-hour format for data fields)."""
    return f"{t.hour:02d}:{t.minute:02d}"


def format_time_12h(t: time) -> str:
    """Format time as "H:MM AM/PM" (12-hour format for user-facing text)."""
    hour = t.hour
    period = "AM" if hour < 12 else "PM"
    if hour == 0:
        hour = 12
    elif hour > 12:
        hour -= 12
    return f"{hour}:{t.minute:02d} {period}"


def get_current_datetime_in_tz(tz_name: str) -> datetime:
    """
    Get current datetime in the specified timezone.

    Servers run in UTC, so "now" for a visitor has to be computed in
    their own zone.

    Args:
        tz_name: IANA timezone name (e.g., "America/Los_Angeles")

    Returns:
        Current datetime in the specified timezone (naive, for local comparisons)
    """
    tz = pytz.timezone(tz_name)
    now_utc = datetime.now(pytz.UTC)
    now_local = now_utc.astimezone(tz)
    return now_local.replace(tzinfo=None)


def current_time_in_tz(tz_name: str) -> time:
    """Current wall-clock time (to the minute) in the given timezone."""
    now = get_current_datetime_in_tz(tz_name)
    return time(now.hour, now.minute)
