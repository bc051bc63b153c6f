"""Conversion between RFC 822 date-time strings and Unix timestamps."""

from __future__ import annotations

import time

__all__ = ["DateFormatError", "parse_rfc822_date", "format_rfc822_date"]


class DateFormatError(ValueError):
    """Raised when a date cannot be parsed or formatted."""


_DAY_NAMES = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")

_MONTH_NAMES = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)
_MONTHS = {name: number for number, name in enumerate(_MONTH_NAMES, start=1)}

_HOUR = 60 * 60

_NAMED_ZONES = {
    "GMT": 0,
    "UT": 0,
    "EST": -5 * _HOUR,
    "EDT": -4 * _HOUR,
    "CST": -6 * _HOUR,
    "CDT": -5 * _HOUR,
    "MST": -7 * _HOUR,
    "MDT": -6 * _HOUR,
    "PST": -8 * _HOUR,
    "PDT": -7 * _HOUR,
}

# Military zones: A-I and K-M are west of UT, N-Y east; J is not used.
_MILITARY_ZONES = {
    **{letter: -(hours) * _HOUR for hours, letter in enumerate("ABCDEFGHI", start=1)},
    **{letter: -(hours) * _HOUR for hours, letter in enumerate("KLM", start=10)},
    **{letter: hours * _HOUR for hours, letter in enumerate("NOPQRSTUVWXY", start=1)},
}

_UINT_MAX = 2**32 - 1


def _unsigned(text: str, what: str) -> int:
    if not text or not (text.isascii() and text.isdigit()):
        raise DateFormatError(f"invalid {what}: {text!r}")
    value = int(text)
    if value > _UINT_MAX:
        raise DateFormatError(f"{what} out of range: {text!r}")
    return value


def _zone_offset(zone: str) -> int:
    """Return the offset of a zone specification in seconds east of UT."""
    if zone in _NAMED_ZONES:
        return _NAMED_ZONES[zone]
    if zone in _MILITARY_ZONES:
        return _MILITARY_ZONES[zone]
    if len(zone) != 5:
        raise DateFormatError(f"invalid time zone: {zone!r}")
    hours = _unsigned(zone[1:3], "zone hours")
    if hours > 12:
        raise DateFormatError(f"zone hours out of range: {zone!r}")
    minutes = _unsigned(zone[3:5], "zone minutes")
    if minutes > 59:
        raise DateFormatError(f"zone minutes out of range: {zone!r}")
    offset = hours * _HOUR + minutes * 60
    if zone[0] == "-":
        return -offset
    if zone[0] != "+":
        raise DateFormatError(f"invalid zone sign: {zone!r}")
    return offset


def parse_rfc822_date(text: str) -> int:
    """Parse an RFC 822 date such as ``"Sun, 19 May 2002 17:21:47 GMT"``.

    The zone is validated, and the date and time of day are read as local
    time. Returns the corresponding Unix timestamp.
    """
    if not text:
        raise DateFormatError("empty date string")

    if "," in text:
        day_of_week = text[:3]
        if day_of_week not in _DAY_NAMES:
            raise DateFormatError(f"invalid day of week: {day_of_week!r}")
        rest = text[4:]
    else:
        rest = text
    rest = rest.lstrip(" ")

    parts = rest.split(" ")
    if len(parts) != 5:
        raise DateFormatError(f"expected five date fields, got {len(parts)}")
    day_text, month_text, year_text, time_text, zone = parts

    day = _unsigned(day_text, "day of month")
    if not 1 <= day <= 31:
        raise DateFormatError(f"day of month out of range: {day}")

    try:
        month = _MONTHS[month_text]
    except KeyError:
        raise DateFormatError(f"invalid month: {month_text!r}") from None

    year = _unsigned(year_text, "year")
    if year < 100:
        year += 1900 if year >= 70 else 2000

    time_parts = time_text.split(":")
    if len(time_parts) < 2:
        raise DateFormatError(f"time needs hours and minutes: {time_text!r}")
    hour = _unsigned(time_parts[0], "hour")
    if hour >= 24:
        raise DateFormatError(f"hour out of range: {hour}")
    minute = _unsigned(time_parts[1], "minute")
    if minute >= 60:
        raise DateFormatError(f"minute out of range: {minute}")
    second = 0
    if len(time_parts) >= 3:
        second = _unsigned(time_parts[2], "second")
        if second >= 60:
            raise DateFormatError(f"second out of range: {second}")

    _zone_offset(zone)

    try:
        timestamp = time.mktime((year, month, day, hour, minute, second, 0, 0, -1))
    except (OverflowError, ValueError) as exc:
        raise DateFormatError(f"date out of range: {text!r}") from exc
    result = int(timestamp)
    if result == -1:
        raise DateFormatError(f"date cannot be represented: {text!r}")
    return result


def format_rfc822_date(timestamp: int) -> str:
    """Format a Unix timestamp like ``"Mon, 02 Nov 2015 11:01:43 GMT"``.

    The fields come from local time; names are always English.
    """
    try:
        tm = time.localtime(timestamp)
    except (OverflowError, OSError, ValueError) as exc:
        raise DateFormatError(f"cannot convert timestamp {timestamp!r}") from exc
    return (
        f"{_DAY_NAMES[tm.tm_wday]}, {tm.tm_mday:02d} {_MONTH_NAMES[tm.tm_mon - 1]} "
        f"{tm.tm_year:04d} {tm.tm_hour:02d}:{tm.tm_min:02d}:{tm.tm_sec:02d} GMT"
    )