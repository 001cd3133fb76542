"""Formatting of the current time for the prompt."""

from __future__ import annotations

import logging
import re
from datetime import datetime, timedelta, timezone

log = logging.getLogger(__name__)

_DIRECTIVE = re.compile(r"%(.)", re.DOTALL)


class InvalidOffsetError(ValueError):
    """Raised when a UTC offset is not a number of hours strictly within ±24."""


def _expand_directives(time_format: str, time: datetime) -> str:
    """Replace directives that differ between platforms or locales."""
    am_pm = "AM" if time.hour < 12 else "PM"

    def replace(match: re.Match[str]) -> str:
        directive = match.group(1)
        if directive == "r":
            return f"%I:%M:%S {am_pm}"
        if directive == "T":
            return "%H:%M:%S"
        if directive == "p":
            return am_pm
        return match.group(0)

    return _DIRECTIVE.sub(replace, time_format)


def format_time(time_format: str, time: datetime) -> str:
    """Format ``time`` with a strftime-style format string.

    ``%T`` is the 24-hour time, ``%r`` the 12-hour time with AM/PM.
    """
    return time.strftime(_expand_directives(time_format, time))


def _parse_offset_hours(utc_time_offset: str) -> float:
    if utc_time_offset != utc_time_offset.strip() or "_" in utc_time_offset:
        raise InvalidOffsetError("Invalid timezone offset.")
    try:
        return float(utc_time_offset)
    except ValueError:
        raise InvalidOffsetError("Invalid timezone offset.") from None


def create_offset_time_string(
    utc_time: datetime, utc_time_offset: str, time_format: str
) -> str:
    """Format ``utc_time`` shifted by an offset given in hours, e.g. "+5.75".

    Raises ``InvalidOffsetError`` for unparsable offsets or offsets of 24
    hours or more in either direction.
    """
    hours = _parse_offset_hours(utc_time_offset)
    if not -24.0 < hours < 24.0:
        raise InvalidOffsetError("Invalid timezone offset.")

    offset = timezone(timedelta(seconds=int(hours * 3600)))
    log.debug("Target timezone offset is %s", offset)

    if utc_time.tzinfo is None:
        utc_time = utc_time.replace(tzinfo=timezone.utc)
    target_time = utc_time.astimezone(offset)
    log.debug("Time in target timezone now is %s", target_time)
    return format_time(time_format, target_time)


def current_time_string(utc_time_offset: str, time_format: str) -> str:
    """Format the current time, either local or at a fixed UTC offset.

    An offset of "local" uses the local time zone; an invalid offset falls
    back to local time.
    """
    log.debug("Time module is enabled with format string: %s", time_format)
    if utc_time_offset != "local":
        try:
            return create_offset_time_string(
                datetime.now(timezone.utc), utc_time_offset, time_format
            )
        except InvalidOffsetError:
            log.warning(
                'Invalid utc_time_offset configuration provided! Falling back to "local".'
            )
    return format_time(time_format, datetime.now().astimezone())