"""Conversion between calendar dates and the USCCB ``MMDDYY`` page key."""

from __future__ import annotations

import datetime as _dt
import re
from typing import Union

from .errors import FormatError, InvalidDateError

_KEY_RE = re.compile(r"[0-9]{6}")

DateOrKey = Union[_dt.date, str]


def encode(day: _dt.date) -> str:
    """Return the ``MMDDYY`` key for ``day``."""

    return f"{day.month:02d}{day.day:02d}{day.year % 100:02d}"


def decode(key: str) -> _dt.date:
    """Parse an ``MMDDYY`` key into a date in the 2000-2099 range.

    :class:`FormatError` is raised unless ``key`` is exactly six digits and
    :class:`InvalidDateError` when the digits name a day that does not exist.
    """

    if not isinstance(key, str) or not _KEY_RE.fullmatch(key):
        raise FormatError("Date must be in MMDDYY format")
    month = int(key[0:2])
    day = int(key[2:4])
    year = 2000 + int(key[4:6])
    try:
        return _dt.date(year, month, day)
    except ValueError as exc:
        raise InvalidDateError(f"Invalid date values: {key}") from exc


def to_key(value: DateOrKey) -> str:
    """Normalize a date or an already-encoded key to a validated key."""

    if isinstance(value, str):
        decode(value)
        return value
    if isinstance(value, _dt.datetime):
        return encode(value.date())
    if isinstance(value, _dt.date):
        return encode(value)
    raise TypeError("Date must be a date object or MMDDYY string")


def display_date(day: _dt.date) -> str:
    """Return the US long form, e.g. ``December 15, 2025``."""

    return f"{day:%B} {day.day}, {day.year}"


def today() -> _dt.date:
    return _dt.date.today()


__all__ = ["encode", "decode", "to_key", "display_date", "today", "DateOrKey"]
