# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Conversions between the API's local wall-clock strings and stored UTC values."""

from __future__ import annotations

from datetime import UTC, date, datetime, time, timedelta, tzinfo
from zoneinfo import ZoneInfo

READ_FORMAT = "%Y-%m-%d %H:%M:%S"


def resolve_timezone(name: str) -> tzinfo:
    if name.upper() == "UTC":
        return UTC
    return ZoneInfo(name)


def as_utc(value: datetime) -> datetime:
    """Treat naive values (as SQLite returns them) as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def parse_local_datetime(raw: str, tz: tzinfo) -> datetime:
    """Parse ``YYYY-MM-DDTHH:MM[:SS]`` (or the space separated read format).

    Naive input is wall-clock time in ``tz``; explicit offsets are honoured.
    Raises ``ValueError`` for anything else, including instants that fall off
    the calendar once shifted to UTC.
    """
    parsed = datetime.fromisoformat(raw.strip())
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=tz)
    try:
        return parsed.astimezone(UTC)
    except OverflowError as exc:
        raise ValueError(f"{raw!r} is out of range") from exc


def ensure_renderable(value: datetime, tz: tzinfo) -> datetime:
    """Return ``value`` if it can be shown in ``tz``, else raise ``ValueError``.

    Years 1 and 9999 can be valid in UTC and still overflow in the local zone.
    """
    try:
        format_local(value, tz)
    except OverflowError as exc:
        raise ValueError(f"{value.isoformat()} cannot be shown in {tz}") from exc
    return value


def format_local(value: datetime, tz: tzinfo) -> str:
    return as_utc(value).astimezone(tz).strftime(READ_FORMAT)


def local_date(value: datetime, tz: tzinfo) -> date:
    return as_utc(value).astimezone(tz).date()


def local_day_start(day: date, tz: tzinfo) -> datetime:
    return datetime.combine(day, time.min, tzinfo=tz).astimezone(UTC)


def trailing_days(today: date, days: int) -> list[date]:
    return [today - timedelta(days=offset) for offset in range(days - 1, -1, -1)]
