from __future__ import annotations

from datetime import date, datetime, timedelta, tzinfo
from typing import Optional
from zoneinfo import ZoneInfo

from ..core.constants import DEFAULT_TIMEZONE


def get_zone(name: Optional[str] = None) -> ZoneInfo:
    return ZoneInfo(name or DEFAULT_TIMEZONE)


def now_local(tz: tzinfo) -> datetime:
    """Current time in ``tz``.

    Note: Wrapped so tests can patch/mock easier.
    """
    return datetime.now(tz)


def parse_timestamp(value: Optional[str], tz: tzinfo) -> Optional[datetime]:
    """Best-effort parse of a wire timestamp into an aware datetime in ``tz``.

    Accepts ``YYYY-MM-DD`` and ISO 8601 date-times, with or without offset
    (a trailing ``Z`` means UTC). Naive values are read as wall-clock time in
    ``tz``. Returns None when the value cannot be parsed.
    """
    v = (value or "").strip()
    if not v:
        return None
    if v.endswith(("Z", "z")):
        v = v[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(v)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=tz)
    return parsed.astimezone(tz)


def local_day(value: Optional[str], tz: tzinfo) -> Optional[date]:
    parsed = parse_timestamp(value, tz)
    return parsed.date() if parsed else None


def previous_day(day: date) -> date:
    return day - timedelta(days=1)
