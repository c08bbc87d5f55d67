"""Pure functions computing the visible subset of a record list."""

from __future__ import annotations

from datetime import date, tzinfo
from typing import Iterable, Optional

from ..common.datetime_utils import local_day, previous_day
from ..core.enums import DateBucket
from ..records.model import Record


def matches_search(record: Record, query: str) -> bool:
    if not query:
        return True
    q = query.lower()
    if record.class_name and q in record.class_name.lower():
        return True
    if record.start_date and record.start_date.lower().startswith(q):
        return True
    if record.status and q in record.status.lower():
        return True
    return False


def bucket_day(bucket: DateBucket, today: date) -> Optional[date]:
    """Calendar day a bucket selects, None for ALL."""
    if bucket is DateBucket.TODAY:
        return today
    if bucket is DateBucket.YESTERDAY:
        return previous_day(today)
    return None


def in_bucket(record: Record, bucket: DateBucket, *, today: date, tz: tzinfo) -> bool:
    day = bucket_day(bucket, today)
    if day is None:
        return True
    return local_day(record.start_date, tz) == day


def sort_recent_first(records: Iterable[Record], tz: tzinfo) -> list[Record]:
    """Newest start first; stable for ties, unparseable dates go last."""

    def key(r: Record):
        started = r.start_at(tz)
        if started is None:
            return (0, 0.0)
        return (1, started.timestamp())

    return sorted(records, key=key, reverse=True)


def compute_visible(
    records: Iterable[Record],
    *,
    query: str,
    bucket: DateBucket,
    today: date,
    tz: tzinfo,
) -> list[Record]:
    query = query or ""
    kept = [r for r in records if matches_search(r, query)]
    kept = [r for r in kept if in_bucket(r, bucket, today=today, tz=tz)]
    return sort_recent_first(kept, tz)
