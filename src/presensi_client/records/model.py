from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, tzinfo
from typing import Any, Mapping, Optional

from ..common.datetime_utils import parse_timestamp
from ..core.enums import ApprovalState, RecordKind
from ..core.exceptions import ValidationError

logger = logging.getLogger(__name__)


def _optional_str(payload: Mapping[str, Any], key: str) -> Optional[str]:
    value = payload.get(key)
    if value is None:
        return None
    if isinstance(value, (dict, list)):
        logger.warning("Dropping non-scalar %s field: %r", key, value)
        return None
    return str(value)


def _optional_int(payload: Mapping[str, Any], key: str) -> Optional[int]:
    value = payload.get(key)
    if value is None or value == "":
        return None
    if isinstance(value, bool):
        logger.warning("Dropping boolean %s field: %r", key, value)
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        logger.warning("Dropping non-integer %s field: %r", key, value)
        return None


@dataclass(frozen=True)
class Record:
    """One attendance or permit entry as received from the API.

    ``start_date`` is kept as the raw wire string: search matches it by prefix,
    and parsing happens lazily against an explicit time zone.
    """

    kind: RecordKind
    start_date: str
    user_id: Optional[int] = None
    nis: Optional[str] = None
    name: Optional[str] = None
    class_id: Optional[int] = None
    class_name: Optional[str] = None
    class_type: Optional[str] = None
    end_date: Optional[str] = None
    attend_at: Optional[str] = None
    status: Optional[str] = None
    approval: Optional[ApprovalState] = None
    description: Optional[str] = None
    img_url: Optional[str] = None
    last_edit_by: Optional[str] = None

    def start_at(self, tz: tzinfo) -> Optional[datetime]:
        return parse_timestamp(self.start_date, tz)

    @classmethod
    def from_payload(cls, payload: Any, kind: RecordKind) -> "Record":
        if not isinstance(payload, Mapping):
            raise ValidationError("Record payload must be an object")

        # the one field a record cannot do without; the rest degrade to None
        start_date = payload.get("start_date")
        if not isinstance(start_date, str) or not start_date.strip():
            raise ValidationError("start_date is required")

        is_permit = kind is RecordKind.PERMIT
        return cls(
            kind=kind,
            start_date=start_date,
            user_id=_optional_int(payload, "user_id"),
            nis=_optional_str(payload, "nis"),
            name=_optional_str(payload, "name"),
            class_id=_optional_int(payload, "class_id"),
            class_name=_optional_str(payload, "class_name"),
            class_type=_optional_str(payload, "class_type"),
            end_date=_optional_str(payload, "end_date"),
            attend_at=None if is_permit else _optional_str(payload, "attend_at"),
            status=_optional_str(payload, "status"),
            approval=ApprovalState.from_flag(payload.get("is_approved")) if is_permit else None,
            description=_optional_str(payload, "description") if is_permit else None,
            img_url=_optional_str(payload, "img_url") if is_permit else None,
            last_edit_by=None if is_permit else _optional_str(payload, "lastEditBy"),
        )

    def to_payload(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "user_id": self.user_id,
            "nis": self.nis,
            "name": self.name,
            "class_id": self.class_id,
            "class_name": self.class_name,
            "class_type": self.class_type,
            "start_date": self.start_date,
            "end_date": self.end_date,
            "status": self.status,
        }
        if self.kind is RecordKind.PERMIT:
            data["is_approved"] = self.approval.to_flag() if self.approval else None
            data["description"] = self.description
            data["img_url"] = self.img_url
        else:
            data["attend_at"] = self.attend_at
            data["lastEditBy"] = self.last_edit_by
        return data


@dataclass(frozen=True)
class FetchResult:
    """Outcome of one fetch. Failures are values, not exceptions."""

    records: tuple[Record, ...] = ()
    error: Optional[str] = None
    authenticated: bool = True

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, records) -> "FetchResult":
        return cls(records=tuple(records))

    @classmethod
    def failure(cls, error: str) -> "FetchResult":
        return cls(error=error)

    @classmethod
    def unauthenticated(cls) -> "FetchResult":
        return cls(authenticated=False)
