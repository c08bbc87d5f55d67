from __future__ import annotations

from enum import Enum
from typing import Any

from .constants import ATTENDANCES_PATH, PERMITS_PATH
from .exceptions import ValidationError


class RecordKind(str, Enum):
    """Which remote collection a record comes from."""

    ATTENDANCE = "attendances"
    PERMIT = "permits"

    @property
    def path(self) -> str:
        return ATTENDANCES_PATH if self is RecordKind.ATTENDANCE else PERMITS_PATH


class ApprovalState(str, Enum):
    """Permit approval, a closed tri-state (never a boolean)."""

    APPROVED = "approved"
    NOT_APPROVED = "not_approved"
    PENDING = "pending"

    @classmethod
    def from_flag(cls, value: Any) -> "ApprovalState":
        # bool is an int subclass, True/False land on 1/0 as well
        if isinstance(value, (int, float)):
            if value == 1:
                return cls.APPROVED
            if value == 0:
                return cls.NOT_APPROVED
        return cls.PENDING

    def to_flag(self) -> int | None:
        return {ApprovalState.APPROVED: 1, ApprovalState.NOT_APPROVED: 0}.get(self)

    @property
    def label(self) -> str:
        return {
            ApprovalState.APPROVED: "Disetujui",
            ApprovalState.NOT_APPROVED: "Belum disetujui",
            ApprovalState.PENDING: "Pending",
        }[self]

    @property
    def color(self) -> str:
        return {
            ApprovalState.APPROVED: "#2DCF2A",
            ApprovalState.NOT_APPROVED: "#FF0000",
            ApprovalState.PENDING: "#C7D021",
        }[self]


class DateBucket(str, Enum):
    """Coarse temporal filter shown as chips above the list."""

    ALL = "all"
    TODAY = "today"
    YESTERDAY = "yesterday"

    @property
    def label(self) -> str:
        return {DateBucket.ALL: "Semua", DateBucket.TODAY: "Hari Ini", DateBucket.YESTERDAY: "Kemarin"}[self]

    @property
    def option_id(self) -> str:
        return {DateBucket.ALL: "1", DateBucket.TODAY: "2", DateBucket.YESTERDAY: "3"}[self]

    @classmethod
    def parse(cls, value: str) -> "DateBucket":
        """Accept a bucket value (``today``) or a filter option id (``2``)."""
        v = (value or "").strip().lower()
        for bucket in cls:
            if v in (bucket.value, bucket.option_id):
                return bucket
        raise ValidationError(f"Unknown filter: {value!r}")


class LoadState(str, Enum):
    """Lifecycle of a list view-model."""

    IDLE = "idle"
    LOADING = "loading"
    REFRESHING = "refreshing"
    LOADED = "loaded"
    LOAD_FAILED = "load_failed"
