from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from presensi_client.core.enums import ApprovalState, RecordKind
from presensi_client.core.exceptions import ValidationError
from presensi_client.records.model import FetchResult, Record

WIB = timezone(timedelta(hours=7))


def _permit_payload(**overrides):
    payload = {
        "nis": "12345",
        "name": "BUDI SANTOSO PUTRA",
        "class_id": 3,
        "class_name": "Matematika",
        "class_type": "Reguler",
        "start_date": "2024-01-10T08:00:00",
        "end_date": "2024-01-11T08:00:00",
        "description": "Sakit demam",
        "img_url": "/uploads/izin.jpg",
    }
    payload.update(overrides)
    return payload


@pytest.mark.parametrize(
    "flag, expected",
    [
        (1, ApprovalState.APPROVED),
        (0, ApprovalState.NOT_APPROVED),
        (None, ApprovalState.PENDING),
        (2, ApprovalState.PENDING),
        ("1", ApprovalState.PENDING),
    ],
)
def test_permit_approval_is_tri_state(flag, expected):
    record = Record.from_payload(_permit_payload(is_approved=flag), RecordKind.PERMIT)

    assert record.approval is expected


def test_permit_without_approval_flag_is_pending():
    record = Record.from_payload(_permit_payload(), RecordKind.PERMIT)

    assert record.approval is ApprovalState.PENDING


def test_attendance_record_has_no_approval():
    record = Record.from_payload(
        {
            "user_id": 7,
            "class_id": "2",
            "class_name": "Art",
            "start_date": "2024-01-09",
            "attend_at": None,
            "status": "izin",
            "lastEditBy": "admin",
        },
        RecordKind.ATTENDANCE,
    )

    assert record.approval is None
    assert record.user_id == 7
    assert record.class_id == 2
    assert record.attend_at is None
    assert record.last_edit_by == "admin"


def test_missing_start_date_is_malformed():
    with pytest.raises(ValidationError):
        Record.from_payload(_permit_payload(start_date=""), RecordKind.PERMIT)
    with pytest.raises(ValidationError):
        Record.from_payload({"class_name": "Math"}, RecordKind.ATTENDANCE)


def test_non_object_payload_is_malformed():
    with pytest.raises(ValidationError):
        Record.from_payload(["2024-01-10"], RecordKind.ATTENDANCE)


def test_bad_optional_fields_degrade_to_none():
    record = Record.from_payload(
        {
            "start_date": "2024-01-10",
            "user_id": "1.0",
            "class_id": "X1",
            "class_name": {"id": 3},
            "status": "hadir",
        },
        RecordKind.ATTENDANCE,
    )

    assert record.user_id is None
    assert record.class_id is None
    assert record.class_name is None
    assert record.status == "hadir"


def test_non_string_start_date_is_malformed():
    with pytest.raises(ValidationError):
        Record.from_payload({"start_date": {"date": "2024-01-10"}}, RecordKind.ATTENDANCE)


def test_start_at_reads_naive_values_in_given_zone():
    record = Record(kind=RecordKind.ATTENDANCE, start_date="2024-01-10T08:00")

    assert record.start_at(WIB) == datetime(2024, 1, 10, 8, 0, tzinfo=WIB)


def test_start_at_converts_utc_values():
    record = Record(kind=RecordKind.ATTENDANCE, start_date="2024-01-09T20:00:00.000Z")

    assert record.start_at(WIB) == datetime(2024, 1, 10, 3, 0, tzinfo=WIB)


def test_start_at_unparseable_is_none():
    record = Record(kind=RecordKind.ATTENDANCE, start_date="kemarin")

    assert record.start_at(WIB) is None


def test_permit_payload_keeps_approval_flag():
    record = Record.from_payload(_permit_payload(is_approved=0), RecordKind.PERMIT)
    payload = record.to_payload()

    assert payload["is_approved"] == 0
    assert payload["img_url"] == "/uploads/izin.jpg"
    assert "attend_at" not in payload


def test_records_with_same_values_are_equal_and_hashable():
    a = Record.from_payload(_permit_payload(), RecordKind.PERMIT)
    b = Record.from_payload(_permit_payload(), RecordKind.PERMIT)

    assert a == b
    assert len({a, b}) == 1


def test_fetch_result_constructors():
    assert FetchResult.success([]).ok
    assert not FetchResult.failure("boom").ok
    unauth = FetchResult.unauthenticated()
    assert unauth.ok and not unauth.authenticated and unauth.records == ()
