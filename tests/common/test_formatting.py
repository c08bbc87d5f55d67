from datetime import timedelta, timezone

from presensi_client.common import formatting
from presensi_client.core.enums import ApprovalState

WIB = timezone(timedelta(hours=7))


def test_day_abbreviation_is_indonesian():
    # 2024-01-07 was a Sunday
    assert formatting.format_day_abbreviation("2024-01-07T10:00", WIB) == "Min"
    assert formatting.format_day_abbreviation("2024-01-10T10:00", WIB) == "Rab"


def test_time_uses_dot_separator_in_zone():
    assert formatting.format_time("2024-01-10T08:05:00", WIB) == "08.05"
    assert formatting.format_time("2024-01-10T01:05:00Z", WIB) == "08.05"


def test_date_uses_indonesian_months():
    assert formatting.format_date("2024-05-03T08:00", WIB) == "03 Mei 2024"
    assert formatting.format_date("2024-08-17", WIB) == "17 Agu 2024"


def test_unparseable_dates_render_empty():
    assert formatting.format_date("not a date", WIB) == ""
    assert formatting.format_time(None, WIB) == ""
    assert formatting.format_day_abbreviation("", WIB) == ""


def test_name_helpers():
    assert formatting.capitalize_words(formatting.truncate_words("BUDI SANTOSO PUTRA", 2)) == "Budi Santoso"
    assert formatting.capitalize_words(None) == ""
    assert formatting.truncate_words("", 2) == ""


def test_approval_label_and_color():
    assert formatting.approval_label(ApprovalState.APPROVED) == "Disetujui"
    assert formatting.approval_label(ApprovalState.NOT_APPROVED) == "Belum disetujui"
    assert formatting.approval_label(ApprovalState.PENDING) == "Pending"
    assert formatting.approval_color(ApprovalState.PENDING) == "#C7D021"


def test_image_url_is_resolved_against_api_base():
    assert formatting.resolve_image_url("http://api.test", "/uploads/a.jpg") == "http://api.test/uploads/a.jpg"
    assert formatting.resolve_image_url("http://api.test/", "uploads/a.jpg") == "http://api.test/uploads/a.jpg"
    assert formatting.resolve_image_url("http://api.test", "https://cdn/x.jpg") == "https://cdn/x.jpg"
    assert formatting.resolve_image_url("http://api.test", None) == ""
