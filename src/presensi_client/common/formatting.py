"""Display helpers for list items.

All helpers are tolerant of bad input: anything that cannot be parsed renders
as an empty string instead of breaking the whole list.
"""

from __future__ import annotations

import re
from datetime import tzinfo
from typing import Optional

from ..core.enums import ApprovalState
from .datetime_utils import parse_timestamp

# Indexed by Python's weekday() (Monday == 0).
DAY_ABBREVIATIONS = ("Sen", "Sel", "Rab", "Kam", "Jum", "Sab", "Min")

MONTH_ABBREVIATIONS = ("Jan", "Feb", "Mar", "Apr", "Mei", "Jun", "Jul", "Agu", "Sep", "Okt", "Nov", "Des")

_WORD_START = re.compile(r"\b\w")


def format_day_abbreviation(value: Optional[str], tz: tzinfo) -> str:
    parsed = parse_timestamp(value, tz)
    if not parsed:
        return ""
    return DAY_ABBREVIATIONS[parsed.weekday()]


def format_time(value: Optional[str], tz: tzinfo) -> str:
    """24h ``HH.MM`` as rendered by the id-ID locale."""
    parsed = parse_timestamp(value, tz)
    if not parsed:
        return ""
    return parsed.strftime("%H.%M")


def format_date(value: Optional[str], tz: tzinfo) -> str:
    parsed = parse_timestamp(value, tz)
    if not parsed:
        return ""
    return f"{parsed.day:02d} {MONTH_ABBREVIATIONS[parsed.month - 1]} {parsed.year}"


def capitalize_words(text: Optional[str]) -> str:
    if not text:
        return ""
    return _WORD_START.sub(lambda m: m.group(0).upper(), text.lower())


def truncate_words(text: Optional[str], limit: int = 2) -> str:
    if not text:
        return ""
    return " ".join(text.split(" ")[:limit])


def approval_label(state: Optional[ApprovalState]) -> str:
    return state.label if state else ""


def approval_color(state: Optional[ApprovalState]) -> str:
    return state.color if state else "#000"


def resolve_image_url(base_url: str, img_url: Optional[str]) -> str:
    if not img_url:
        return ""
    if img_url.startswith(("http://", "https://")):
        return img_url
    return f"{base_url.rstrip('/')}/{img_url.lstrip('/')}"
