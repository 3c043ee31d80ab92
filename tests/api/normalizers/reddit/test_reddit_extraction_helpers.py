"""Testes dos helpers de extração do normalizer Reddit."""

from __future__ import annotations

import pytest

from api.normalizers.reddit._extraction_helpers import (
    entry_timestamp_ms,
    first_name,
    name_from,
    normalize_duration,
    text_field,
)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        (None, "permanent"),
        ("", "permanent"),
        ("permanent", "permanent"),
        ("Permanent", "permanent"),
        ("7", "7"),
        ("7 days", "7"),
        ("1 day", "1"),
        ("forever-ish", "forever-ish"),
    ],
)
def test_normalize_duration(raw: str | None, expected: str) -> None:
    assert normalize_duration(raw) == expected


def test_name_from_accepts_objects_and_strings() -> None:
    assert name_from({"name": "alice"}) == "alice"
    assert name_from({"username": "bob"}) == "bob"
    assert name_from(" carol ") == "carol"
    assert name_from({"name": ""}) is None
    assert name_from(42) is None


def test_first_name_returns_first_present_key() -> None:
    data = {"target_author": "", "target": {"author": "troll"}}

    assert first_name(data, "target_author", "target") == "troll"
    assert first_name(data, "missing") is None


def test_text_field_treats_blank_as_absent() -> None:
    assert text_field({"details": "  "}, "details") is None
    assert text_field({"details": None}, "details") is None
    assert text_field({"details": "spam"}, "details") == "spam"


def test_entry_timestamp_ms_variants() -> None:
    assert entry_timestamp_ms({"created_utc": 1_700_000_000}) == 1_700_000_000_000
    assert entry_timestamp_ms({"createdAt": 1_700_000_000_123}) == 1_700_000_000_123
    assert entry_timestamp_ms({"createdAt": "not a date"}) is None
    assert entry_timestamp_ms({"created_utc": True}) is None
    assert entry_timestamp_ms({}) is None
