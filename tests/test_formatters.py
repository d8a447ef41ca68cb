from __future__ import annotations

import locale
from datetime import date, datetime
from decimal import ROUND_HALF_EVEN, Decimal

import pytest

from dentalpay_app.exports.formatters import (
    DEFAULT_POLICY,
    ExportFormatPolicy,
    flag_dn,
    parse_service_code,
)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (Decimal("12.5"), "12.50"),
        (Decimal("0"), "0.00"),
        (0, "0.00"),
        (Decimal("-3"), "-3.00"),
        (Decimal("-12.345"), "-12.35"),
        (Decimal("1234567.891"), "1234567.89"),
        ("7.1", "7.10"),
        (None, "0.00"),
    ],
)
def test_money(value, expected) -> None:
    assert DEFAULT_POLICY.money(value) == expected


def test_money_half_cent_rounds_away_from_zero() -> None:
    assert DEFAULT_POLICY.money(Decimal("2.345")) == "2.35"
    assert DEFAULT_POLICY.money(Decimal("-2.345")) == "-2.35"


def test_money_rounding_is_configurable() -> None:
    policy = ExportFormatPolicy(rounding=ROUND_HALF_EVEN)

    assert policy.money(Decimal("2.345")) == "2.34"


def test_money_negative_zero_is_plain_zero() -> None:
    assert DEFAULT_POLICY.money(Decimal("-0.001")) == "0.00"


def test_money_ignores_process_locale() -> None:
    try:
        previous = locale.setlocale(locale.LC_NUMERIC)
        locale.setlocale(locale.LC_NUMERIC, "de_DE.UTF-8")
    except locale.Error:
        pytest.skip("de_DE locale not available")
    try:
        assert DEFAULT_POLICY.money(Decimal("1.5")) == "1.50"
    finally:
        locale.setlocale(locale.LC_NUMERIC, previous)


def test_date_iso() -> None:
    assert DEFAULT_POLICY.date(date(2024, 2, 9)) == "2024-02-09"
    assert DEFAULT_POLICY.date(None) == ""


def test_file_date_and_generation_token() -> None:
    assert DEFAULT_POLICY.file_date(date(2024, 1, 31)) == "31012024"
    token = DEFAULT_POLICY.generation_token(datetime(2024, 3, 5, 14, 7, 9, 123456))
    assert token == "202403051407091234"
    assert len(token) == 18


@pytest.mark.parametrize(
    ("amount", "expected"),
    [(Decimal("2.50"), "D"), (Decimal("0.01"), "D"), (Decimal("0"), "N"), (Decimal("-1"), "N"), (None, "N")],
)
def test_flag_dn(amount, expected) -> None:
    assert flag_dn(amount) == expected


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("1234567", ("1", "234", "567")),
        ("123456789", ("1", "234", "567")),
        ("1234", ("1", "234", "234")),
        ("12", ("1", "200", "012")),
        ("1", ("1", "000", "001")),
        ("", ("0", "000", "000")),
        (None, ("0", "000", "000")),
    ],
)
def test_parse_service_code(raw, expected) -> None:
    assert parse_service_code(raw) == expected


def test_parse_service_code_pads_group_right_and_label_left() -> None:
    nivo, grupa, oznaka = parse_service_code("12345")

    # grupa: first 4 chars are there -> "234"; oznaka: "0012345"[4:7]
    assert (nivo, grupa, oznaka) == ("1", "234", "345")
