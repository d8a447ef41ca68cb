from __future__ import annotations

from datetime import date

import pytest

from dentalpay_app.serializers import InvoiceExportRequestSerializer
from dentalpay_app.validators.export_request_validator import (
    MSG_DATE_ORDER,
    MSG_DATES_REQUIRED,
    MSG_INVOICE_TYPE,
    validate_export_request,
)

OD = date(2024, 1, 1)
DO = date(2024, 1, 31)


@pytest.mark.parametrize("tip", [5, 14])
def test_valid_request(tip) -> None:
    assert validate_export_request(OD, DO, tip) is None


@pytest.mark.parametrize(("date_od", "date_do"), [(None, DO), (OD, None), (None, None)])
def test_missing_dates(date_od, date_do) -> None:
    assert validate_export_request(date_od, date_do, 5) == MSG_DATES_REQUIRED


@pytest.mark.parametrize(("date_od", "date_do"), [(DO, DO), (DO, OD)])
def test_start_must_be_before_end(date_od, date_do) -> None:
    assert validate_export_request(date_od, date_do, 5) == MSG_DATE_ORDER


@pytest.mark.parametrize("tip", [None, 0, 4, 6, 13, 15, 99])
def test_invalid_invoice_type(tip) -> None:
    assert validate_export_request(OD, DO, tip) == MSG_INVOICE_TYPE


def test_first_failing_rule_wins() -> None:
    assert validate_export_request(None, DO, 7) == MSG_DATES_REQUIRED
    assert validate_export_request(DO, OD, 7) == MSG_DATE_ORDER


def test_serializer_accepts_valid_payload() -> None:
    serializer = InvoiceExportRequestSerializer(
        data={"date_od": "2024-01-01", "date_do": "2024-01-31", "tip_fakture": 14}
    )

    assert serializer.is_valid(), serializer.errors
    assert serializer.validated_data["tip_fakture"] == 14
    assert serializer.validated_data["date_od"] == OD


def test_serializer_reports_single_message() -> None:
    serializer = InvoiceExportRequestSerializer(
        data={"date_od": "2024-01-31", "date_do": "2024-01-01", "tip_fakture": 5}
    )

    assert not serializer.is_valid()
    assert serializer.errors["non_field_errors"] == [MSG_DATE_ORDER]
