from __future__ import annotations

import re
from decimal import Decimal
from io import StringIO

import pytest
from django.core.management import call_command
from django.core.management.base import CommandError

from dentalpay_app.validators.export_request_validator import MSG_DATE_ORDER, MSG_DATES_REQUIRED, MSG_NO_INVOICES

from .factories import create_invoice

pytestmark = pytest.mark.django_db


def test_command_writes_file(tmp_path) -> None:
    create_invoice(tip=14, items=[{"service_code": "1234567", "fund_amount": Decimal("12.5")}])
    out = StringIO()

    call_command(
        "export_fzo_xml", "--od", "2024-01-01", "--do", "2024-01-31", "--tip", "14",
        "--output-dir", str(tmp_path), stdout=out,
    )

    path = tmp_path / "12345_31012024_14.xml"
    assert path.exists()
    content = path.read_bytes()
    assert b'uputnica-id="UP-99"' in content
    assert b'iznos="12.50"' in content
    assert "1 faktura" in out.getvalue()


def test_command_rejects_invalid_range(tmp_path) -> None:
    with pytest.raises(CommandError, match=re.escape(MSG_DATE_ORDER)):
        call_command("export_fzo_xml", "--od", "2024-02-01", "--do", "2024-01-01", "--tip", "5",
                     "--output-dir", str(tmp_path))


def test_command_reports_empty_result(tmp_path) -> None:
    with pytest.raises(CommandError) as excinfo:
        call_command("export_fzo_xml", "--od", "2024-01-01", "--do", "2024-01-31", "--tip", "5",
                     "--output-dir", str(tmp_path))

    assert str(excinfo.value) == MSG_NO_INVOICES
    assert list(tmp_path.iterdir()) == []


def test_command_treats_malformed_date_as_missing(tmp_path) -> None:
    with pytest.raises(CommandError, match=re.escape(MSG_DATES_REQUIRED)):
        call_command("export_fzo_xml", "--od", "2024-02-30", "--do", "2024-03-31", "--tip", "5",
                     "--output-dir", str(tmp_path))
