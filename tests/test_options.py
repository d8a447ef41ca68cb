from __future__ import annotations

from dentalpay_app.exports.options import XmlExportOptions


def test_from_settings_reads_fzo_block() -> None:
    options = XmlExportOptions.from_settings()

    assert options.facility_code == "12345"
    assert options.facility_name == "Dom zdravlja Test"
    assert options.namespace_uri == "urn:fzo:fakture"
    assert options.currency == "BAM"


def test_from_settings_fills_missing_keys_with_defaults() -> None:
    options = XmlExportOptions.from_settings({"FACILITY_CODE": "777", "CURRENCY": ""})

    assert options.facility_code == "777"
    assert options.currency == "BAM"
    assert options.xml_version == "1"
    assert options.schema_uri == XmlExportOptions().schema_uri
