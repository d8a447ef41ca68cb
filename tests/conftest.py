from __future__ import annotations

import pytest

from dentalpay_app.exports.options import XmlExportOptions

from .factories import NAMESPACE


@pytest.fixture
def options() -> XmlExportOptions:
    return XmlExportOptions(
        facility_code="12345",
        facility_name="Dom zdravlja Test",
        namespace_uri=NAMESPACE,
        schema_uri="https://fzo.example.org/fakture.xsd",
        xsl_href="https://fzo.example.org/fakture.xsl",
        currency="BAM",
        xml_version="1",
    )
