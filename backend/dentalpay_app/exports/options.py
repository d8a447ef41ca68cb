from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from django.conf import settings


@dataclass(frozen=True)
class XmlExportOptions:
    """Facility and schema values for the fund XML (settings.FZO_XML_EXPORT)."""

    facility_code: str = "XXXXX"
    facility_name: str = "Naziv ustanove"
    namespace_uri: str = "urn:example:health"
    schema_uri: str = "https://example.org/schema.xsd"
    xsl_href: str = "https://example.org/style.xsl"
    currency: str = "BAM"
    xml_version: str = "1"

    @classmethod
    def from_settings(cls, conf: Optional[dict] = None) -> "XmlExportOptions":
        conf = conf if conf is not None else (getattr(settings, "FZO_XML_EXPORT", None) or {})
        defaults = cls()
        return cls(
            facility_code=str(conf.get("FACILITY_CODE") or defaults.facility_code),
            facility_name=str(conf.get("FACILITY_NAME") or defaults.facility_name),
            namespace_uri=str(conf.get("NAMESPACE_URI") or defaults.namespace_uri),
            schema_uri=str(conf.get("SCHEMA_URI") or defaults.schema_uri),
            xsl_href=str(conf.get("XSL_HREF") or defaults.xsl_href),
            currency=str(conf.get("CURRENCY") or defaults.currency),
            xml_version=str(conf.get("XML_VERSION") or defaults.xml_version),
        )
