"""
Export of grouped dental invoices -> health-insurance fund XML (FZO).

Document layout:

    <?xml version="1.0" encoding="utf-8"?>
    <?xml-stylesheet type="text/xsl" href="..."?>
    <fakture-zdravstva xmlns="..." xmlns:xsi="..." xsi:schemaLocation="...">
      <opsti-podaci ustanova-sifra=".." ustanova-naziv=".." vrsta-fakture=".." jif=".." xml-verzija=".."/>
      <faktura tip="R" broj=".." ...>
        <stavka redni-broj="1" .../>
      </faktura>
    </fakture-zdravstva>

Invoice type 5 (rješenje) adds `rjesenje-broj` to <faktura> and
`datum-preuzimanja` to every <stavka>; type 14 (uputnica) adds only
`uputnica-id` to <faktura>.
"""
from __future__ import annotations

import calendar
import logging
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import ClassVar, Dict, Iterable, Optional, Tuple, Union
from xml.sax.saxutils import escape

from django.utils import timezone

from .formatters import DEFAULT_POLICY, ExportFormatPolicy, _safe_decimal, flag_dn, parse_service_code
from .options import XmlExportOptions

logger = logging.getLogger(__name__)

XSI_NS = "http://www.w3.org/2001/XMLSchema-instance"
CONTENT_TYPE = "application/xml"

FAKTURA_TIP = "R"


# =========================
# Defaults for absent related data
# =========================

# attribute -> value written when the source (patient, diagnosis, referring
# facility/doctor, type-specific field) is missing
FIELD_DEFAULTS: Dict[str, str] = {
    "broj": "",
    "osiguranik-jmb": "0" * 13,
    "osiguranik-ime-prezime": "",
    "dijagnoza-oznaka": "",
    "ustanova-uputilac-sifra": "",
    "ustanova-uputilac-naziv": "",
    "ljekar-oznaka": "",
    "ljekar-ime-prezime": "",
    "rjesenje-broj": "",
    "uputnica-id": "",
    "datum-preuzimanja": "",
}


def _s(v) -> str:
    return str(v).strip() if v is not None else ""


def _or_default(attr: str, value) -> str:
    """Value as string, or FIELD_DEFAULTS[attr] when value is None."""
    if value is None:
        return FIELD_DEFAULTS[attr]
    return str(value)


def _full_name(person) -> Optional[str]:
    if person is None:
        return None
    first = getattr(person, "first_name", None)
    last = getattr(person, "last_name", None)
    return f"{'' if first is None else first} {'' if last is None else last}"


def strip_year_prefix(value: str) -> str:
    """Grouped invoice number as written to `broj`. Currently the number is sent unchanged."""
    return value


# =========================
# Invoice type variants
# =========================

@dataclass(frozen=True)
class TypeFive:
    """Tip 5: invoice issued on a fund decision (rješenje)."""

    account_number: Optional[str]
    handover: Optional[date]

    tip: ClassVar[int] = 5

    def faktura_attrs(self, policy: ExportFormatPolicy) -> Dict[str, str]:
        return {"rjesenje-broj": _or_default("rjesenje-broj", self.account_number)}

    def stavka_attrs(self, policy: ExportFormatPolicy) -> Dict[str, str]:
        return {"datum-preuzimanja": policy.date(self.handover) or FIELD_DEFAULTS["datum-preuzimanja"]}


@dataclass(frozen=True)
class TypeFourteen:
    """Tip 14: invoice issued on a referral (uputnica)."""

    referral_id: Optional[str]

    tip: ClassVar[int] = 14

    def faktura_attrs(self, policy: ExportFormatPolicy) -> Dict[str, str]:
        return {"uputnica-id": _or_default("uputnica-id", self.referral_id)}

    def stavka_attrs(self, policy: ExportFormatPolicy) -> Dict[str, str]:
        return {}


InvoiceVariant = Union[TypeFive, TypeFourteen]


def invoice_variant(inv, tip: Optional[int] = None) -> InvoiceVariant:
    """Type-specific part of an invoice; `tip` defaults to inv.invoice_tip."""
    tip = int(tip if tip is not None else getattr(inv, "invoice_tip"))
    if tip == TypeFive.tip:
        return TypeFive(
            account_number=getattr(inv, "account_number", None),
            handover=getattr(inv, "handover", None),
        )
    if tip == TypeFourteen.tip:
        return TypeFourteen(referral_id=getattr(inv, "id_uputnice", None))
    raise ValueError(f"Unsupported invoice type: {tip!r}")


# =========================
# Helpers
# =========================

def add_months(d: date, months: int) -> date:
    """Calendar month shift; day is clamped to the end of the target month."""
    month_index = d.month - 1 + months
    year = d.year + month_index // 12
    month = month_index % 12 + 1
    day = min(d.day, calendar.monthrange(year, month)[1])
    return d.replace(year=year, month=month, day=day)


def _iter_invoice_items(inv) -> list:
    """InvoiceItem list from a related manager, a prefetched queryset or a plain list."""
    items = getattr(inv, "invoice_items", None)
    if items is None:
        return []
    if hasattr(items, "all"):
        return list(items.all())
    return list(items)


def _indent(elem, level=0):
    """Pretty-print indentation (two spaces)."""
    i = "\n" + "  " * level
    if len(elem):
        if not (elem.text and elem.text.strip()):
            elem.text = i + "  "
        for ch in elem:
            _indent(ch, level + 1)
        if not (elem.tail and elem.tail.strip()):
            elem.tail = i
    else:
        if level and not (elem.tail and elem.tail.strip()):
            elem.tail = i


# =========================
# Invoice -> <faktura>
# =========================

def faktura_attributes(
    inv,
    variant: InvoiceVariant,
    options: XmlExportOptions,
    policy: ExportFormatPolicy = DEFAULT_POLICY,
    items: Optional[list] = None,
) -> Dict[str, str]:
    """Ordered attributes of one <faktura> element."""
    if items is None:
        items = _iter_invoice_items(inv)

    fond_sum = sum((_safe_decimal(getattr(ii, "fund_amount", None)) for ii in items), Decimal("0"))
    pac_sum = sum((_safe_decimal(getattr(ii, "patient_amount", None)) for ii in items), Decimal("0"))

    invoice_date = getattr(inv, "invoice_date", None)
    zbirna_datum = getattr(inv, "zbirna_faktura_date", None) or invoice_date
    rok_placanja = add_months(zbirna_datum, 1) if zbirna_datum else None

    patient = getattr(inv, "patient", None)
    diagnosis = getattr(inv, "diagnosis", None)
    ref_facility = getattr(inv, "referring_facility", None)
    ref_doctor = getattr(inv, "referring_doctor", None)

    attrs = {
        "tip": FAKTURA_TIP,
        "broj": strip_year_prefix(_or_default("broj", getattr(inv, "zbirna_faktura_broj", None))),
        "datum": policy.date(zbirna_datum),
        "rok-placanja": policy.date(rok_placanja),
        "valuta": options.currency,
        "iznos": policy.money(fond_sum),
        "participacija-placa": flag_dn(pac_sum),
        "participacija-iznos": policy.money(pac_sum),
        "osiguranik-jmb": _or_default("osiguranik-jmb", getattr(patient, "jmbg", None)),
        "osiguranik-ime-prezime": _or_default("osiguranik-ime-prezime", _full_name(patient)),
        "lijecenje-period-od": policy.date(invoice_date),
        "lijecenje-period-do": policy.date(invoice_date),
        "dijagnoza-oznaka": _or_default("dijagnoza-oznaka", getattr(diagnosis, "diagnosis_code", None)),
        "ustanova-uputilac-sifra": _or_default("ustanova-uputilac-sifra", getattr(ref_facility, "code", None)),
        "ustanova-uputilac-naziv": _or_default("ustanova-uputilac-naziv", getattr(ref_facility, "name", None)),
        "ljekar-oznaka": _or_default("ljekar-oznaka", getattr(ref_doctor, "code_doctor", None)),
        "ljekar-ime-prezime": _or_default("ljekar-ime-prezime", _full_name(ref_doctor)),
    }
    attrs.update(variant.faktura_attrs(policy))
    return attrs


def stavka_attributes(
    item,
    redni_broj: int,
    variant: InvoiceVariant,
    policy: ExportFormatPolicy = DEFAULT_POLICY,
) -> Dict[str, str]:
    """Ordered attributes of one <stavka> element."""
    service = getattr(item, "service", None)
    nivo, grupa, oznaka = parse_service_code(getattr(service, "service_code", None))

    fond = _safe_decimal(getattr(item, "fund_amount", None))
    pac = _safe_decimal(getattr(item, "patient_amount", None))
    quantity = getattr(item, "quantity", None)

    attrs = {
        "redni-broj": str(redni_broj),
        "usluga-nivo": nivo,
        "usluga-grupa": grupa,
        "usluga-oznaka": oznaka,
        "kolicina": _s(quantity) or "0",
        "iznos": policy.money(fond),
        "participacija-placa": flag_dn(pac),
        "participacija-iznos": policy.money(pac),
    }
    attrs.update(variant.stavka_attrs(policy))
    return attrs


def build_faktura_element(
    inv,
    tip: int,
    options: XmlExportOptions,
    policy: ExportFormatPolicy = DEFAULT_POLICY,
) -> ET.Element:
    """
    One <faktura> with its <stavka> children (item order kept, numbering from 1).
    Type-specific attributes follow the invoice's own type; `tip` is used when the
    invoice carries none.
    """
    variant = invoice_variant(inv, getattr(inv, "invoice_tip", None) or tip)
    items = _iter_invoice_items(inv)

    faktura = ET.Element("faktura", faktura_attributes(inv, variant, options, policy, items=items))
    for rb, item in enumerate(items, start=1):
        ET.SubElement(faktura, "stavka", stavka_attributes(item, rb, variant, policy))

    logger.debug(
        "[FZO] invoice=%s broj=%s tip=%s stavke=%d iznos=%s",
        getattr(inv, "pk", None), faktura.get("broj"), tip, len(items), faktura.get("iznos"),
    )
    return faktura


# =========================
# Document
# =========================

def build_fzo_document(
    invoices: Iterable,
    tip: int,
    options: XmlExportOptions,
    policy: ExportFormatPolicy = DEFAULT_POLICY,
    now: Optional[datetime] = None,
) -> ET.Element:
    """Root <fakture-zdravstva> with header and one <faktura> per invoice, in the given order."""
    moment = now or timezone.localtime()

    root = ET.Element("fakture-zdravstva")
    root.set("xmlns", options.namespace_uri)
    root.set("xmlns:xsi", XSI_NS)
    root.set("xsi:schemaLocation", f"{options.namespace_uri} {options.schema_uri}")

    ET.SubElement(root, "opsti-podaci", {
        "ustanova-sifra": options.facility_code,
        "ustanova-naziv": options.facility_name,
        "vrsta-fakture": str(tip),
        "jif": policy.generation_token(moment),
        "xml-verzija": options.xml_version,
    })

    for inv in invoices:
        root.append(build_faktura_element(inv, tip, options, policy))

    return root


def serialize_fzo_document(root: ET.Element, options: XmlExportOptions) -> bytes:
    """UTF-8 bytes (no BOM): declaration, xml-stylesheet PI, indented document."""
    _indent(root)
    body = ET.tostring(root, encoding="utf-8", xml_declaration=False)
    href = escape(options.xsl_href, {'"': "&quot;"})
    pi = f'<?xml-stylesheet type="text/xsl" href="{href}"?>'
    header = b'<?xml version="1.0" encoding="utf-8"?>\n' + pi.encode("utf-8") + b"\n"
    return header + body + b"\n"


def build_file_name(
    options: XmlExportOptions,
    date_do: date,
    tip: int,
    policy: ExportFormatPolicy = DEFAULT_POLICY,
) -> str:
    """{facility}_{ddMMyyyy}_{tip:02d}.xml"""
    return f"{options.facility_code}_{policy.file_date(date_do)}_{int(tip):02d}.xml"


# =========================
# Public export functions
# =========================

def export_invoices_to_fzo_xml(
    invoices: Iterable,
    tip: int,
    options: Optional[XmlExportOptions] = None,
    policy: Optional[ExportFormatPolicy] = None,
    now: Optional[datetime] = None,
) -> bytes:
    options = options or XmlExportOptions.from_settings()
    policy = policy or DEFAULT_POLICY

    invoices = list(invoices)
    root = build_fzo_document(invoices, tip, options, policy, now=now)
    xml_bytes = serialize_fzo_document(root, options)

    logger.info(
        "[FZO] export done: tip=%s fakture=%d bytes=%d", tip, len(invoices), len(xml_bytes),
    )
    return xml_bytes


def export_invoices_to_fzo_files(
    invoices: Iterable,
    tip: int,
    date_do: date,
    options: Optional[XmlExportOptions] = None,
    policy: Optional[ExportFormatPolicy] = None,
    now: Optional[datetime] = None,
) -> Tuple[bytes, str, str]:
    """
    Returns (content_bytes, filename, content_type).
    """
    options = options or XmlExportOptions.from_settings()
    policy = policy or DEFAULT_POLICY

    content = export_invoices_to_fzo_xml(invoices, tip, options=options, policy=policy, now=now)
    filename = build_file_name(options, date_do, tip, policy)
    return content, filename, CONTENT_TYPE
