# utils/invoice_selector.py
from __future__ import annotations

import logging
from datetime import date
from typing import List, Optional

from django.db.models import Prefetch, QuerySet

from dentalpay_app.models import Invoice, InvoiceItem

logger = logging.getLogger(__name__)


def build_invoices_query(
    date_od: date,
    date_do: date,
    tip_fakture: int,
    base_qs: Optional[QuerySet] = None,
) -> QuerySet:
    """
    Invoices eligible for the fund export:
      - locked
      - of the requested type
      - invoice_date in [date_od, date_do] (both inclusive)
      - part of a grouped (zbirna) invoice

    Items (with service) and patient/diagnosis/referring facility/doctor are
    loaded up front; items keep their entry order.
    """
    qs = base_qs if base_qs is not None else Invoice.objects.all()

    items_prefetch = Prefetch(
        "invoice_items",
        queryset=InvoiceItem.objects.select_related("service").order_by("pk"),
    )

    return (
        qs.select_related("patient", "diagnosis", "referring_facility", "referring_doctor")
        .prefetch_related(items_prefetch)
        .filter(is_locked=True)
        .filter(invoice_tip=tip_fakture)
        .filter(invoice_date__gte=date_od, invoice_date__lte=date_do)
        .filter(zbirna_faktura_broj__isnull=False)
    )


def select_invoices_for_export(date_od: date, date_do: date, tip_fakture: int) -> List[Invoice]:
    """Materialized export set, ordered by grouped invoice number. May be empty."""
    invoices = list(
        build_invoices_query(date_od, date_do, tip_fakture).order_by("zbirna_faktura_broj", "pk")
    )
    logger.info(
        "[FZO] selected %d invoices od=%s do=%s tip=%s", len(invoices), date_od, date_do, tip_fakture,
    )
    return invoices
