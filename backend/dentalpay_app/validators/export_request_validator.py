# validators/export_request_validator.py

import logging
from datetime import date
from typing import Optional

logger = logging.getLogger("dentalpay_app")

ALLOWED_INVOICE_TYPES = (5, 14)

MSG_DATES_REQUIRED = "Morate uneti oba datuma (Od i Do)."
MSG_DATE_ORDER = "Datum 'Od' mora biti manji od datuma 'Do'."
MSG_INVOICE_TYPE = "Tip fakture mora biti 5 ili 14."
MSG_NO_INVOICES = "Nema faktura u zadatom intervalu."


def validate_export_request(
    date_od: Optional[date],
    date_do: Optional[date],
    tip_fakture: Optional[int],
) -> Optional[str]:
    """
    Checks the export request before any invoice is read.

    Rules (first failing one wins):
    - both dates present
    - date_od strictly before date_do
    - tip_fakture is 5 or 14

    Returns:
        None if the request is valid, otherwise the error message for the user
    """
    if date_od is None or date_do is None:
        logger.debug("Export request rejected: missing date (od=%r do=%r)", date_od, date_do)
        return MSG_DATES_REQUIRED

    if date_od >= date_do:
        logger.debug("Export request rejected: od=%s not before do=%s", date_od, date_do)
        return MSG_DATE_ORDER

    if tip_fakture is None or tip_fakture not in ALLOWED_INVOICE_TYPES:
        logger.debug("Export request rejected: tip_fakture=%r", tip_fakture)
        return MSG_INVOICE_TYPE

    return None
