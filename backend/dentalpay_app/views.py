# --- Standard library ---
import logging
from datetime import timedelta

# --- Django ---
from django.http import HttpResponse
from django.utils import timezone

# --- Django REST Framework ---
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

# --- Local (project) imports ---
from .exports.fzo import export_invoices_to_fzo_files
from .exports.options import XmlExportOptions
from .serializers import InvoiceExportDefaultsSerializer, InvoiceExportRequestSerializer
from .utils.invoice_selector import select_invoices_for_export
from .validators.export_request_validator import MSG_NO_INVOICES

logger = logging.getLogger(__name__)


def _current_month_bounds():
    today = timezone.localdate()
    first_day = today.replace(day=1)
    next_month = (first_day + timedelta(days=32)).replace(day=1)
    return first_day, next_month - timedelta(days=1)


@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated])
def export_invoices_xml(request):
    """
    GET  -> defaults for the export form (current month, no type).
    POST -> {date_od, date_do, tip_fakture} -> XML file for the fund.
    """
    if request.method == 'GET':
        date_od, date_do = _current_month_bounds()
        data = InvoiceExportDefaultsSerializer(
            {"date_od": date_od, "date_do": date_do, "tip_fakture": None}
        ).data
        return Response(data)

    log_ctx = {"user": getattr(request.user, "id", None)}
    logger.info("[FZO] start user=%s payload=%r", log_ctx["user"], dict(request.data))

    serializer = InvoiceExportRequestSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    date_od = serializer.validated_data["date_od"]
    date_do = serializer.validated_data["date_do"]
    tip = serializer.validated_data["tip_fakture"]

    invoices = select_invoices_for_export(date_od, date_do, tip)
    if not invoices:
        logger.warning("[FZO] no invoices od=%s do=%s tip=%s user=%s", date_od, date_do, tip, log_ctx["user"])
        return Response({"error": MSG_NO_INVOICES}, status=404)

    content, filename, content_type = export_invoices_to_fzo_files(
        invoices,
        tip=tip,
        date_do=date_do,
        options=XmlExportOptions.from_settings(),
    )

    response = HttpResponse(content, content_type=content_type)
    response['Content-Disposition'] = f'attachment; filename={filename}'
    logger.info("[FZO] exported %d invoices as %s user=%s", len(invoices), filename, log_ctx["user"])
    return response
