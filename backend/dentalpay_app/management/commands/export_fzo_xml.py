from pathlib import Path

from django.core.management.base import BaseCommand, CommandError
from django.utils.dateparse import parse_date

from dentalpay_app.exports.fzo import export_invoices_to_fzo_files
from dentalpay_app.exports.options import XmlExportOptions
from dentalpay_app.utils.invoice_selector import select_invoices_for_export
from dentalpay_app.validators.export_request_validator import MSG_NO_INVOICES, validate_export_request


def _parse_date_arg(value):
    """YYYY-MM-DD or None; malformed and impossible dates are treated as missing."""
    if not value:
        return None
    try:
        return parse_date(value)
    except ValueError:
        return None


class Command(BaseCommand):
    help = 'Izvoz zaključanih zbirnih faktura u XML za fond zdravstvenog osiguranja'

    def add_arguments(self, parser):
        parser.add_argument('--od', dest='date_od', help='Datum od (YYYY-MM-DD)')
        parser.add_argument('--do', dest='date_do', help='Datum do (YYYY-MM-DD)')
        parser.add_argument('--tip', dest='tip_fakture', type=int, help='Tip fakture (5 ili 14)')
        parser.add_argument('--output-dir', dest='output_dir', default='.', help='Folder za XML fajl')

    def handle(self, *args, **options):
        date_od = _parse_date_arg(options['date_od'])
        date_do = _parse_date_arg(options['date_do'])

        tip = options['tip_fakture']

        error = validate_export_request(date_od, date_do, tip)
        if error:
            raise CommandError(error)

        invoices = select_invoices_for_export(date_od, date_do, tip)
        if not invoices:
            raise CommandError(MSG_NO_INVOICES)

        content, filename, _ctype = export_invoices_to_fzo_files(
            invoices,
            tip=tip,
            date_do=date_do,
            options=XmlExportOptions.from_settings(),
        )

        output_dir = Path(options['output_dir'])
        output_dir.mkdir(parents=True, exist_ok=True)
        destination = output_dir / filename
        destination.write_bytes(content)

        self.stdout.write(self.style.SUCCESS(f'{len(invoices)} faktura izvezeno u {destination}'))
