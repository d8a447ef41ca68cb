from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Optional, Tuple


def _safe_decimal(v) -> Decimal:
    """Decimal from anything; None/garbage -> 0."""
    if isinstance(v, Decimal):
        return v if v.is_finite() else Decimal("0")
    if v is None or str(v).strip() == "":
        return Decimal("0")
    try:
        d = Decimal(str(v))
    except (InvalidOperation, ValueError):
        return Decimal("0")
    return d if d.is_finite() else Decimal("0")


@dataclass(frozen=True)
class ExportFormatPolicy:
    """
    Text representation of numbers and dates for the fund XML.

    Everything is formatted explicitly (no locale, no str(float)), so the
    output is the same on every host regardless of LANG/LC_* settings.
    """

    money_places: int = 2
    rounding: str = ROUND_HALF_UP
    decimal_separator: str = "."
    date_format: str = "%Y-%m-%d"
    file_date_format: str = "%d%m%Y"
    token_format: str = "%Y%m%d%H%M%S"
    token_fraction_digits: int = 4

    def money(self, value) -> str:
        """
        12.5 -> "12.50", 0 -> "0.00", -3 -> "-3.00".
        Negative zero after rounding is written as plain zero.
        """
        exp = Decimal(1).scaleb(-self.money_places)
        q = _safe_decimal(value).quantize(exp, rounding=self.rounding)
        if q == 0:
            q = abs(q)
        text = f"{q:.{self.money_places}f}"
        if self.decimal_separator != ".":
            text = text.replace(".", self.decimal_separator)
        return text

    def date(self, value: Optional[date]) -> str:
        """date/datetime -> YYYY-MM-DD; None -> ''."""
        return value.strftime(self.date_format) if value else ""

    def file_date(self, value: date) -> str:
        """Date part of the output file name (ddMMyyyy)."""
        return value.strftime(self.file_date_format)

    def generation_token(self, moment: datetime) -> str:
        """
        yyyyMMddHHmmss + fractional seconds (ten-thousandths by default).
        Used as a uniqueness token in the header, not as a real timestamp.
        """
        frac = moment.microsecond // (10 ** (6 - self.token_fraction_digits))
        return f"{moment.strftime(self.token_format)}{frac:0{self.token_fraction_digits}d}"


DEFAULT_POLICY = ExportFormatPolicy()


def flag_dn(amount) -> str:
    """'D' if amount > 0 else 'N' (participation paid yes/no)."""
    return "D" if _safe_decimal(amount) > 0 else "N"


def parse_service_code(raw: Optional[str]) -> Tuple[str, str, str]:
    """
    Splits a service code into (nivo, grupa, oznaka): 1 + 3 + 3 chars.

    Short codes are padded differently per segment: grupa pads the code on
    the RIGHT to 4 chars, oznaka pads it on the LEFT to 7 chars. The fund
    registry relies on exactly this, e.g.

        "1234567" -> ("1", "234", "567")
        "12"      -> ("1", "200", "012")
        ""        -> ("0", "000", "000")
    """
    code = raw or ""

    nivo = code[0] if len(code) >= 1 else "0"

    if len(code) >= 4:
        grupa = code[1:4]
    else:
        grupa = code.ljust(4, "0")[1:4]

    if len(code) >= 7:
        oznaka = code[4:7]
    else:
        oznaka = code.rjust(7, "0")[4:7]

    return nivo, grupa, oznaka
