from __future__ import annotations

import math
import re
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Any

"""Number formatting for the listing table (hu-HU).

Spreadsheet exports mix "1 234,5", "1234.5" and free text in the same
column, so every numeric display goes through ``to_number`` first:
whitespace removed, comma read as the decimal point. Text that still does
not parse is shown as-is instead of failing the render.

Locale rules (hu-HU): non-breaking space groups every three integer
digits once the integer part is five digits or longer ("1234" but
"12 345"), comma is the decimal separator, prices carry a `` Ft`` suffix.
"""

__all__ = [
    "to_number",
    "is_blank",
    "format_currency",
    "format_decimal2",
    "format_millions",
    "GROUP_SEPARATOR",
    "DECIMAL_SEPARATOR",
    "CURRENCY_SUFFIX",
]

GROUP_SEPARATOR = "\u00a0"
DECIMAL_SEPARATOR = ","
CURRENCY_SUFFIX = " Ft"

_MIN_GROUPED_DIGITS = 5

_WHITESPACE_RE = re.compile(r"\s+")


def is_blank(value: Any) -> bool:
    return value is None or str(value).strip() == ""


def to_number(value: Any) -> float | None:
    """Coerce a spreadsheet cell to a float, or None when it is not numeric.

    Whitespace-only text coerces to 0.0. Infinities, NaN and Python-only
    literal forms such as ``1_000`` count as non-numeric.
    """
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        num = float(value)
        return num if math.isfinite(num) else None
    text = _WHITESPACE_RE.sub("", str(value)).replace(",", ".")
    if text == "":
        return 0.0
    if "_" in text:
        return None
    try:
        num = float(text)
    except ValueError:
        return None
    return num if math.isfinite(num) else None


def _group_digits(digits: str) -> str:
    # hu-HU leaves four-digit integer parts ungrouped
    if len(digits) < _MIN_GROUPED_DIGITS:
        return digits
    head = len(digits) % 3 or 3
    groups = [digits[:head]] + [digits[i:i + 3] for i in range(head, len(digits), 3)]
    return GROUP_SEPARATOR.join(groups)


def _format_locale(num: float, min_fraction: int, max_fraction: int) -> str:
    with localcontext() as ctx:
        # wide enough for any finite float plus the fraction digits
        ctx.prec = 400
        quantized = Decimal(repr(num)).quantize(Decimal(1).scaleb(-max_fraction), rounding=ROUND_HALF_UP)
    text = format(abs(quantized), "f")
    int_part, _, frac_part = text.partition(".")
    frac_part = frac_part.rstrip("0")
    if len(frac_part) < min_fraction:
        frac_part = frac_part.ljust(min_fraction, "0")
    sign = "-" if quantized < 0 else ""
    out = sign + _group_digits(int_part)
    if frac_part:
        out += DECIMAL_SEPARATOR + frac_part
    return out


def format_currency(value: Any) -> str:
    """Format a price as hu-HU currency, e.g. ``'45000000'`` -> ``'45 000 000 Ft'``.

    Empty input gives ``''``; non-numeric input is returned unchanged.
    """
    if value is None or value == "":
        return ""
    num = to_number(value)
    if num is None:
        return str(value)
    return _format_locale(num, 0, 3) + CURRENCY_SUFFIX


def format_decimal2(value: Any) -> str:
    """Format with exactly two fraction digits, e.g. ``'1234,5'`` -> ``'1 234,50'``."""
    if value is None or value == "":
        return ""
    num = to_number(value)
    if num is None:
        return str(value)
    return _format_locale(num, 2, 2)


def format_millions(value: Any) -> str:
    # Price columns are shown in millions; unparseable text counts as 0.
    # Ties round away from zero on the exact binary quotient.
    num = to_number(value) or 0.0
    with localcontext() as ctx:
        ctx.prec = 400
        scaled = Decimal(num / 1_000_000).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    return format(scaled, "f")
