from __future__ import annotations

import re
from collections.abc import Iterable
from typing import Any

from ..models.columns import ColumnRole, ColumnRoleTable
from ..models.row_data import AVAILABLE, UNAVAILABLE, NormalizedRow, RawRow
from .formatters import to_number

"""Row normalization.

Pure and total: every raw row yields a ``NormalizedRow``; bad cells fall
back to defaults (floor 0, area 0.0, literal text) instead of raising.
"""

__all__ = [
    "resolve_column_roles",
    "parse_floor",
    "parse_availability",
    "parse_area",
    "normalize_row",
]

_NON_DIGIT_RE = re.compile(r"[^0-9]+")

_YES_VALUES = frozenset({"IGEN", "I", "TRUE"})
_NO_VALUES = frozenset({"NEM", "N", "FALSE"})


def resolve_column_roles(headers: Iterable[str] | ColumnRoleTable) -> ColumnRoleTable:
    if isinstance(headers, ColumnRoleTable):
        return headers
    return ColumnRoleTable.from_headers(headers)


def parse_floor(value: Any) -> int:
    """``'3. emelet'`` -> 3; no digits at all -> 0."""
    digits = _NON_DIGIT_RE.sub("", "" if value is None else str(value))
    if not digits:
        return 0
    try:
        return int(digits)
    except ValueError:
        # past the interpreter's int-from-string digit limit
        return 0


def parse_availability(value: Any) -> str:
    s = ("" if value is None else str(value)).strip().upper()
    if s in _YES_VALUES:
        return AVAILABLE
    if s in _NO_VALUES:
        return UNAVAILABLE
    return s[:1]


def parse_area(value: Any) -> float:
    if value is None:
        return 0.0
    return to_number(value) or 0.0


def normalize_row(raw: RawRow, columns: Iterable[str] | ColumnRoleTable) -> NormalizedRow:
    """Derive the canonical view of ``raw``.

    ``columns`` is either the header list or an already resolved role table;
    rendering resolves the table once and passes it for every row. When
    several columns share a role the last one wins, as in the export order.
    """
    table = resolve_column_roles(columns)
    floor = 0
    availability = ""
    values: dict[str, Any] = {}
    for spec in table:
        val = raw.get(spec.name)
        if spec.role is ColumnRole.FLOOR:
            floor = parse_floor(val)
        elif spec.role is ColumnRole.AVAILABILITY:
            availability = parse_availability(val)
        elif spec.role is ColumnRole.AREA:
            values[spec.name] = parse_area(val)
        else:
            values[spec.name] = val
    return NormalizedRow(floor=floor, availability=availability, values=values)
