from __future__ import annotations

import html
from collections.abc import Iterable, Sequence

from ..models.columns import ColumnRole, ColumnRoleTable, ColumnSpec
from ..models.row_data import NormalizedRow, RawRow
from ..models.table import EMPTY_CELL, NO_DATA_TEXT, RenderedTable, TableCell, TableRow
from .collation import hu_sort_key
from .formatters import format_decimal2, format_millions, is_blank
from .normalizer import normalize_row, parse_floor, resolve_column_roles

"""Table rendering.

``render_table`` turns parsed rows into a ``RenderedTable``:

1. visible columns = every column except availability
2. rows sorted by floor, then by the first visible column (hu collation)
3. each cell formatted by its column role; the columns at original
   positions 4 and 5 are shown in millions whatever their name
4. no rows -> one italic placeholder row spanning the whole table

``to_html`` serializes the result; it is the only place markup is built.
"""

__all__ = [
    "render_table",
    "floor_label",
    "render_cell",
    "to_html",
]

ROW_CLASS = "data-row"
AVAILABLE_CLASS = "available"
UNAVAILABLE_CLASS = "unavailable"

_FLOOR_LABELS = {0: "FSZ", 1: "I.", 2: "II."}


def floor_label(floor: int) -> str:
    return _FLOOR_LABELS.get(floor, str(floor))


def render_cell(spec: ColumnSpec, raw: RawRow, norm: NormalizedRow) -> str:
    value = raw.get(spec.name)
    if spec.role is ColumnRole.FLOOR:
        return floor_label(parse_floor(value) or norm.floor)
    if spec.role is ColumnRole.AREA:
        return EMPTY_CELL if is_blank(value) else format_decimal2(value)
    if spec.scaled_millions:
        return EMPTY_CELL if is_blank(value) else format_millions(value)
    return EMPTY_CELL if is_blank(value) else str(value)


def _row_classes(norm: NormalizedRow) -> tuple[str, ...]:
    if norm.is_available:
        return (ROW_CLASS, AVAILABLE_CLASS)
    if norm.is_unavailable:
        return (ROW_CLASS, UNAVAILABLE_CLASS)
    return (ROW_CLASS,)


def render_table(rows: Sequence[RawRow], headers: Iterable[str] | ColumnRoleTable) -> RenderedTable:
    columns = resolve_column_roles(headers)
    visible = columns.visible
    header_texts = tuple(spec.name for spec in visible)

    if not rows:
        placeholder = TableCell(NO_DATA_TEXT, colspan=max(1, len(visible)), italic=True)
        return RenderedTable(headers=header_texts, rows=(TableRow((placeholder,)),), placeholder=True)

    key_column = columns.sort_key_column
    combined = [(raw, normalize_row(raw, columns)) for raw in rows]

    def sort_key(item: tuple[RawRow, NormalizedRow]):
        raw, norm = item
        text = raw.get(key_column.name) if key_column is not None else None
        return norm.floor, hu_sort_key(str(text or ""))

    combined.sort(key=sort_key)

    body = tuple(
        TableRow(
            cells=tuple(TableCell(render_cell(spec, raw, norm)) for spec in visible),
            css_classes=_row_classes(norm),
        )
        for raw, norm in combined
    )
    return RenderedTable(headers=header_texts, rows=body)


def _cell_html(cell: TableCell) -> str:
    attrs = ""
    if cell.colspan != 1:
        attrs += f' colspan="{cell.colspan}"'
    if cell.italic:
        attrs += ' style="font-style: italic"'
    return f"<td{attrs}>{html.escape(cell.text)}</td>"


def to_html(table: RenderedTable, table_id: str) -> str:
    p: list[str] = []
    p.append(f'<table id="{html.escape(table_id)}">')
    p.append("<thead><tr>" + "".join(f"<th>{html.escape(h)}</th>" for h in table.headers) + "</tr></thead>")
    p.append("<tbody>")
    for row in table.rows:
        cls = f' class="{" ".join(row.css_classes)}"' if row.css_classes else ""
        p.append(f"<tr{cls}>" + "".join(_cell_html(c) for c in row.cells) + "</tr>")
    p.append("</tbody>")
    p.append("</table>")
    return "\n".join(p)
