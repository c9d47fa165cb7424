from __future__ import annotations

from dataclasses import dataclass

"""Rendered table model (the output sink).

The renderer builds this tree instead of touching markup directly; HTML
serialization is a separate step (``services.renderer.to_html``).
"""

__all__ = [
    "TableCell",
    "TableRow",
    "RenderedTable",
    "EMPTY_CELL",
    "NO_DATA_TEXT",
]

EMPTY_CELL = "-"
NO_DATA_TEXT = "Nincs elérhető adat."


@dataclass(frozen=True)
class TableCell:
    text: str
    colspan: int = 1
    italic: bool = False


@dataclass(frozen=True)
class TableRow:
    cells: tuple[TableCell, ...]
    css_classes: tuple[str, ...] = ()


@dataclass(frozen=True)
class RenderedTable:
    headers: tuple[str, ...]  # visible header texts in original order
    rows: tuple[TableRow, ...]
    placeholder: bool = False  # True when rows holds only the "no data" row

    @property
    def data_row_count(self) -> int:
        return 0 if self.placeholder else len(self.rows)
