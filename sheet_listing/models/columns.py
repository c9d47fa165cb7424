from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from enum import Enum

"""Column role model.

Each header of the export is classified once into a ``ColumnRole`` by
case-insensitive substring match on its name. The resulting
``ColumnRoleTable`` drives both normalization and cell rendering, so the
render path never re-inspects header text.

Classification precedence: floor > availability > area > price > generic.
The first visible column is the row identifier (secondary sort key); it
keeps its own role when it matched one of the rules above.
"""

__all__ = [
    "ColumnRole",
    "ColumnSpec",
    "ColumnRoleTable",
    "classify_header",
    "FLOOR_MARKERS",
    "AVAILABILITY_MARKERS",
    "AREA_MARKERS",
    "PRICE_MARKERS",
    "MILLIONS_POSITIONS",
]


class ColumnRole(Enum):
    """Role of one column in the listing.

    - IDENTIFIER: first visible generic column ("Lakás"), used as tie-break
    - FLOOR: storey number ("Emelet")
    - AVAILABILITY: I/N flag ("Elérhető"), styles the row, not displayed
    - AREA: square metres ("m2", "négyzetméter")
    - PRICE: prices ("ár", "Ft")
    - GENERIC: anything else
    """
    IDENTIFIER = "identifier"
    FLOOR = "floor"
    AVAILABILITY = "availability"
    AREA = "area"
    PRICE = "price"
    GENERIC = "generic"


FLOOR_MARKERS = ("emelet",)
AVAILABILITY_MARKERS = ("elér", "eler")
AREA_MARKERS = ("m2", "négy")
PRICE_MARKERS = ("ár", "ar", "ft")

# Zero-based positions in the original header order displayed in millions,
# whatever their name is
MILLIONS_POSITIONS = frozenset({4, 5})


def classify_header(name: str) -> ColumnRole:
    lk = name.lower()
    if any(m in lk for m in FLOOR_MARKERS):
        return ColumnRole.FLOOR
    if any(m in lk for m in AVAILABILITY_MARKERS):
        return ColumnRole.AVAILABILITY
    if any(m in lk for m in AREA_MARKERS):
        return ColumnRole.AREA
    if any(m in lk for m in PRICE_MARKERS):
        return ColumnRole.PRICE
    return ColumnRole.GENERIC


@dataclass(frozen=True)
class ColumnSpec:
    name: str
    index: int  # position in the original header order
    role: ColumnRole
    scaled_millions: bool = False

    @property
    def visible(self) -> bool:
        return self.role is not ColumnRole.AVAILABILITY


@dataclass(frozen=True)
class ColumnRoleTable:
    columns: tuple[ColumnSpec, ...]

    @classmethod
    def from_headers(cls, headers: Iterable[str]) -> ColumnRoleTable:
        specs: list[ColumnSpec] = []
        identifier_assigned = False
        for index, name in enumerate(headers):
            role = classify_header(name)
            if role is not ColumnRole.AVAILABILITY and not identifier_assigned:
                identifier_assigned = True
                if role is ColumnRole.GENERIC:
                    role = ColumnRole.IDENTIFIER
            specs.append(ColumnSpec(name, index, role, index in MILLIONS_POSITIONS))
        return cls(tuple(specs))

    def __iter__(self) -> Iterator[ColumnSpec]:
        return iter(self.columns)

    def __len__(self) -> int:
        return len(self.columns)

    @property
    def headers(self) -> list[str]:
        return [c.name for c in self.columns]

    @property
    def visible(self) -> Sequence[ColumnSpec]:
        return [c for c in self.columns if c.visible]

    @property
    def sort_key_column(self) -> ColumnSpec | None:
        """First visible column; its raw text breaks ties between floors."""
        visible = self.visible
        return visible[0] if visible else None

    def with_role(self, role: ColumnRole) -> list[ColumnSpec]:
        return [c for c in self.columns if c.role is role]
