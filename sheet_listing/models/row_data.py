from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

"""Row models for the listing table.

``RawRow`` is what the CSV parser yields: header -> trimmed string.
``NormalizedRow`` is derived from it during rendering and thrown away once
the table is built.
"""

__all__ = [
    "RawRow",
    "NormalizedRow",
    "AVAILABLE",
    "UNAVAILABLE",
]

RawRow = Mapping[str, str]

AVAILABLE = "I"
UNAVAILABLE = "N"


@dataclass(frozen=True)
class NormalizedRow:
    """Canonical view of one raw row.

    floor: storey number, 0 for ground floor or anything unparseable
    availability: ``I`` (available), ``N`` (unavailable), otherwise the first
        uppercased character of the cell, or ``''``
    values: area columns as float, every other non-floor, non-availability
        column passed through unchanged
    """
    floor: int = 0
    availability: str = ""
    values: dict[str, Any] = field(default_factory=dict)

    @property
    def is_available(self) -> bool:
        return self.availability == AVAILABLE

    @property
    def is_unavailable(self) -> bool:
        return self.availability == UNAVAILABLE
