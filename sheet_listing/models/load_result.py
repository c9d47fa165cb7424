from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from .table import RenderedTable

"""Load result model.

One ``LoadResult`` is produced per load/render cycle and replaces the
previous one wholesale; nothing in it is mutated afterwards.
"""

__all__ = [
    "LoadSource",
    "LoadResult",
]


class LoadSource(Enum):
    """Where the rendered rows came from.

    - REMOTE: the configured CSV export was fetched and parsed
    - FALLBACK: no URL configured, or the fetch/parse failed
    """
    REMOTE = "remote"
    FALLBACK = "fallback"


@dataclass(frozen=True)
class LoadResult:
    source: LoadSource
    headers: tuple[str, ...]
    rows: tuple[Mapping[str, str], ...]  # read-only raw rows
    table: RenderedTable
    start_time: datetime
    end_time: datetime
    elapsed_seconds: float
    error: str | None = None  # failure reason when source is FALLBACK after an error

    @property
    def is_fallback(self) -> bool:
        return self.source is LoadSource.FALLBACK
