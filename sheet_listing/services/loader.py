from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from datetime import UTC, datetime
from types import MappingProxyType

import requests

from ..delimited.parser import parse_csv
from ..models.config_models import ListingConfig
from ..models.load_result import LoadResult, LoadSource
from ..models.row_data import RawRow
from .renderer import render_table

"""Data loader: one-shot fetch -> parse -> render, with a static fallback.

Any failure between issuing the request and finishing the render (network
error, non-2xx status, parse or render exception) is logged as a warning
and replaced by the fallback table: configured headers, zero rows. No
retry, no cache.

The most recent result is kept as a read-only snapshot (``last_result``).
"""

logger = logging.getLogger(__name__)

__all__ = [
    "SourceFetchError",
    "fetch_csv_text",
    "load_and_render",
    "last_result",
    "reset_last_result",
]

Fetcher = Callable[[str, float], str]

_last_result: LoadResult | None = None


class SourceFetchError(Exception):
    """Raised when the CSV export cannot be retrieved."""


def fetch_csv_text(url: str, timeout: float) -> str:
    """GET the export and decode it as UTF-8 (BOM dropped, bad bytes replaced)."""
    try:
        resp = requests.get(url, timeout=timeout)
        resp.raise_for_status()
    except requests.RequestException as e:
        raise SourceFetchError(f"CSV fetch failed: {e}") from e
    return resp.content.decode("utf-8-sig", errors="replace")


def _snapshot_rows(rows: Sequence[RawRow]) -> tuple[MappingProxyType, ...]:
    return tuple(MappingProxyType(dict(r)) for r in rows)


def _finish(
    source: LoadSource,
    headers: Sequence[str],
    rows: Sequence[RawRow],
    start_time: datetime,
    error: str | None = None,
) -> LoadResult:
    global _last_result
    table = render_table(rows, headers)
    end_time = datetime.now(UTC)
    result = LoadResult(
        source=source,
        headers=tuple(headers),
        rows=_snapshot_rows(rows),
        table=table,
        start_time=start_time,
        end_time=end_time,
        elapsed_seconds=(end_time - start_time).total_seconds(),
        error=error,
    )
    _last_result = result
    return result


def load_and_render(config: ListingConfig, fetch: Fetcher | None = None) -> LoadResult:
    """Load the configured export and render it, falling back on failure.

    Args:
        config: Listing configuration (URL, timeout, fallback headers)
        fetch: ``(url, timeout) -> text``; defaults to ``fetch_csv_text``

    Returns:
        LoadResult with the rendered table; never raises for data problems
    """
    start_time = datetime.now(UTC)
    fetch = fetch or fetch_csv_text
    error: str | None = None

    if config.csv_url:
        try:
            logger.debug(f"fetching {config.csv_url}")
            text = fetch(config.csv_url, config.timeout_seconds)
            parsed = parse_csv(text)
            result = _finish(LoadSource.REMOTE, parsed.headers, parsed.rows, start_time)
            logger.info(f"loaded {len(parsed.rows)} rows from remote CSV")
            return result
        except Exception as e:
            error = str(e)
            logger.warning(f"CSV load failed, using fallback: {e}")
    else:
        logger.debug("no csv_url configured -> fallback table")

    return _finish(LoadSource.FALLBACK, list(config.fallback_headers), [], start_time, error)


def last_result() -> LoadResult | None:
    """Read-only snapshot of the most recent load, for inspection."""
    return _last_result


def reset_last_result() -> None:
    """Reset the snapshot. Mainly for testing purposes."""
    global _last_result
    _last_result = None
