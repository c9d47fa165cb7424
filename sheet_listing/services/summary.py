from __future__ import annotations

from ..models.load_result import LoadResult

"""Summary line rendering.

Format:
SUMMARY source={remote|fallback} rows={rows} columns={columns}
visible_columns={visible} elapsed_sec={elapsed}
"""


def _format_seconds(value: float) -> str:
    if value == 0:
        return "0"
    if value == int(value):
        return str(int(value))
    if value < 0.01:
        # avoid scientific notation for very small values
        return f"{value:.6f}".rstrip("0").rstrip(".")
    return str(round(value, 3))


def render_summary_line(result: LoadResult) -> str:
    """Render the SUMMARY line for one load.

    Examples:
        >>> from datetime import datetime, timezone
        >>> from sheet_listing.models.load_result import LoadResult, LoadSource
        >>> from sheet_listing.services.renderer import render_table
        >>> t = datetime(2024, 1, 1, tzinfo=timezone.utc)
        >>> result = LoadResult(
        ...     source=LoadSource.FALLBACK, headers=("Lakás", "Elérhető"), rows=(),
        ...     table=render_table([], ["Lakás", "Elérhető"]),
        ...     start_time=t, end_time=t, elapsed_seconds=0.0,
        ... )
        >>> render_summary_line(result)
        'SUMMARY source=fallback rows=0 columns=2 visible_columns=1 elapsed_sec=0'
    """
    return (
        f"SUMMARY source={result.source.value} "
        f"rows={len(result.rows)} "
        f"columns={len(result.headers)} "
        f"visible_columns={len(result.table.headers)} "
        f"elapsed_sec={_format_seconds(result.elapsed_seconds)}"
    )
