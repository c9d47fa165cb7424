"""Domain models for the sheet listing renderer.

Configuration, column roles, raw/normalized rows, the rendered table tree
and the per-load result.
"""

from .columns import ColumnRole, ColumnRoleTable, ColumnSpec
from .config_models import ListingConfig, NavigationConfig, NavLink
from .load_result import LoadResult, LoadSource
from .row_data import NormalizedRow, RawRow
from .table import RenderedTable, TableCell, TableRow

__all__ = [
    # Configuration models
    "ListingConfig",
    "NavigationConfig",
    "NavLink",
    # Column roles
    "ColumnRole",
    "ColumnRoleTable",
    "ColumnSpec",
    # Row / table models
    "RawRow",
    "NormalizedRow",
    "RenderedTable",
    "TableCell",
    "TableRow",
    "LoadResult",
    "LoadSource",
]
