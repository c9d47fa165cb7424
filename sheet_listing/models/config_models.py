from __future__ import annotations

from dataclasses import dataclass, field

"""Config dataclasses for the sheet listing renderer.

These are the typed, frozen form of ``config/listing.yml`` after schema
validation and defaulting in ``sheet_listing.config.loader``.
"""

DEFAULT_TABLE_ID = "lakas-table"
DEFAULT_TIMEOUT_SECONDS = 30.0
DEFAULT_OUTPUT_PATH = "build/index.html"
DEFAULT_PAGE_TITLE = "Lakások"
DEFAULT_SCROLL_THRESHOLD = 48

# Header set rendered when the remote export is unavailable
DEFAULT_FALLBACK_HEADERS: tuple[str, ...] = (
    "Lakás",
    "m2",
    "Erkély m2",
    "Kert m2",
    "Szerk.kész ár",
    "Kulcsrakész ár",
    "Emelet",
    "Elérhető",
)


@dataclass(frozen=True)
class NavLink:
    """One entry of the navigation bar link list."""
    label: str
    href: str


@dataclass(frozen=True)
class NavigationConfig:
    """Navigation bar settings.

    ``scroll_threshold`` is the vertical offset (px) above which the nav
    gets its ``scrolled`` class.
    """
    scroll_threshold: int = DEFAULT_SCROLL_THRESHOLD
    links: tuple[NavLink, ...] = ()


@dataclass(frozen=True)
class ListingConfig:
    """Root configuration object for one load/render run."""
    csv_url: str  # Empty string -> render fallback without fetching
    table_id: str = DEFAULT_TABLE_ID
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    fallback_headers: tuple[str, ...] = DEFAULT_FALLBACK_HEADERS
    output_path: str = DEFAULT_OUTPUT_PATH
    page_title: str = DEFAULT_PAGE_TITLE
    navigation: NavigationConfig = field(default_factory=NavigationConfig)
