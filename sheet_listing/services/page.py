from __future__ import annotations

import html
from collections.abc import Sequence

from ..models.config_models import NavLink
from ..models.load_result import LoadResult
from .navigation import NavigationState
from .renderer import to_html


def render_nav(nav: NavigationState, links: Sequence[NavLink]) -> str:
    p: list[str] = []
    p.append(f'<nav class="{" ".join(nav.css_classes)}">')
    p.append(
        f'<button class="menu-toggle" type="button" aria-expanded="{nav.menu.aria_expanded}" '
        'aria-label="Menü">&#9776;</button>'
    )
    p.append('<ul class="nav-list">')
    for link in links:
        p.append(f'<li><a href="{html.escape(link.href)}">{html.escape(link.label)}</a></li>')
    p.append("</ul>")
    p.append("</nav>")
    return "\n".join(p)


def render_page(
    result: LoadResult,
    nav: NavigationState,
    links: Sequence[NavLink],
    *,
    table_id: str,
    title: str,
) -> str:
    """Assemble the standalone HTML page: nav bar followed by the table."""
    p: list[str] = []
    p.append("<!DOCTYPE html>")
    p.append('<html lang="hu">')
    p.append("<head>")
    p.append('<meta charset="utf-8">')
    p.append(f"<title>{html.escape(title)}</title>")
    p.append("</head>")
    p.append("<body>")
    p.append(render_nav(nav, links))
    p.append("<main>")
    p.append(to_html(result.table, table_id))
    p.append("</main>")
    p.append("</body>")
    p.append("</html>")
    return "\n".join(p) + "\n"
