from __future__ import annotations

from dataclasses import dataclass, field

"""Navigation bar behaviors as event-driven state.

Two independent affordances of the page header, each driven by the events
the page forwards to it:

- ``ScrollStyleToggle``: ``scrolled`` class once the vertical offset passes
  a threshold, re-evaluated on every scroll event and at init
- ``MenuToggle``: hamburger menu ``open`` state plus ``aria-expanded``;
  link clicks, clicks outside the nav and Escape close it

``NavigationState`` combines both into the nav element's class list.
"""

__all__ = [
    "ScrollStyleToggle",
    "MenuToggle",
    "NavigationState",
    "SCROLLED_CLASS",
    "OPEN_CLASS",
    "NAV_CLASS",
]

NAV_CLASS = "site-nav"
SCROLLED_CLASS = "scrolled"
OPEN_CLASS = "open"
ESCAPE_KEY = "Escape"


class ScrollStyleToggle:
    def __init__(self, threshold: int = 48) -> None:
        self.threshold = threshold
        self.scrolled = False
        self.on_scroll(0)

    def on_scroll(self, offset: float) -> bool:
        self.scrolled = offset > self.threshold
        return self.scrolled


class MenuToggle:
    def __init__(self) -> None:
        self.open = False

    @property
    def aria_expanded(self) -> str:
        return "true" if self.open else "false"

    def set_open(self, open_: bool) -> None:
        self.open = open_

    def toggle(self) -> bool:
        # the toggle's own click never reaches the outside-click handler
        self.set_open(not self.open)
        return self.open

    def on_nav_click(self, is_link: bool) -> None:
        """Click inside the link list; only clicks on a link close the menu."""
        if is_link:
            self.set_open(False)

    def on_document_click(self, inside_nav: bool) -> None:
        if not inside_nav:
            self.set_open(False)

    def on_keydown(self, key: str) -> None:
        if key == ESCAPE_KEY:
            self.set_open(False)


@dataclass
class NavigationState:
    scroll: ScrollStyleToggle = field(default_factory=ScrollStyleToggle)
    menu: MenuToggle = field(default_factory=MenuToggle)

    @classmethod
    def create(cls, scroll_threshold: int) -> NavigationState:
        return cls(scroll=ScrollStyleToggle(scroll_threshold), menu=MenuToggle())

    @property
    def css_classes(self) -> tuple[str, ...]:
        classes = [NAV_CLASS]
        if self.scroll.scrolled:
            classes.append(SCROLLED_CLASS)
        if self.menu.open:
            classes.append(OPEN_CLASS)
        return tuple(classes)
