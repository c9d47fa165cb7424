from __future__ import annotations

from sheet_listing.services.navigation import MenuToggle, NavigationState, ScrollStyleToggle


def test_scroll_toggle_threshold_is_exclusive():
    scroll = ScrollStyleToggle(threshold=48)
    assert scroll.scrolled is False  # evaluated at init
    assert scroll.on_scroll(48) is False
    assert scroll.on_scroll(49) is True
    assert scroll.on_scroll(10) is False


def test_menu_toggle_flips_open_and_aria():
    menu = MenuToggle()
    assert menu.aria_expanded == "false"
    assert menu.toggle() is True
    assert menu.aria_expanded == "true"
    assert menu.toggle() is False
    assert menu.aria_expanded == "false"


def test_menu_closes_on_link_click_only():
    menu = MenuToggle()
    menu.toggle()
    menu.on_nav_click(is_link=False)
    assert menu.open
    menu.on_nav_click(is_link=True)
    assert not menu.open


def test_menu_closes_on_outside_click():
    menu = MenuToggle()
    menu.toggle()
    menu.on_document_click(inside_nav=True)
    assert menu.open
    menu.on_document_click(inside_nav=False)
    assert not menu.open


def test_menu_closes_on_escape():
    menu = MenuToggle()
    menu.toggle()
    menu.on_keydown("Enter")
    assert menu.open
    menu.on_keydown("Escape")
    assert not menu.open
    assert menu.aria_expanded == "false"


def test_navigation_state_classes():
    nav = NavigationState.create(scroll_threshold=10)
    assert nav.css_classes == ("site-nav",)
    nav.scroll.on_scroll(11)
    nav.menu.toggle()
    assert nav.css_classes == ("site-nav", "scrolled", "open")
