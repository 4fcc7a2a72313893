"""Tests for the navigation bar entries."""

from app.navigation import ACTIVE_CLASS, HOVER_CLASS, INACTIVE_CLASS, nav_items


def test_links_in_order() -> None:
    items = nav_items("/")
    assert [(item.label, item.href) for item in items] == [
        ("Dashboard", "/"),
        ("Issues", "/issues"),
    ]


def test_current_path_is_highlighted() -> None:
    dashboard, issues = nav_items("/issues")
    assert issues.active
    assert issues.css_class == f"{ACTIVE_CLASS} {HOVER_CLASS}"
    assert not dashboard.active
    assert dashboard.css_class == f"{INACTIVE_CLASS} {HOVER_CLASS}"


def test_nested_path_highlights_nothing() -> None:
    assert not any(item.active for item in nav_items("/issues/new"))
