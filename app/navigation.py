from dataclasses import dataclass


@dataclass(frozen=True)
class NavLink:
    label: str
    href: str


@dataclass(frozen=True)
class NavItem:
    label: str
    href: str
    active: bool
    css_class: str


LINKS = (
    NavLink("Dashboard", "/"),
    NavLink("Issues", "/issues"),
)

ACTIVE_CLASS = "text-emerald-500"
INACTIVE_CLASS = "text-zinc-700"
HOVER_CLASS = "hover:text-zinc-300 transition-colors"


def nav_items(current_path: str) -> list[NavItem]:
    """Build the navigation bar entries, highlighting the one for ``current_path``."""
    items = []
    for link in LINKS:
        active = link.href == current_path
        items.append(
            NavItem(
                label=link.label,
                href=link.href,
                active=active,
                css_class=f"{ACTIVE_CLASS if active else INACTIVE_CLASS} {HOVER_CLASS}",
            )
        )
    return items
