"""Rendering helpers turning controller state into rich Text."""

from __future__ import annotations

from decimal import Decimal

from rich.text import Text

from lunch_tray import config
from lunch_tray.models import MenuCategory, MenuItem, OrderSummary, Screen

_CATEGORY_LABELS: dict[MenuCategory, str] = {
    MenuCategory.ENTREE: "Entree",
    MenuCategory.SIDE_DISH: "Side Dish",
    MenuCategory.ACCOMPANIMENT: "Accompaniment",
}


def format_price(amount: Decimal) -> str:
    """Format a Decimal amount as currency, e.g. $9.72."""
    return f"{config.CURRENCY_SYMBOL}{amount:,.2f}"


def badge_style(category: MenuCategory) -> str:
    """Return a consistent badge style for category tags."""
    if category is MenuCategory.ENTREE:
        return "bold #ffffff on #b23a48"
    if category is MenuCategory.SIDE_DISH:
        return "bold #ffffff on #2f6db5"
    return "bold #0b1f0f on #5fbf72"


def format_app_bar(screen: Screen, can_navigate_back: bool) -> Text:
    """Render the title bar with a back arrow when navigating up is possible."""
    text = Text()
    if can_navigate_back:
        text.append("← ", style="bold")
    text.append(screen.title, style="bold")
    return text


def format_menu_options(options: list[MenuItem], cursor_index: int, selected: MenuItem | None) -> Text:
    """Render radio-style options with a cursor pointer and descriptions."""
    lines = Text()
    for idx, item in enumerate(options):
        if idx > 0:
            lines.append("\n")
        pointer = "➤ " if idx == cursor_index else "  "
        radio = "(•)" if item == selected else "( )"
        lines.append(f"{pointer}{radio} ")
        lines.append(item.name, style="bold" if item == selected else "")
        lines.append(f"  {format_price(item.price)}")
        lines.append(f"\n      {item.description}", style="dim")
    return lines


def format_order_summary(summary: OrderSummary) -> Text:
    """Render selected items plus subtotal, tax and total."""
    text = Text()
    text.append("Order Summary", style="bold")
    rows = [
        (MenuCategory.ENTREE, summary.entree),
        (MenuCategory.SIDE_DISH, summary.side_dish),
        (MenuCategory.ACCOMPANIMENT, summary.accompaniment),
    ]
    for category, item in rows:
        if item is None:
            continue
        text.append("\n")
        text.append(f" {_CATEGORY_LABELS[category]} ", style=badge_style(category))
        text.append(f" {item.name}  {format_price(item.price)}")

    totals = summary.totals
    text.append(f"\n\nSubtotal: {format_price(totals.subtotal)}")
    text.append(f"\nTax: {format_price(totals.tax)}")
    text.append(f"\nTotal: {format_price(totals.total)}", style="bold")
    return text


def format_help(screen: Screen, next_enabled: bool, can_navigate_back: bool) -> str:
    """Key hints for the current screen."""
    if screen is Screen.START:
        return "Enter start order. Ctrl+Q quit."
    parts: list[str] = []
    if screen.category is not None:
        parts.append("J/K/↑/↓ move, Space select")
    if screen is Screen.CHECKOUT:
        parts.append("Enter submit")
    elif next_enabled:
        parts.append("Enter next")
    parts.append("Esc cancel")
    if can_navigate_back:
        parts.append("Backspace back")
    return ", ".join(parts) + "."
