"""Static menu data."""

from __future__ import annotations

from decimal import Decimal

from lunch_tray.constant import ACCOMPANIMENT_MENU, ENTREE_MENU, SIDE_DISH_MENU
from lunch_tray.models import MenuCategory, MenuItem


def _build_items(raw_items: list[dict[str, str]]) -> list[MenuItem]:
    items = [
        MenuItem(name=raw["name"], description=raw["description"], price=Decimal(raw["price"]))
        for raw in raw_items
    ]
    for item in items:
        if item.price < 0:
            raise ValueError(f"Menu item {item.name!r} has a negative price")
    return items


ENTREE_MENU_ITEMS: list[MenuItem] = _build_items(ENTREE_MENU)
SIDE_DISH_MENU_ITEMS: list[MenuItem] = _build_items(SIDE_DISH_MENU)
ACCOMPANIMENT_MENU_ITEMS: list[MenuItem] = _build_items(ACCOMPANIMENT_MENU)

MENU_BY_CATEGORY: dict[MenuCategory, list[MenuItem]] = {
    MenuCategory.ENTREE: ENTREE_MENU_ITEMS,
    MenuCategory.SIDE_DISH: SIDE_DISH_MENU_ITEMS,
    MenuCategory.ACCOMPANIMENT: ACCOMPANIMENT_MENU_ITEMS,
}


def items_for(category: MenuCategory) -> list[MenuItem]:
    """Get the menu items offered for a category."""
    return MENU_BY_CATEGORY[category]

