"""Domain models for lunch-tray."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


class MenuCategory(Enum):
    """Order slot a menu item fills."""

    ENTREE = "entree"
    SIDE_DISH = "side_dish"
    ACCOMPANIMENT = "accompaniment"


@dataclass(frozen=True)
class MenuItem:
    """A selectable named, priced item."""

    name: str
    description: str
    price: Decimal


class Screen(Enum):
    """One step in the ordering flow. Declaration order is the forward path."""

    START = ("Lunch Tray", None)
    ENTREE_MENU = ("Choose Entree", MenuCategory.ENTREE)
    SIDE_DISH_MENU = ("Choose Side Dish", MenuCategory.SIDE_DISH)
    ACCOMPANIMENT_MENU = ("Choose Accompaniment", MenuCategory.ACCOMPANIMENT)
    CHECKOUT = ("Order Checkout", None)

    def __init__(self, title: str, category: MenuCategory | None) -> None:
        self.title = title
        self.category = category


@dataclass(frozen=True)
class OrderTotals:
    subtotal: Decimal
    tax: Decimal
    total: Decimal


@dataclass(frozen=True)
class OrderSummary:
    """Read-only snapshot of the current order for the rendering layer."""

    entree: MenuItem | None
    side_dish: MenuItem | None
    accompaniment: MenuItem | None
    totals: OrderTotals

    def selections(self) -> list[MenuItem]:
        return [item for item in (self.entree, self.side_dish, self.accompaniment) if item is not None]
