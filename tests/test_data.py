from decimal import Decimal

from lunch_tray.data import (
    ACCOMPANIMENT_MENU_ITEMS,
    ENTREE_MENU_ITEMS,
    MENU_BY_CATEGORY,
    SIDE_DISH_MENU_ITEMS,
    items_for,
)
from lunch_tray.models import MenuCategory, Screen


def test_every_category_has_items():
    for category in MenuCategory:
        assert items_for(category)
    assert MENU_BY_CATEGORY[MenuCategory.ENTREE] is ENTREE_MENU_ITEMS
    assert MENU_BY_CATEGORY[MenuCategory.SIDE_DISH] is SIDE_DISH_MENU_ITEMS
    assert MENU_BY_CATEGORY[MenuCategory.ACCOMPANIMENT] is ACCOMPANIMENT_MENU_ITEMS


def test_prices_are_non_negative_decimals():
    for items in MENU_BY_CATEGORY.values():
        for item in items:
            assert isinstance(item.price, Decimal)
            assert item.price >= 0


def test_screen_order_and_titles():
    assert list(Screen) == [
        Screen.START,
        Screen.ENTREE_MENU,
        Screen.SIDE_DISH_MENU,
        Screen.ACCOMPANIMENT_MENU,
        Screen.CHECKOUT,
    ]
    assert Screen.ENTREE_MENU.title == "Choose Entree"
    assert Screen.ENTREE_MENU.category is MenuCategory.ENTREE
    assert Screen.START.category is None
    assert Screen.CHECKOUT.category is None
