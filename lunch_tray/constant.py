"""Editable static menu configuration."""

from __future__ import annotations

# Canonical menu values consumed by lunch_tray.data (which wraps these into MenuItem instances).
# Prices are strings so they parse into exact Decimals.
ENTREE_MENU: list[dict[str, str]] = [
    {"name": "Cowboy Pizza", "description": "Pepperoni, smoked sausage and barbecue sauce", "price": "6.00"},
    {"name": "Cauliflower", "description": "Whole cauliflower, brined, roasted, and deep fried", "price": "7.00"},
    {"name": "Three Bean Chili", "description": "Black beans, red beans, kidney beans, slow cooked, topped with onion", "price": "4.00"},
    {"name": "Mushroom Pasta", "description": "Penne pasta, mushrooms, basil, with plum tomatoes cooked in garlic and olive oil", "price": "5.50"},
    {"name": "Spicy Black Bean Skillet", "description": "Seasonal vegetables, black beans, house spice blend, served with avocado and quick pickled onions", "price": "5.50"},
]

SIDE_DISH_MENU: list[dict[str, str]] = [
    {"name": "Potstickers", "description": "Pan-fried pork dumplings with soy dipping sauce", "price": "2.50"},
    {"name": "Summer Salad", "description": "Heirloom tomatoes, butter lettuce, peaches, avocado, balsamic dressing", "price": "2.50"},
    {"name": "Butternut Squash Soup", "description": "Roasted butternut squash, roasted peppers, chili oil", "price": "3.00"},
    {"name": "Spicy Potatoes", "description": "Marble potatoes, roasted, and fried in house spice blend", "price": "2.00"},
    {"name": "Coconut Rice", "description": "Rice, coconut milk, lime, and sugar", "price": "1.50"},
]

ACCOMPANIMENT_MENU: list[dict[str, str]] = [
    {"name": "Apple", "description": "Crisp seasonal apple", "price": "0.50"},
    {"name": "Lunch Roll", "description": "Fresh baked roll made in house", "price": "0.50"},
    {"name": "Mixed Berries", "description": "Strawberries, blueberries, raspberries, and huckleberries", "price": "1.00"},
    {"name": "Pickled Veggies", "description": "Pickled cucumbers and carrots, made in house", "price": "0.50"},
]
