from decimal import Decimal

from lunch_tray.lunch_tray_app import LunchTrayApp
from lunch_tray.models import Screen


async def test_key_presses_drive_a_full_order():
    app = LunchTrayApp()
    async with app.run_test() as pilot:
        controller = app.controller
        await pilot.press("enter")
        assert controller.current_screen() is Screen.ENTREE_MENU

        # Next is ignored until a choice is made.
        await pilot.press("enter")
        assert controller.current_screen() is Screen.ENTREE_MENU

        await pilot.press("space", "enter")
        assert controller.order.entree.name == "Cowboy Pizza"
        assert controller.current_screen() is Screen.SIDE_DISH_MENU

        await pilot.press("space", "enter")
        assert controller.order.side_dish.name == "Potstickers"

        await pilot.press("space", "enter")
        assert controller.current_screen() is Screen.CHECKOUT
        assert controller.summary().totals.total == Decimal("9.72")

        await pilot.press("enter")
        assert controller.current_screen() is Screen.START
        assert controller.summary().totals.total == 0


async def test_cursor_moves_and_escape_cancels():
    app = LunchTrayApp()
    async with app.run_test() as pilot:
        controller = app.controller
        await pilot.press("enter", "j", "space")
        assert controller.order.entree == controller.options()[1]

        await pilot.press("escape")
        assert controller.current_screen() is Screen.START
        assert controller.order.entree is None

        # Escape at START is a no-op rather than an invalid transition.
        await pilot.press("escape")
        assert controller.current_screen() is Screen.START


async def test_backspace_navigates_up():
    app = LunchTrayApp()
    async with app.run_test() as pilot:
        controller = app.controller
        await pilot.press("enter", "space", "enter")
        assert controller.current_screen() is Screen.SIDE_DISH_MENU

        await pilot.press("backspace")
        assert controller.current_screen() is Screen.ENTREE_MENU
        assert controller.order.entree is not None
        assert app.cursor_index == 0

        await pilot.press("backspace")
        assert controller.current_screen() is Screen.START
        assert controller.order.entree is None

        await pilot.press("backspace")
        assert controller.current_screen() is Screen.START
