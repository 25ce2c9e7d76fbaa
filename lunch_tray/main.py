"""Entry point for the lunch-tray Textual app."""

from __future__ import annotations

from lunch_tray.controller import OrderFlowController
from lunch_tray.lunch_tray_app import LunchTrayApp
from lunch_tray.router import ScreenRouter


def build_app() -> LunchTrayApp:
    """Create the app with a router that follows the configured strictness."""
    return LunchTrayApp(OrderFlowController(router=ScreenRouter()))


def main() -> None:
    """Run the Textual application."""
    build_app().run()


if __name__ == "__main__":
    main()
