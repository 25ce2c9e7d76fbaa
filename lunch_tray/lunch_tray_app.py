"""Main Textual app class."""

from __future__ import annotations

from typing import Callable

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.css.query import NoMatches
from textual.reactive import reactive
from textual.widgets import Header, Static

from lunch_tray.controller import OrderFlowController
from lunch_tray.debug_log import log_debug
from lunch_tray.models import Screen
from lunch_tray.rendering import format_app_bar, format_help, format_menu_options, format_order_summary


class LunchTrayApp(App):
    """Step through entree, side dish and accompaniment menus to a checkout summary."""

    TITLE = "Lunch Tray"
    SUB_TITLE = "Entree / Side / Accompaniment"

    CSS = """
    Screen {
        layout: vertical;
    }

    #app-bar {
        border: heavy $secondary;
        padding: 0 1;
        height: 3;
        content-align: center middle;
    }

    #main-layout {
        height: 1fr;
    }

    #options-pane {
        width: 3fr;
        border: round $primary;
        padding: 1;
    }

    #summary-pane {
        width: 2fr;
        border: round $secondary;
        padding: 1;
    }

    #options {
        height: 1fr;
    }

    #help {
        height: 1;
        padding: 0 1;
        color: $text-muted;
    }
    """

    cursor_index = reactive(0)

    BINDINGS = [
        Binding("enter", "next", "Next", priority=True),
        Binding("escape", "cancel", "Cancel", priority=True),
        Binding("backspace", "navigate_up", "Back", priority=True),
        Binding("space", "select_current", "Select", priority=True),
        ("j", "move_cursor(1)", "Next option"),
        ("k", "move_cursor(-1)", "Previous option"),
        ("down", "move_cursor(1)", "Next option"),
        ("up", "move_cursor(-1)", "Previous option"),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, controller: OrderFlowController | None = None) -> None:
        super().__init__()
        self.controller = controller if controller is not None else OrderFlowController()
        self._unsubscribers: list[Callable[[], None]] = []
        log_debug("app_init")

    def compose(self) -> ComposeResult:
        yield Header()
        yield Static(id="app-bar")
        with Horizontal(id="main-layout"):
            with Vertical(id="options-pane"):
                yield Static(id="options")
            with Vertical(id="summary-pane"):
                yield Static(id="summary")
        yield Static(id="help")

    def on_mount(self) -> None:
        self._unsubscribers = [
            self.controller.order.subscribe(lambda _summary: self._refresh_all()),
            self.controller.router.subscribe(self._on_screen_changed),
        ]
        self._refresh_all()

    def on_unmount(self) -> None:
        for unsubscribe in self._unsubscribers:
            unsubscribe()
        self._unsubscribers = []

    def action_next(self) -> None:
        if not self.controller.next_enabled():
            log_debug(f"next_blocked screen={self.controller.current_screen().name} reason=no_selection")
            return
        callbacks = self.controller.callbacks_for(self.controller.current_screen())
        callbacks.on_next_button_clicked()

    def action_cancel(self) -> None:
        screen = self.controller.current_screen()
        if screen is Screen.START:
            return
        self.controller.callbacks_for(screen).on_cancel_button_clicked()

    def action_navigate_up(self) -> None:
        if not self.controller.can_navigate_back():
            return
        self.controller.navigate_up()

    def action_select_current(self) -> None:
        options = self.controller.options()
        if not options:
            return
        item = options[min(self.cursor_index, len(options) - 1)]
        self.controller.callbacks_for(self.controller.current_screen()).on_selection_changed(item)

    def action_move_cursor(self, delta: int) -> None:
        options = self.controller.options()
        if not options:
            return
        self.cursor_index = (self.cursor_index + delta) % len(options)
        self._refresh_options()

    def _on_screen_changed(self, screen: Screen) -> None:
        selected = self.controller.current_selection()
        options = self.controller.options()
        self.cursor_index = options.index(selected) if selected in options else 0
        log_debug(f"render screen={screen.name}")
        self._refresh_all()

    def _refresh_all(self) -> None:
        self._refresh_app_bar()
        self._refresh_options()
        self._refresh_summary()
        self._refresh_help()

    def _refresh_app_bar(self) -> None:
        try:
            bar = self.query_one("#app-bar", Static)
        except NoMatches:
            return
        bar.update(format_app_bar(self.controller.current_screen(), self.controller.can_navigate_back()))

    def _refresh_options(self) -> None:
        try:
            options_widget = self.query_one("#options", Static)
        except NoMatches:
            return
        screen = self.controller.current_screen()
        if screen is Screen.START:
            options_widget.update("Press Enter to start a new order.")
            return
        if screen is Screen.CHECKOUT:
            options_widget.update("Review your order, then Enter to submit or Esc to cancel.")
            return
        options_widget.update(
            format_menu_options(self.controller.options(), self.cursor_index, self.controller.current_selection())
        )

    def _refresh_summary(self) -> None:
        try:
            summary_widget = self.query_one("#summary", Static)
        except NoMatches:
            return
        summary = self.controller.summary()
        if self.controller.current_screen() is Screen.START:
            summary_widget.update("(no items yet)")
            return
        summary_widget.update(format_order_summary(summary))

    def _refresh_help(self) -> None:
        try:
            help_widget = self.query_one("#help", Static)
        except NoMatches:
            return
        help_widget.update(
            format_help(
                self.controller.current_screen(),
                self.controller.next_enabled(),
                self.controller.can_navigate_back(),
            )
        )
