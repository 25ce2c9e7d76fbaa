"""Wires screen callbacks to order updates and router transitions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from lunch_tray.data import items_for
from lunch_tray.debug_log import log_debug
from lunch_tray.models import MenuItem, OrderSummary, Screen
from lunch_tray.order_state import OrderState
from lunch_tray.router import FORWARD_EDGES, InvalidTransitionError, ScreenRouter


@dataclass(frozen=True)
class ScreenCallbacks:
    """Callback handles a screen component is given."""

    on_selection_changed: Callable[[MenuItem], None]
    on_next_button_clicked: Callable[[], None]
    on_cancel_button_clicked: Callable[[], None]


class OrderFlowController:
    """Sole mutator of the order state and the router for one ordering session."""

    def __init__(self, order: OrderState | None = None, router: ScreenRouter | None = None) -> None:
        self.order = order if order is not None else OrderState()
        self.router = router if router is not None else ScreenRouter()

    def current_screen(self) -> Screen:
        return self.router.current_screen()

    def can_navigate_back(self) -> bool:
        return self.router.can_navigate_back()

    def summary(self) -> OrderSummary:
        return self.order.summary()

    def options(self) -> list[MenuItem]:
        """Menu items offered on the current screen (empty off the menu screens)."""
        category = self.current_screen().category
        if category is None:
            return []
        return items_for(category)

    def current_selection(self) -> MenuItem | None:
        category = self.current_screen().category
        if category is None:
            return None
        return self.order.selection_for(category)

    def next_enabled(self) -> bool:
        """Whether Next should be offered; menu screens need a choice first."""
        if self.current_screen().category is None:
            return True
        return self.current_selection() is not None

    def start_order(self) -> bool:
        return self.router.navigate(FORWARD_EDGES[Screen.START])

    def select(self, item: MenuItem) -> bool:
        screen = self.current_screen()
        if screen.category is None:
            if self.router.strict:
                raise InvalidTransitionError(screen, "select")
            log_debug(f"invalid_selection screen={screen.name} item={item.name!r} ignored")
            return False
        log_debug(f"selection screen={screen.name} item={item.name!r} price={item.price}")
        self.order.update(screen.category, item)
        return True

    def next(self) -> bool:
        screen = self.current_screen()
        if screen is Screen.CHECKOUT:
            log_debug(f"order_confirmed total={self.order.compute_totals().total}")
            return self._reset_and_return_to_start()
        return self.router.navigate(FORWARD_EDGES[screen])

    def cancel(self) -> bool:
        log_debug(f"order_cancelled screen={self.current_screen().name}")
        return self._reset_and_return_to_start()

    def navigate_up(self) -> bool:
        """Go back one screen; landing on START also clears the order."""
        if not self.router.navigate_up():
            return False
        if self.current_screen() is Screen.START:
            self._reset_order()
        return True

    def callbacks_for(self, screen: Screen) -> ScreenCallbacks:
        """Build the callback handles for a screen component."""
        on_next = self.start_order if screen is Screen.START else self.next
        return ScreenCallbacks(
            on_selection_changed=self.select,
            on_next_button_clicked=on_next,
            on_cancel_button_clicked=self.cancel,
        )

    def _reset_and_return_to_start(self) -> bool:
        # START has no cancel edge; the router rejects it before the order is touched.
        if self.current_screen() is Screen.START:
            return self.router.pop_to_start()
        self._reset_order()
        return self.router.pop_to_start()

    def _reset_order(self) -> None:
        log_debug("order_reset")
        self.order.reset()
