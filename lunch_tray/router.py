"""Finite state machine over the fixed ordering screens."""

from __future__ import annotations

from typing import Callable

from lunch_tray import config
from lunch_tray.debug_log import log_debug
from lunch_tray.models import Screen

ScreenListener = Callable[[Screen], None]

# The only forward edges; every non-start screen may also cancel back to START.
FORWARD_EDGES: dict[Screen, Screen] = {
    Screen.START: Screen.ENTREE_MENU,
    Screen.ENTREE_MENU: Screen.SIDE_DISH_MENU,
    Screen.SIDE_DISH_MENU: Screen.ACCOMPANIMENT_MENU,
    Screen.ACCOMPANIMENT_MENU: Screen.CHECKOUT,
    Screen.CHECKOUT: Screen.START,
}


class InvalidTransitionError(RuntimeError):
    """Raised for a navigation request outside the closed transition table."""

    def __init__(self, source: Screen, action: str) -> None:
        super().__init__(f"Invalid transition {action!r} from {source.name}")
        self.source = source
        self.action = action


class ScreenRouter:
    """Tracks the current screen and the back stack of visited screens."""

    def __init__(self, strict: bool | None = None) -> None:
        self.strict = config.STRICT_NAVIGATION if strict is None else strict
        self._current = Screen.START
        self._history: list[Screen] = []
        self._listeners: list[ScreenListener] = []

    def current_screen(self) -> Screen:
        return self._current

    def history(self) -> tuple[Screen, ...]:
        return tuple(self._history)

    def can_navigate_back(self) -> bool:
        return bool(self._history)

    def navigate(self, destination: Screen) -> bool:
        """Follow a forward edge, pushing the current screen on the back stack."""
        if destination is Screen.START or FORWARD_EDGES.get(self._current) is not destination:
            return self._reject(f"navigate:{destination.name}")
        self._history.append(self._current)
        self._move_to(destination)
        return True

    def pop_to_start(self) -> bool:
        """Return to START, dropping every back stack entry above it."""
        if self._current is Screen.START:
            return self._reject("pop_to_start")
        self._history.clear()
        self._move_to(Screen.START)
        return True

    def navigate_up(self) -> bool:
        """Pop the most recent back stack entry and move there."""
        if not self._history:
            return self._reject("navigate_up")
        self._move_to(self._history.pop())
        return True

    def subscribe(self, listener: ScreenListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _move_to(self, screen: Screen) -> None:
        log_debug(f"screen_change from={self._current.name} to={screen.name} depth={len(self._history)}")
        self._current = screen
        for listener in list(self._listeners):
            listener(screen)

    def _reject(self, action: str) -> bool:
        if self.strict:
            raise InvalidTransitionError(self._current, action)
        log_debug(f"invalid_transition from={self._current.name} action={action!r} ignored")
        return False
