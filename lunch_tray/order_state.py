"""Single shared holder for the order being built."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Callable

from lunch_tray import config
from lunch_tray.models import MenuCategory, MenuItem, OrderSummary, OrderTotals

OrderListener = Callable[[OrderSummary], None]

_CENTS = Decimal("0.01")


class OrderState:
    """Current selection per category; totals are always derived, never stored."""

    def __init__(self, tax_rate: Decimal | None = None) -> None:
        self.tax_rate = config.TAX_RATE if tax_rate is None else tax_rate
        self.entree: MenuItem | None = None
        self.side_dish: MenuItem | None = None
        self.accompaniment: MenuItem | None = None
        self._listeners: list[OrderListener] = []

    def update_entree(self, item: MenuItem | None) -> None:
        self.entree = item
        self._notify()

    def update_side_dish(self, item: MenuItem | None) -> None:
        self.side_dish = item
        self._notify()

    def update_accompaniment(self, item: MenuItem | None) -> None:
        self.accompaniment = item
        self._notify()

    def update(self, category: MenuCategory, item: MenuItem | None) -> None:
        """Replace the slot for the given category."""
        if category is MenuCategory.ENTREE:
            self.update_entree(item)
        elif category is MenuCategory.SIDE_DISH:
            self.update_side_dish(item)
        else:
            self.update_accompaniment(item)

    def selection_for(self, category: MenuCategory) -> MenuItem | None:
        if category is MenuCategory.ENTREE:
            return self.entree
        if category is MenuCategory.SIDE_DISH:
            return self.side_dish
        return self.accompaniment

    def reset(self) -> None:
        """Clear every slot. Safe to call at any point, any number of times."""
        self.entree = None
        self.side_dish = None
        self.accompaniment = None
        self._notify()

    def compute_totals(self) -> OrderTotals:
        subtotal = sum(
            (item.price for item in (self.entree, self.side_dish, self.accompaniment) if item is not None),
            Decimal("0.00"),
        )
        tax = (subtotal * self.tax_rate).quantize(_CENTS, rounding=ROUND_HALF_UP)
        return OrderTotals(subtotal=subtotal, tax=tax, total=subtotal + tax)

    def summary(self) -> OrderSummary:
        return OrderSummary(
            entree=self.entree,
            side_dish=self.side_dish,
            accompaniment=self.accompaniment,
            totals=self.compute_totals(),
        )

    def subscribe(self, listener: OrderListener) -> Callable[[], None]:
        """Register a listener called with a fresh summary after each change."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        if not self._listeners:
            return
        snapshot = self.summary()
        for listener in list(self._listeners):
            listener(snapshot)
