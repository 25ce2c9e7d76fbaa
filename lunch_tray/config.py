"""Runtime configuration defaults for pricing, navigation and debug logging."""

from __future__ import annotations

import os
from decimal import Decimal, InvalidOperation

_TAX_RATE_ENV = "LUNCH_TRAY_TAX_RATE"
_STRICT_NAVIGATION_ENV = "LUNCH_TRAY_STRICT_NAVIGATION"


def parse_tax_rate(raw: str) -> Decimal:
    """Parse a tax rate such as "0.08"; it must be a finite, non-negative number."""
    try:
        rate = Decimal(raw.strip())
    except InvalidOperation:
        raise ValueError(f"{_TAX_RATE_ENV} must be a decimal number, got {raw!r}") from None
    if not rate.is_finite() or rate < 0:
        raise ValueError(f"{_TAX_RATE_ENV} must be a non-negative number, got {raw!r}")
    return rate


def parse_flag(raw: str) -> bool:
    return raw.strip().lower() in {"1", "true", "yes", "on"}


TAX_RATE = parse_tax_rate(os.environ.get(_TAX_RATE_ENV, "0.08"))
CURRENCY_SYMBOL = "$"

DEBUG_LOG_PATH = os.environ.get("LUNCH_TRAY_DEBUG_LOG", "/tmp/lunch-tray-debug.log")

# Invalid transitions raise when strict (debugging), otherwise they are logged and ignored.
STRICT_NAVIGATION = parse_flag(os.environ.get(_STRICT_NAVIGATION_ENV, "0"))
