from decimal import Decimal

import pytest

from lunch_tray import config
from lunch_tray.main import build_app


def test_parse_tax_rate_accepts_decimal_strings():
    assert config.parse_tax_rate("0.08") == Decimal("0.08")
    assert config.parse_tax_rate(" 0 ") == Decimal("0")


@pytest.mark.parametrize("raw", ["eight percent", "", "-0.08", "NaN", "Infinity"])
def test_parse_tax_rate_rejects_bad_values(raw):
    with pytest.raises(ValueError, match="LUNCH_TRAY_TAX_RATE"):
        config.parse_tax_rate(raw)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("1", True), ("true", True), (" Yes ", True), ("0", False), ("", False), ("off", False)],
)
def test_parse_flag(raw, expected):
    assert config.parse_flag(raw) is expected


def test_console_app_is_lenient_by_default(monkeypatch):
    monkeypatch.setattr(config, "STRICT_NAVIGATION", config.parse_flag(""))
    app = build_app()
    assert app.controller.router.strict is False
