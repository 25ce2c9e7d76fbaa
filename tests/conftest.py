import pytest

from lunch_tray import config
from lunch_tray.controller import OrderFlowController
from lunch_tray.data import items_for
from lunch_tray.models import MenuCategory


def _menu_item(category, name):
    return next(item for item in items_for(category) if item.name == name)


@pytest.fixture(autouse=True)
def debug_log_path(tmp_path, monkeypatch):
    path = tmp_path / "debug.log"
    monkeypatch.setattr(config, "DEBUG_LOG_PATH", str(path))
    monkeypatch.setattr(config, "STRICT_NAVIGATION", True)
    return path


@pytest.fixture
def controller():
    return OrderFlowController()


@pytest.fixture
def cowboy_pizza():
    return _menu_item(MenuCategory.ENTREE, "Cowboy Pizza")


@pytest.fixture
def potstickers():
    return _menu_item(MenuCategory.SIDE_DISH, "Potstickers")


@pytest.fixture
def apple():
    return _menu_item(MenuCategory.ACCOMPANIMENT, "Apple")
