"""
Tests for the list screen: controller ownership of items and panel rendering.
"""
from unittest.mock import MagicMock

from PySide6 import QtCore

from demoui.domain.models import ListItem
from demoui.services.list_data_provider import ListDataProvider
from demoui.ui.controllers.list_controller import ListController
from demoui.ui.panels.list_panel import ListPanel


def test_controller_loads_eagerly(qapp, locator, write_items):
    write_items([{"id": 5, "title": "Five"}, {"id": 1, "title": "One"}])
    provider = ListDataProvider(locator)
    provider.load = MagicMock(wraps=provider.load)

    controller = ListController(provider)

    provider.load.assert_called_once()
    assert controller.items == [ListItem(5, "Five"), ListItem(1, "One")]


def test_controller_items_are_owned(qapp, locator):
    controller = ListController(ListDataProvider(locator))
    items = controller.items
    items.clear()
    assert len(controller.items) == 20


def test_panel_renders_items_in_order(qapp, locator, write_items):
    write_items([{"id": 5, "title": "Five"}, {"id": 1, "title": "One"}])
    panel = ListPanel(ListController(ListDataProvider(locator)))

    assert panel.titles() == ["Five", "One"]
    assert panel.item_list.item(0).data(QtCore.Qt.UserRole) == 5


def test_panel_renders_fallback(qapp, locator):
    panel = ListPanel(ListController(ListDataProvider(locator)))
    assert panel.titles() == [f"Item {i}" for i in range(1, 21)]


def test_panel_rerenders_on_items_changed(qapp, locator, write_items):
    write_items(b"[]")
    controller = ListController(ListDataProvider(locator))
    panel = ListPanel(controller)
    assert panel.titles() == []

    controller.items_changed.emit([ListItem(9, "Nine")])
    assert panel.titles() == ["Nine"]
