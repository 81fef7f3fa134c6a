from __future__ import annotations

from typing import List

from PySide6 import QtCore

from ...domain.models import ListItem
from ...services.list_data_provider import ListDataProvider


class ListController(QtCore.QObject):
    """
    Controller for one list screen.

    Items are loaded eagerly on construction and held for the lifetime of the
    screen. Views read `items` once when built and re-render on items_changed.
    All updates go through _set_items, including the initial load; that first
    emission happens before any view can connect, so views must not rely on it.
    """
    items_changed = QtCore.Signal(object)  # List[ListItem]

    def __init__(self, provider: ListDataProvider):
        super().__init__()
        self.provider = provider
        self._items: List[ListItem] = []
        self._set_items(self.provider.load())

    @property
    def items(self) -> List[ListItem]:
        return list(self._items)

    def _set_items(self, items: List[ListItem]) -> None:
        self._items = list(items)
        self.items_changed.emit(self.items)
