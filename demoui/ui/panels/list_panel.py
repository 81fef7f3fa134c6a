from __future__ import annotations

from typing import List, Optional

from PySide6 import QtCore, QtWidgets

from ...domain.models import ListItem
from ..controllers.list_controller import ListController


class ListPanel(QtWidgets.QWidget):
    """List screen. Renders the controller's items and re-renders on items_changed."""

    def __init__(self, controller: ListController, parent: Optional[QtWidgets.QWidget] = None) -> None:
        super().__init__(parent)
        self.controller = controller
        layout = QtWidgets.QVBoxLayout(self)
        layout.setContentsMargins(6, 6, 6, 6)

        self.item_list = QtWidgets.QListWidget()
        self.item_list.setSelectionMode(QtWidgets.QAbstractItemView.SingleSelection)
        self.item_list.setUniformItemSizes(True)
        layout.addWidget(self.item_list, 1)

        # Parent the controller so it is discarded together with the screen
        self.controller.setParent(self)
        self.controller.items_changed.connect(self.set_items)
        self.set_items(self.controller.items)

    @QtCore.Slot(object)
    def set_items(self, items: List[ListItem]) -> None:
        self.item_list.clear()
        for it in items:
            row = QtWidgets.QListWidgetItem(it.title)
            row.setData(QtCore.Qt.UserRole, it.id)
            self.item_list.addItem(row)

    def titles(self) -> List[str]:
        return [self.item_list.item(i).text() for i in range(self.item_list.count())]
