from __future__ import annotations
from typing import List, Optional, Tuple
from PySide6 import QtCore, QtWidgets

class NavigationStack(QtCore.QObject):
    """
    Push/pop navigation over a QStackedWidget.

    The first pushed page is the root and is never popped. Popped pages are
    removed from the container and scheduled for deletion.

    Usage:
        nav = NavigationStack(stacked_widget)
        nav.push(root_page, "Demo Controls")
        nav.push(detail_page, "List")
        nav.pop()
    """
    current_changed = QtCore.Signal(str, int)  # title, depth

    def __init__(self, container: QtWidgets.QStackedWidget) -> None:
        super().__init__()
        self.container = container
        # (page, title) from root to top
        self._pages: List[Tuple[QtWidgets.QWidget, str]] = []

    @property
    def depth(self) -> int:
        return len(self._pages)

    @property
    def current_title(self) -> str:
        return self._pages[-1][1] if self._pages else ""

    def current_page(self) -> Optional[QtWidgets.QWidget]:
        return self._pages[-1][0] if self._pages else None

    def can_pop(self) -> bool:
        return len(self._pages) > 1

    def push(self, page: QtWidgets.QWidget, title: str) -> None:
        self.container.addWidget(page)
        self._pages.append((page, title))
        self.container.setCurrentWidget(page)
        self.current_changed.emit(title, self.depth)

    def pop(self) -> Optional[QtWidgets.QWidget]:
        """Discard the top page. Returns it, or None when only the root is left."""
        if not self.can_pop():
            return None
        page, _title = self._pages.pop()
        self.container.removeWidget(page)
        page.deleteLater()
        self.container.setCurrentWidget(self._pages[-1][0])
        self.current_changed.emit(self.current_title, self.depth)
        return page
