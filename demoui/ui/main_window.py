from __future__ import annotations
from typing import Optional

from PySide6 import QtCore, QtWidgets, QtGui

from .. import config
from ..services.list_data_provider import ListDataProvider
from .controllers.list_controller import ListController
from .controllers.main_controller import MainController
from .dialogs.hello_prompt import HelloPromptDialog
from .navigation import NavigationStack
from .panels.controls_panel import ControlsPanel
from .panels.list_panel import ListPanel

class MainWindow(QtWidgets.QMainWindow):
    def __init__(self, provider: Optional[ListDataProvider] = None) -> None:
        super().__init__()
        self.setWindowTitle(config.WINDOW_TITLE)
        self.setMinimumSize(*config.WINDOW_MIN_SIZE)

        # Initialize Controller
        self.controller = MainController(provider)
        self.hello_dialog: Optional[HelloPromptDialog] = None

        # UI Setup
        self._setup_ui()

        # Connect Signals
        self._connect_signals()

    def _setup_ui(self):
        toolbar = self.addToolBar("Navigation")
        toolbar.setMovable(False)
        self.act_back = QtGui.QAction("Back", self)
        self.act_back.setEnabled(False)
        toolbar.addAction(self.act_back)
        self.lbl_title = QtWidgets.QLabel()
        self.lbl_title.setStyleSheet("font-size: 16px; font-weight: 600; padding-left: 8px;")
        toolbar.addWidget(self.lbl_title)

        self.stack = QtWidgets.QStackedWidget()
        self.setCentralWidget(self.stack)
        self.navigation = NavigationStack(self.stack)
        self.navigation.current_changed.connect(self._on_page_changed)

        self.controls = ControlsPanel(self.controller.form)
        self.navigation.push(self.controls, config.WINDOW_TITLE)

    def _connect_signals(self):
        self.act_back.triggered.connect(self.go_back)
        self.controls.list_requested.connect(self.open_list)
        self.controller.list_opened.connect(self._on_list_opened)
        self.controller.form.greeting_ready.connect(self._show_greeting)

    @QtCore.Slot()
    def open_list(self) -> ListPanel:
        """Open a new list screen; the page is pushed by _on_list_opened."""
        self.controller.open_list()
        return self.navigation.current_page()

    @QtCore.Slot(object)
    def _on_list_opened(self, list_controller: ListController) -> None:
        self.navigation.push(ListPanel(list_controller), config.LIST_TITLE)

    @QtCore.Slot()
    def go_back(self) -> None:
        self.navigation.pop()

    @QtCore.Slot(str, int)
    def _on_page_changed(self, title: str, depth: int) -> None:
        self.lbl_title.setText(title)
        self.act_back.setEnabled(depth > 1)

    @QtCore.Slot(str)
    def _show_greeting(self, title: str) -> None:
        # open() keeps the dialog window-modal without blocking the event loop
        self.hello_dialog = HelloPromptDialog(title, self)
        self.hello_dialog.finished.connect(self._on_greeting_closed)
        self.hello_dialog.open()

    @QtCore.Slot(int)
    def _on_greeting_closed(self, _result: int) -> None:
        self.controller.form.dismiss_alert()
        if self.hello_dialog is not None:
            self.hello_dialog.deleteLater()
            self.hello_dialog = None
