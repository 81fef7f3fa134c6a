from __future__ import annotations
from typing import Optional

from PySide6 import QtCore

from ...services.list_data_provider import ListDataProvider
from .form_controller import FormController
from .list_controller import ListController

class MainController(QtCore.QObject):
    """
    Main controller for the application.
    Owns the controls-screen controller and hands out a fresh ListController
    for every list screen that gets opened.
    """
    list_opened = QtCore.Signal(object)  # ListController

    def __init__(self, provider: Optional[ListDataProvider] = None):
        super().__init__()
        self.provider = provider if provider is not None else ListDataProvider()
        self.form = FormController()

    def open_list(self) -> ListController:
        """Create the controller for a new list screen (loads its items immediately)."""
        controller = ListController(self.provider)
        self.list_opened.emit(controller)
        return controller
