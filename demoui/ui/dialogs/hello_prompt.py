from __future__ import annotations

from typing import Optional

from PySide6 import QtWidgets


class HelloPromptDialog(QtWidgets.QDialog):
    """Modal alert raised by the Say Hello button."""

    def __init__(self, title: str, parent: Optional[QtWidgets.QWidget] = None) -> None:
        super().__init__(parent)
        self.setWindowTitle(title)
        self.setModal(True)
        self.setMinimumWidth(280)

        root = QtWidgets.QVBoxLayout(self)
        root.setContentsMargins(16, 16, 16, 16)
        root.setSpacing(12)

        self.lbl_title = QtWidgets.QLabel(title)
        self.lbl_title.setStyleSheet("font-size: 18px; font-weight: 600;")
        root.addWidget(self.lbl_title)

        self.btn_ok = QtWidgets.QPushButton("OK")
        self.btn_ok.setDefault(True)
        self.btn_ok.clicked.connect(self.accept)

        btn_row = QtWidgets.QHBoxLayout()
        btn_row.addStretch(1)
        btn_row.addWidget(self.btn_ok)
        root.addLayout(btn_row)
