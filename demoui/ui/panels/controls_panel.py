from __future__ import annotations

import datetime
from typing import Optional

from PySide6 import QtCore, QtWidgets

from ... import config
from ..controllers.form_controller import FormController
from ..state import FormState


def _to_qdatetime(when: datetime.datetime) -> QtCore.QDateTime:
    return QtCore.QDateTime(
        QtCore.QDate(when.year, when.month, when.day),
        QtCore.QTime(when.hour, when.minute),
    )


class ControlsPanel(QtWidgets.QWidget):
    """Root screen: one group box per section, all bound to a FormController."""

    list_requested = QtCore.Signal()

    def __init__(self, controller: FormController, parent: Optional[QtWidgets.QWidget] = None) -> None:
        super().__init__(parent)
        self.controller = controller
        titles = config.SectionTitles()

        root = QtWidgets.QVBoxLayout(self)
        root.setSpacing(8)
        root.setContentsMargins(6, 6, 6, 6)

        # Text & Input
        text_box = QtWidgets.QGroupBox(titles.text_input)
        text_layout = QtWidgets.QVBoxLayout(text_box)
        self.name_edit = QtWidgets.QLineEdit()
        self.name_edit.setPlaceholderText("Enter your name")
        text_layout.addWidget(self.name_edit)
        self.btn_hello = QtWidgets.QPushButton("Say Hello")
        text_layout.addWidget(self.btn_hello)
        root.addWidget(text_box)

        # Toggles & Pickers
        toggles_box = QtWidgets.QGroupBox(titles.toggles)
        toggles_layout = QtWidgets.QVBoxLayout(toggles_box)
        self.chk_feature = QtWidgets.QCheckBox("Enable Feature")
        toggles_layout.addWidget(self.chk_feature)

        self.slider = QtWidgets.QSlider(QtCore.Qt.Horizontal)
        self.slider.setRange(int(config.SLIDER_MIN), int(config.SLIDER_MAX))
        self.slider.setSingleStep(int(config.SLIDER_STEP))
        toggles_layout.addWidget(self.slider)

        self.quantity_spin = QtWidgets.QSpinBox()
        self.quantity_spin.setRange(config.QUANTITY_MIN, config.QUANTITY_MAX)
        self.quantity_spin.setPrefix("Quantity: ")
        toggles_layout.addWidget(self.quantity_spin)

        fruit_row = QtWidgets.QHBoxLayout()
        fruit_row.addWidget(QtWidgets.QLabel("Favorite Fruit"))
        fruit_row.addStretch(1)
        self.fruit_combo = QtWidgets.QComboBox()
        self.fruit_combo.addItems(list(config.FRUITS))
        fruit_row.addWidget(self.fruit_combo)
        toggles_layout.addLayout(fruit_row)
        root.addWidget(toggles_box)

        # Feedback
        feedback_box = QtWidgets.QGroupBox(titles.feedback)
        feedback_layout = QtWidgets.QVBoxLayout(feedback_box)
        self.progress_bar = QtWidgets.QProgressBar()
        self.progress_bar.setRange(0, config.PROGRESS_BAR_SCALE)
        self.progress_bar.setTextVisible(False)
        feedback_layout.addWidget(self.progress_bar)
        self.btn_advance = QtWidgets.QPushButton("Advance Progress")
        self.btn_regress = QtWidgets.QPushButton("Regress Progress")
        feedback_layout.addWidget(self.btn_advance)
        feedback_layout.addWidget(self.btn_regress)

        reminder_row = QtWidgets.QHBoxLayout()
        reminder_row.addWidget(QtWidgets.QLabel("Reminder"))
        reminder_row.addStretch(1)
        self.reminder_edit = QtWidgets.QDateTimeEdit()
        self.reminder_edit.setCalendarPopup(True)
        self.reminder_edit.setDisplayFormat("yyyy-MM-dd HH:mm")
        reminder_row.addWidget(self.reminder_edit)
        feedback_layout.addLayout(reminder_row)
        root.addWidget(feedback_box)

        # Images & Lists
        images_box = QtWidgets.QGroupBox(titles.images_lists)
        images_layout = QtWidgets.QVBoxLayout(images_box)
        symbol_row = QtWidgets.QHBoxLayout()
        self.lbl_symbol = QtWidgets.QLabel()
        icon = self.style().standardIcon(QtWidgets.QStyle.SP_MediaSeekForward)
        self.lbl_symbol.setPixmap(icon.pixmap(16, 16))
        symbol_row.addWidget(self.lbl_symbol)
        symbol_row.addWidget(QtWidgets.QLabel("System Symbol Image"))
        symbol_row.addStretch(1)
        images_layout.addLayout(symbol_row)
        self.btn_list = QtWidgets.QPushButton("Go to List Screen")
        images_layout.addWidget(self.btn_list)
        root.addWidget(images_box)

        root.addStretch(1)

        self.apply_state(self.controller.state)
        self._connect_signals()

    def _connect_signals(self) -> None:
        c = self.controller
        self.name_edit.textChanged.connect(c.set_name)
        self.btn_hello.clicked.connect(c.say_hello)
        self.chk_feature.toggled.connect(c.set_feature_enabled)
        self.slider.valueChanged.connect(c.set_slider_value)
        self.quantity_spin.valueChanged.connect(c.set_quantity)
        self.fruit_combo.currentTextChanged.connect(c.set_selected_fruit)
        self.btn_advance.clicked.connect(c.advance_progress)
        self.btn_regress.clicked.connect(c.regress_progress)
        self.reminder_edit.dateTimeChanged.connect(self._on_reminder_changed)
        self.btn_list.clicked.connect(lambda: self.list_requested.emit())
        c.state_changed.connect(self.apply_state)

    @QtCore.Slot(QtCore.QDateTime)
    def _on_reminder_changed(self, value: QtCore.QDateTime) -> None:
        self.controller.set_reminder(value.toPython())

    @QtCore.Slot(object)
    def apply_state(self, state: FormState) -> None:
        """Push controller state into the widgets without echoing edits back."""
        widgets = (
            self.name_edit,
            self.chk_feature,
            self.slider,
            self.quantity_spin,
            self.fruit_combo,
            self.reminder_edit,
        )
        blockers = [QtCore.QSignalBlocker(w) for w in widgets]
        try:
            if self.name_edit.text() != state.name:
                self.name_edit.setText(state.name)
            self.chk_feature.setChecked(state.feature_enabled)
            self.slider.setValue(int(round(state.slider_value)))
            self.quantity_spin.setValue(state.quantity)
            self.fruit_combo.setCurrentText(state.selected_fruit)
            self.reminder_edit.setDateTime(_to_qdatetime(state.reminder))
        finally:
            for b in blockers:
                b.unblock()
        self.progress_bar.setValue(state.progress_percent)
