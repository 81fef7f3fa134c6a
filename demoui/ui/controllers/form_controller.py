from __future__ import annotations

import dataclasses
import datetime
from typing import Optional

from PySide6 import QtCore

from ... import config
from ..state import (
    FormState,
    advanced_progress,
    clamp,
    regressed_progress,
    snap_to_step,
)


class FormController(QtCore.QObject):
    """
    Controller for the controls screen.
    Owns the FormState; every mutation emits state_changed with a copy of it.
    """
    # Signals for View
    state_changed = QtCore.Signal(object)  # FormState
    greeting_ready = QtCore.Signal(str)  # alert title

    def __init__(self, state: Optional[FormState] = None):
        super().__init__()
        self._state = state if state is not None else FormState()

    @property
    def state(self) -> FormState:
        return dataclasses.replace(self._state)

    def _update(self, **changes) -> None:
        new_state = dataclasses.replace(self._state, **changes)
        if new_state == self._state:
            return
        self._state = new_state
        self.state_changed.emit(self.state)

    # --- Text & Input ---

    def set_name(self, name: str) -> None:
        self._update(name=str(name or ""))

    def say_hello(self) -> str:
        """Raise the hello alert and return its title."""
        title = self._state.greeting
        self._update(show_alert=True)
        self.greeting_ready.emit(title)
        return title

    def dismiss_alert(self) -> None:
        self._update(show_alert=False)

    # --- Toggles & Pickers ---

    def set_feature_enabled(self, enabled: bool) -> None:
        self._update(feature_enabled=bool(enabled))

    def set_slider_value(self, value: float) -> None:
        v = snap_to_step(float(value), config.SLIDER_MIN, config.SLIDER_STEP)
        self._update(slider_value=clamp(v, config.SLIDER_MIN, config.SLIDER_MAX))

    def set_quantity(self, quantity: int) -> None:
        self._update(quantity=int(clamp(int(quantity), config.QUANTITY_MIN, config.QUANTITY_MAX)))

    def set_selected_fruit(self, fruit: str) -> None:
        if fruit not in config.FRUITS:
            return
        self._update(selected_fruit=fruit)

    # --- Feedback ---

    def advance_progress(self) -> float:
        self._update(progress=advanced_progress(self._state.progress))
        return self._state.progress

    def regress_progress(self) -> float:
        self._update(progress=regressed_progress(self._state.progress))
        return self._state.progress

    def set_reminder(self, when: datetime.datetime) -> None:
        self._update(reminder=when.replace(second=0, microsecond=0))
