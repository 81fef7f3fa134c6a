"""
Unit tests for the controls-screen state and its controller.
"""
import datetime
from unittest.mock import MagicMock

import pytest

from demoui.ui.controllers.form_controller import FormController
from demoui.ui.state import FormState, advanced_progress, greeting_for, regressed_progress


# =============================================================================
# FormState helpers
# =============================================================================

class TestFormState:

    def test_defaults(self):
        state = FormState()
        assert state.name == ""
        assert state.feature_enabled is False
        assert state.slider_value == 50
        assert state.quantity == 1
        assert state.selected_fruit == "Apple"
        assert state.progress == pytest.approx(0.3)
        assert state.show_alert is False
        assert state.reminder.second == 0

    def test_greeting(self):
        assert greeting_for("") == "Hello, there!"
        assert greeting_for("Ada") == "Hello, Ada!"

    def test_quantity_text(self):
        assert FormState(quantity=4).quantity_text == "Quantity: 4"

    def test_progress_clamps(self):
        assert advanced_progress(0.95) == 1.0
        assert regressed_progress(0.05) == 0.0
        assert advanced_progress(0.3) == pytest.approx(0.4)
        assert regressed_progress(0.3) == pytest.approx(0.2)


# =============================================================================
# FormController
# =============================================================================

class TestFormController:

    def test_set_name_emits_state(self, qapp):
        controller = FormController()
        callback = MagicMock()
        controller.state_changed.connect(callback)

        controller.set_name("Ada")

        callback.assert_called_once()
        assert callback.call_args[0][0].name == "Ada"
        assert controller.state.greeting == "Hello, Ada!"

    def test_no_emit_on_same_value(self, qapp):
        controller = FormController()
        callback = MagicMock()
        controller.state_changed.connect(callback)

        controller.set_selected_fruit("Apple")
        controller.set_feature_enabled(False)

        callback.assert_not_called()

    def test_say_hello(self, qapp):
        controller = FormController()
        greeting = MagicMock()
        controller.greeting_ready.connect(greeting)

        assert controller.say_hello() == "Hello, there!"
        greeting.assert_called_once_with("Hello, there!")
        assert controller.state.show_alert is True

        controller.dismiss_alert()
        assert controller.state.show_alert is False

    def test_slider_is_clamped_and_snapped(self, qapp):
        controller = FormController()
        controller.set_slider_value(42.4)
        assert controller.state.slider_value == 42
        controller.set_slider_value(250)
        assert controller.state.slider_value == 100
        controller.set_slider_value(-3)
        assert controller.state.slider_value == 0

    def test_quantity_is_clamped(self, qapp):
        controller = FormController()
        controller.set_quantity(7)
        assert controller.state.quantity == 7
        controller.set_quantity(11)
        assert controller.state.quantity == 10
        controller.set_quantity(0)
        assert controller.state.quantity == 1

    def test_unknown_fruit_is_ignored(self, qapp):
        controller = FormController()
        controller.set_selected_fruit("Cherry")
        controller.set_selected_fruit("Durian")
        assert controller.state.selected_fruit == "Cherry"

    def test_progress_saturates_at_bounds(self, qapp):
        controller = FormController()
        for _ in range(20):
            controller.advance_progress()
        assert controller.state.progress == 1.0
        assert controller.state.progress_percent == 100

        for _ in range(20):
            controller.regress_progress()
        assert controller.state.progress == 0.0
        assert controller.state.progress_percent == 0

    def test_reminder_drops_seconds(self, qapp):
        controller = FormController()
        controller.set_reminder(datetime.datetime(2024, 5, 1, 9, 30, 45, 123))
        assert controller.state.reminder == datetime.datetime(2024, 5, 1, 9, 30)

    def test_state_is_a_copy(self, qapp):
        controller = FormController()
        snapshot = controller.state
        snapshot.name = "changed"
        assert controller.state.name == ""
