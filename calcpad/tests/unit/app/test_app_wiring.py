from __future__ import annotations

from typing import List, Tuple

from calcpad.app.main import App, dispatch_keyboard
from calcpad.viewmodels.calculator_vm import CalculatorVM
from calcpad.viewmodels.keypad import KEYPAD_ROWS
from calcpad.viewmodels.settings_vm import SettingsConfig, SettingsVM


class WindowStub:
    def __init__(self, *, keypad_rows, title, on_keypad, on_keyboard) -> None:
        self.keypad_rows = keypad_rows
        self.title = title
        self.on_keypad = on_keypad
        self.on_keyboard = on_keyboard
        self.displays: List[Tuple[str, str]] = []

    def set_display(self, previous: str, current: str) -> None:
        self.displays.append((previous, current))

    def press(self, label: str) -> None:
        key = next(k for row in self.keypad_rows for k in row if k.label == label)
        self.on_keypad(key)


def _make_app(separator: str = ",") -> App:
    settings = SettingsVM(config=SettingsConfig(thousands_separator=separator, window_title="Test Calc"))
    return App(settings, window_factory=WindowStub)


def test_app_builds_window_with_settings_and_initial_display() -> None:
    app = _make_app()

    assert app.win.title == "Test Calc"
    assert app.win.keypad_rows is KEYPAD_ROWS
    assert app.win.displays == [("", "")]


def test_keypad_presses_render_formatted_display() -> None:
    app = _make_app()

    for label in ("1", "2", "0", "0", "+", "3", "4", "="):
        app.win.press(label)

    assert app.win.displays[-1] == ("", "1,234")
    assert app.win.displays[-3] == ("1,200 +", "3")


def test_keyboard_events_use_char_then_keysym() -> None:
    app = _make_app(separator=" ")

    app.win.on_keyboard("9", "9")
    app.win.on_keyboard("", "KP_0")
    app.win.on_keyboard("0", "0")
    app.win.on_keyboard("0", "0")
    app.win.on_keyboard("/", "slash")
    app.win.on_keyboard("4", "4")
    app.win.on_keyboard("\r", "Return")

    assert app.calculator_vm.state.current_operand == "2250"
    assert app.win.displays[-1] == ("", "2 250")


def test_dispatch_keyboard_ignores_unmapped_keys() -> None:
    vm = CalculatorVM()

    assert dispatch_keyboard(vm, "", "Shift_L") is False
    assert dispatch_keyboard(vm, "\x08", "BackSpace") is True
    assert dispatch_keyboard(vm, "/", "slash") is True
    assert vm.state.operation is None
    assert vm.state.current_operand is None


def test_escape_clears_pending_expression() -> None:
    vm = CalculatorVM()
    for char in "5*":
        dispatch_keyboard(vm, char, char)

    assert vm.state.operation == "*"

    dispatch_keyboard(vm, "\x1b", "Escape")
    assert vm.state.previous_operand is None
    assert vm.state.operation is None
