from __future__ import annotations

import pytest

from calcpad.domain.entities import DIVIDE, CalculatorState
from calcpad.viewmodels.calculator_vm import CalculatorVM
from calcpad.viewmodels.keypad import KEYPAD_COLUMNS, KEYPAD_ROWS, KeypadKey, bind_command


def _key(label: str) -> KeypadKey:
    return next(key for row in KEYPAD_ROWS for key in row if key.label == label)


def test_every_row_fills_the_grid() -> None:
    for row in KEYPAD_ROWS:
        assert sum(key.span for key in row) == KEYPAD_COLUMNS


def test_layout_covers_all_digits_and_operators() -> None:
    labels = {key.label for row in KEYPAD_ROWS for key in row}

    assert set("0123456789.") <= labels
    assert {"+", "-", "*", DIVIDE, "AC", "DEL", "="} <= labels


def test_bound_commands_drive_the_viewmodel() -> None:
    vm = CalculatorVM()

    for label in ("4", "2", DIVIDE, "7", "="):
        bind_command(vm, _key(label))()

    assert vm.state.current_operand == "6"

    bind_command(vm, _key("DEL"))()
    bind_command(vm, _key("5"))()
    bind_command(vm, _key("AC"))()

    assert vm.state == CalculatorState()


def test_unknown_kind_is_rejected() -> None:
    with pytest.raises(ValueError):
        bind_command(CalculatorVM(), KeypadKey(label="?", kind="memory"))
