"""Keypad layout shared by the Tk and NiceGUI views.

Call context:
    Views iterate :data:`KEYPAD_ROWS` to build their button grids and call
    :func:`bind_command` to get the viewmodel callback for each key.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Tuple

from ..domain.entities import DIVIDE
from .calculator_vm import CalculatorVM


@dataclass(frozen=True)
class KeypadKey:
    label: str
    kind: str  # "digit" | "operation" | "clear" | "delete" | "evaluate"
    value: str = ""
    span: int = 1
    accent: bool = False


def _digit(value: str) -> KeypadKey:
    return KeypadKey(label=value, kind="digit", value=value)


def _op(value: str) -> KeypadKey:
    return KeypadKey(label=value, kind="operation", value=value)


KEYPAD_ROWS: Tuple[Tuple[KeypadKey, ...], ...] = (
    (
        KeypadKey(label="AC", kind="clear", span=2, accent=True),
        KeypadKey(label="DEL", kind="delete", accent=True),
        _op(DIVIDE),
    ),
    (_digit("7"), _digit("8"), _digit("9"), _op("*")),
    (_digit("4"), _digit("5"), _digit("6"), _op("+")),
    (_digit("1"), _digit("2"), _digit("3"), _op("-")),
    (
        _digit("."),
        _digit("0"),
        KeypadKey(label="=", kind="evaluate", span=2, accent=True),
    ),
)

KEYPAD_COLUMNS = 4


def bind_command(vm: CalculatorVM, key: KeypadKey) -> Callable[[], None]:
    """Return the zero-argument callback a button for ``key`` should invoke."""
    if key.kind == "digit":
        return lambda: vm.cmd_digit(key.value)
    if key.kind == "operation":
        return lambda: vm.cmd_operation(key.value)
    if key.kind == "clear":
        return vm.cmd_clear
    if key.kind == "delete":
        return vm.cmd_delete
    if key.kind == "evaluate":
        return vm.cmd_evaluate
    raise ValueError(f"Unknown keypad key kind: {key.kind}")


__all__ = ["KEYPAD_COLUMNS", "KEYPAD_ROWS", "KeypadKey", "bind_command"]
