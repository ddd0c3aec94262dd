"""Domain package exports for calculator state, actions, and pure helpers."""

from .arithmetic import evaluate, number_to_string, parse_float
from .entities import (
    DIGITS,
    DIVIDE,
    INITIAL_STATE,
    OPERATIONS,
    Action,
    ActionType,
    CalculatorState,
)
from .formatting import format_operand
from .reducer import reduce

__all__ = [
    "Action",
    "ActionType",
    "CalculatorState",
    "DIGITS",
    "DIVIDE",
    "INITIAL_STATE",
    "OPERATIONS",
    "evaluate",
    "format_operand",
    "number_to_string",
    "parse_float",
    "reduce",
]
