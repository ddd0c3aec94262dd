"""Calculator state transitions.

:func:`reduce` maps ``(state, action)`` to the next immutable snapshot. It is
pure and total: out-of-context actions return the state unchanged and action
types outside :class:`ActionType` reset to :data:`INITIAL_STATE`.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Callable, Dict

from .arithmetic import evaluate
from .entities import DIGITS, INITIAL_STATE, Action, ActionType, CalculatorState

Handler = Callable[[CalculatorState, str], CalculatorState]


def _add_digit(state: CalculatorState, digit: str) -> CalculatorState:
    if digit not in DIGITS:
        return state
    if state.overwrite:
        return replace(
            state,
            current_operand="0." if digit == "." else digit,
            overwrite=False,
        )
    if digit == "0" and state.current_operand == "0":
        return state
    if digit == ".":
        if not state.current_operand:
            return replace(state, current_operand="0.")
        if "." in state.current_operand:
            return state
    return replace(state, current_operand=f"{state.current_operand or ''}{digit}")


def _clear(state: CalculatorState, _payload: str) -> CalculatorState:
    # overwrite survives AC; see DESIGN.md
    return replace(state, current_operand=None, previous_operand=None, operation=None)


def _choose_operation(state: CalculatorState, operation: str) -> CalculatorState:
    if state.current_operand is None and state.previous_operand is None:
        return state
    if state.current_operand is None:
        return replace(state, operation=operation)
    if state.previous_operand is None:
        return replace(
            state,
            previous_operand=state.current_operand,
            current_operand=None,
            operation=operation,
        )
    return replace(
        state,
        previous_operand=evaluate(state),
        current_operand=None,
        operation=operation,
    )


def _evaluate(state: CalculatorState, _payload: str) -> CalculatorState:
    if state.operation is None or state.current_operand is None or state.previous_operand is None:
        return state
    return replace(
        state,
        current_operand=evaluate(state),
        previous_operand=None,
        operation=None,
        overwrite=True,
    )


def _delete_digit(state: CalculatorState, _payload: str) -> CalculatorState:
    if state.overwrite:
        return replace(state, current_operand=None, overwrite=False)
    if state.current_operand is None:
        return state
    if len(state.current_operand) == 1:
        return replace(state, current_operand=None)
    return replace(state, current_operand=state.current_operand[:-1])


HANDLERS: Dict[ActionType, Handler] = {
    ActionType.ADD_DIGIT: _add_digit,
    ActionType.CHOOSE_OPERATION: _choose_operation,
    ActionType.CLEAR: _clear,
    ActionType.DELETE_DIGIT: _delete_digit,
    ActionType.EVALUATE: _evaluate,
}


def reduce(state: CalculatorState, action: Action) -> CalculatorState:
    """Return the snapshot that follows ``state`` once ``action`` is applied."""
    try:
        action_type = ActionType(action.type)
    except (TypeError, ValueError):
        return INITIAL_STATE
    return HANDLERS[action_type](state, action.payload)


__all__ = ["HANDLERS", "reduce"]
