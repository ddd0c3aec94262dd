from __future__ import annotations

"""Domain value objects shared by the reducer, use-cases, and view models."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union


class ActionType(str, Enum):
    """Closed set of calculator commands accepted by the reducer."""

    ADD_DIGIT = "add-digit"
    CHOOSE_OPERATION = "choose-operation"
    CLEAR = "clear"
    DELETE_DIGIT = "delete-digit"
    EVALUATE = "evaluate"


DIVIDE = "÷"
OPERATIONS: Tuple[str, ...] = ("+", "-", "*", DIVIDE)
DIGITS: Tuple[str, ...] = tuple("0123456789") + (".",)


@dataclass(frozen=True)
class Action:
    """Request dispatched into the reducer.

    ``type`` is normally an :class:`ActionType`; any other value is accepted
    and makes the reducer fall back to the initial state.
    """

    type: Union[ActionType, str]
    payload: str = ""


@dataclass(frozen=True)
class CalculatorState:
    """Immutable calculator snapshot, replaced wholesale on every transition."""

    current_operand: Optional[str] = None
    """Digits typed so far, kept in literal form."""

    previous_operand: Optional[str] = None
    """Operand recorded before the pending operation was chosen."""

    operation: Optional[str] = None
    """Pending operator symbol; only set together with ``previous_operand``."""

    overwrite: bool = False
    """True right after an evaluation so the next digit starts a new operand."""


INITIAL_STATE = CalculatorState()


__all__ = [
    "Action",
    "ActionType",
    "CalculatorState",
    "DIGITS",
    "DIVIDE",
    "INITIAL_STATE",
    "OPERATIONS",
]
