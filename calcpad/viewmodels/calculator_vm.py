from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, Optional

from ..domain.entities import INITIAL_STATE, Action, ActionType, CalculatorState
from ..domain.formatting import DEFAULT_THOUSANDS_SEPARATOR, format_operand
from ..usecases.dispatch_action import DispatchAction
from ..usecases.map_key_event import MapKeyEvent

DisplayDTO = Dict[str, str]


@dataclass
class CalculatorVM:
    """Owns the single calculator snapshot and the display text derived from it.

    Responsibilities
    - Route button commands and key presses through the reducer
    - Replace ``state`` atomically on every dispatch
    - Fan the formatted display out to the view via ``on_display_changed``
    """

    on_display_changed: Optional[Callable[[DisplayDTO], None]] = None
    thousands_separator: str = DEFAULT_THOUSANDS_SEPARATOR

    state: CalculatorState = INITIAL_STATE
    dispatcher: DispatchAction = field(default_factory=DispatchAction)
    key_mapper: MapKeyEvent = field(default_factory=MapKeyEvent)

    def __post_init__(self) -> None:
        self._log = logging.getLogger(__name__)

    # ---- Dispatch ----
    def dispatch(self, action: Action) -> CalculatorState:
        self.state = self.dispatcher(self.state, action)
        if self.on_display_changed:
            self.on_display_changed(self.display())
        return self.state

    def handle_key(self, key: Optional[str]) -> bool:
        """Dispatch the action bound to ``key``; False when the key is unmapped."""
        action = self.key_mapper(key)
        if action is None:
            self._log.debug("Unmapped key %r", key)
            return False
        self.dispatch(action)
        return True

    # ---- Commands surfaced to View ----
    def cmd_digit(self, digit: str) -> None:
        self.dispatch(Action(ActionType.ADD_DIGIT, digit))

    def cmd_operation(self, operation: str) -> None:
        self.dispatch(Action(ActionType.CHOOSE_OPERATION, operation))

    def cmd_clear(self) -> None:
        self.dispatch(Action(ActionType.CLEAR))

    def cmd_delete(self) -> None:
        self.dispatch(Action(ActionType.DELETE_DIGIT))

    def cmd_evaluate(self) -> None:
        self.dispatch(Action(ActionType.EVALUATE))

    # ---- Display DTO ----
    def previous_text(self) -> str:
        """Pending expression: formatted previous operand and the operator."""
        previous = self._format(self.state.previous_operand)
        parts = [part for part in (previous, self.state.operation) if part]
        return " ".join(parts)

    def current_text(self) -> str:
        return self._format(self.state.current_operand) or ""

    def display(self) -> DisplayDTO:
        return {"previous": self.previous_text(), "current": self.current_text()}

    def _format(self, operand: Optional[str]) -> Optional[str]:
        return format_operand(operand, thousands_separator=self.thousands_separator)


__all__ = ["CalculatorVM", "DisplayDTO"]
