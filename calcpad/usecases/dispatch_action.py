from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable

from calcpad.domain.entities import Action, CalculatorState
from calcpad.domain.reducer import reduce

Reducer = Callable[[CalculatorState, Action], CalculatorState]


@dataclass
class DispatchAction:
    """Apply one action to a snapshot and trace the transition."""

    reducer: Reducer = reduce
    _log: logging.Logger = field(
        default_factory=lambda: logging.getLogger(__name__), repr=False
    )

    def __call__(self, state: CalculatorState, action: Action) -> CalculatorState:
        next_state = self.reducer(state, action)
        if next_state is state:
            self._log.debug("Ignored %s(%r) in %s", _type_label(action), action.payload, state)
        else:
            self._log.debug(
                "%s(%r): %s -> %s", _type_label(action), action.payload, state, next_state
            )
        return next_state


def _type_label(action: Action) -> str:
    return getattr(action.type, "name", str(action.type))


__all__ = ["DispatchAction"]
