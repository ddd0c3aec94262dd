"""Translate keyboard keys into calculator actions.

Call context:
    The Tk window forwards ``event.keysym``/``event.char`` and the NiceGUI page
    forwards ``e.key.name``; both go through :class:`MapKeyEvent`. Keys outside
    the mapping return ``None`` and are ignored by the caller.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional

from calcpad.domain.entities import DIGITS, DIVIDE, OPERATIONS, Action, ActionType

# Tk keysym names -> browser-style key values
KEY_ALIASES: Dict[str, str] = {
    **{f"KP_{d}": d for d in "0123456789"},
    "KP_Decimal": ".",
    "KP_Add": "+",
    "KP_Subtract": "-",
    "KP_Multiply": "*",
    "KP_Divide": "/",
    "KP_Enter": "Enter",
    "Return": "Enter",
    "period": ".",
    "plus": "+",
    "minus": "-",
    "asterisk": "*",
    "slash": "/",
    "equal": "=",
    "BackSpace": "Backspace",
}

# Keyboard "/" stands in for the division sign.
OPERATOR_KEYS: Dict[str, str] = {
    **{op: op for op in OPERATIONS if op != DIVIDE},
    "/": DIVIDE,
}

COMMAND_KEYS: Dict[str, ActionType] = {
    "Enter": ActionType.EVALUATE,
    "=": ActionType.EVALUATE,
    "Backspace": ActionType.DELETE_DIGIT,
    "Escape": ActionType.CLEAR,
}


def normalize_key(key: Optional[str], aliases: Mapping[str, str] = KEY_ALIASES) -> str:
    """Map toolkit-specific key names to the browser key value."""
    if not key:
        return ""
    return aliases.get(key, key)


@dataclass
class MapKeyEvent:
    aliases: Mapping[str, str] = field(default_factory=lambda: dict(KEY_ALIASES))

    def __call__(self, key: Optional[str]) -> Optional[Action]:
        """Return the action bound to ``key`` or ``None`` when it is not mapped."""
        name = normalize_key(key, self.aliases)
        if name in DIGITS:
            return Action(ActionType.ADD_DIGIT, name)
        if name in OPERATOR_KEYS:
            return Action(ActionType.CHOOSE_OPERATION, OPERATOR_KEYS[name])
        command = COMMAND_KEYS.get(name)
        if command is not None:
            return Action(command)
        return None


__all__ = ["COMMAND_KEYS", "KEY_ALIASES", "MapKeyEvent", "OPERATOR_KEYS", "normalize_key"]
