"""
CalculatorWindowView
--------------------
Tkinter top-level window for the calculator. This file contains **only View
code**: no arithmetic and no state transitions. It exposes callback hooks that
the app wires to :class:`calcpad.viewmodels.calculator_vm.CalculatorVM`.

Notes:
- The window provides:
  * Output area with the pending expression and the current operand
  * Keypad grid built from ``KEYPAD_ROWS`` (4 columns)
- Keyboard input is forwarded raw (``char``, ``keysym``); mapping lives in the
  use-case layer.
"""
from __future__ import annotations

import tkinter as tk
from tkinter import ttk
from typing import Callable, Optional, Sequence

from ...viewmodels.keypad import KEYPAD_COLUMNS, KeypadKey
from .theme import apply_calculator_theme
from .view_utils import safe_call


class CalculatorWindowView(tk.Tk):
    """Top-level calculator window (UI-only)."""

    OnKeypad = Optional[Callable[[KeypadKey], None]]
    OnKeyboard = Optional[Callable[[str, str], None]]

    def __init__(
        self,
        *,
        keypad_rows: Sequence[Sequence[KeypadKey]],
        title: str = "Calculator",
        on_keypad: OnKeypad = None,
        on_keyboard: OnKeyboard = None,
    ) -> None:
        super().__init__()

        self.title(title)
        self.geometry("340x520")
        self.minsize(300, 460)
        apply_calculator_theme(self)

        self._on_keypad = on_keypad
        self._on_keyboard = on_keyboard

        self.columnconfigure(0, weight=1)
        self.rowconfigure(1, weight=1)

        self._build_output(self)
        self._build_keypad(self, keypad_rows)

        self.bind("<Key>", self._handle_key_event)

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------
    def _build_output(self, parent: tk.Misc) -> None:
        output = ttk.Frame(parent, style="Display.TFrame", padding=(12, 10))
        output.grid(row=0, column=0, sticky="ew")
        output.columnconfigure(0, weight=1)

        self._previous_var = tk.StringVar(value="")
        self._current_var = tk.StringVar(value="")
        ttk.Label(output, textvariable=self._previous_var, style="Previous.TLabel").grid(
            row=0, column=0, sticky="ew"
        )
        ttk.Label(output, textvariable=self._current_var, style="Current.TLabel").grid(
            row=1, column=0, sticky="ew"
        )

    # ------------------------------------------------------------------
    # Keypad
    # ------------------------------------------------------------------
    def _build_keypad(self, parent: tk.Misc, rows: Sequence[Sequence[KeypadKey]]) -> None:
        grid = ttk.Frame(parent, padding=6)
        grid.grid(row=1, column=0, sticky="nsew")
        for col in range(KEYPAD_COLUMNS):
            grid.columnconfigure(col, weight=1, uniform="keys")

        for row_idx, row in enumerate(rows):
            grid.rowconfigure(row_idx, weight=1)
            col = 0
            for key in row:
                ttk.Button(
                    grid,
                    text=key.label,
                    style="Accent.TButton" if key.accent else "Key.TButton",
                    takefocus=False,
                    command=lambda k=key: safe_call(self._on_keypad, k),
                ).grid(
                    row=row_idx, column=col, columnspan=key.span, sticky="nsew", padx=2, pady=2
                )
                col += key.span

    def _handle_key_event(self, event: tk.Event) -> None:
        safe_call(self._on_keyboard, event.char or "", event.keysym or "")

    # ------------------------------------------------------------------
    # Public setters
    # ------------------------------------------------------------------
    def set_display(self, previous: str, current: str) -> None:
        self._previous_var.set(previous)
        self._current_var.set(current)
