# calcpad/app/main.py
from __future__ import annotations

import logging
from typing import Any, Callable, Optional

# ---- Views (UI-only) ----
from .views.calculator_window import CalculatorWindowView

# ---- ViewModels ----
from ..viewmodels.calculator_vm import CalculatorVM, DisplayDTO
from ..viewmodels.keypad import KEYPAD_ROWS, KeypadKey, bind_command
from ..viewmodels.settings_vm import SettingsVM
from ..utils import logging as logging_utils

WindowFactory = Callable[..., Any]


def dispatch_keyboard(vm: CalculatorVM, char: str, keysym: str) -> bool:
    """Route a Tk key event: printable ``char`` first, then the ``keysym`` name."""
    if char and char.isprintable() and vm.handle_key(char):
        return True
    return vm.handle_key(keysym)


class App:
    """Bootstrap: wire the calculator window <-> CalculatorVM."""

    def __init__(
        self,
        settings_vm: Optional[SettingsVM] = None,
        *,
        window_factory: WindowFactory = CalculatorWindowView,
    ) -> None:
        self._log = logging.getLogger(__name__)
        self.settings_vm = settings_vm or SettingsVM.from_env()
        level = logging_utils.set_debug_logging(self.settings_vm.debug_logging)
        self._log.debug("Log level %s", logging.getLevelName(level))

        # ---- ViewModels ----
        self.calculator_vm = CalculatorVM(
            on_display_changed=self._apply_display,
            thousands_separator=self.settings_vm.thousands_separator,
        )

        # ---- Main window (constructor callbacks; no .configure(...)) ----
        self.win = window_factory(
            keypad_rows=KEYPAD_ROWS,
            title=self.settings_vm.window_title,
            on_keypad=self._on_keypad,
            on_keyboard=self._on_keyboard,
        )
        self._apply_display(self.calculator_vm.display())

    # ------------------------------------------------------------------
    # View callbacks
    # ------------------------------------------------------------------
    def _on_keypad(self, key: KeypadKey) -> None:
        bind_command(self.calculator_vm, key)()

    def _on_keyboard(self, char: str, keysym: str) -> None:
        dispatch_keyboard(self.calculator_vm, char, keysym)

    def _apply_display(self, dto: DisplayDTO) -> None:
        self.win.set_display(dto["previous"], dto["current"])


def main() -> None:
    logging_utils.configure_root()
    app = App()
    app.win.mainloop()


if __name__ == "__main__":
    main()
