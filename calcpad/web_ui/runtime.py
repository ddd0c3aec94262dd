"""Runtime state for the NiceGUI calculator pages.

One :class:`WebRuntime` is created per process; every browser client gets its
own :class:`CalculatorVM` so concurrent tabs never share a snapshot.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Optional

from calcpad.utils import logging as logging_utils
from calcpad.viewmodels.calculator_vm import CalculatorVM, DisplayDTO
from calcpad.viewmodels.settings_vm import SettingsVM

_log = logging.getLogger(__name__)


class WebRuntime:
    """Own settings and build per-client calculator viewmodels."""

    def __init__(self, settings_vm: Optional[SettingsVM] = None) -> None:
        logging_utils.configure_root()
        self.settings_vm = settings_vm or SettingsVM.from_env()
        logging_utils.set_debug_logging(self.settings_vm.debug_logging)
        self.clients_served = 0

    def new_calculator(
        self, on_display_changed: Optional[Callable[[DisplayDTO], None]] = None
    ) -> CalculatorVM:
        """Create a fresh calculator for one page visit."""
        self.clients_served += 1
        _log.info("Calculator page opened (client #%d)", self.clients_served)
        return CalculatorVM(
            on_display_changed=on_display_changed,
            thousands_separator=self.settings_vm.thousands_separator,
        )

    def settings_payload(self) -> Dict[str, Any]:
        return self.settings_vm.to_dict()


__all__ = ["WebRuntime"]
