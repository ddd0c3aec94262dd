from __future__ import annotations

import logging
from typing import Any, Callable, Optional

_log = logging.getLogger(__name__)


def safe_call(fn: Optional[Callable[..., Any]], *args: Any) -> None:
    """Run a view callback; a failing keypress is logged, never raised into Tk."""
    if fn is None:
        return
    try:
        fn(*args)
    except Exception:
        _log.exception("Calculator callback %s failed", getattr(fn, "__name__", fn))


__all__ = ["safe_call"]
