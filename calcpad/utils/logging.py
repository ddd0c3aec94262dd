"""Root logger setup for the calculator runtimes.

``CALCPAD_LOG_LEVEL`` (a level name or number) wins over everything else;
otherwise a truthy ``CALCPAD_DEBUG`` forces DEBUG. Unparseable values are
ignored so a bad environment never stops the calculator from starting.
"""

from __future__ import annotations

import logging
import os
from typing import Mapping, Optional, Union

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_DATEFMT = "%H:%M:%S"
LEVEL_ENV = "CALCPAD_LOG_LEVEL"
DEBUG_ENV = "CALCPAD_DEBUG"

_TRUTHY = {"1", "true", "yes", "on"}


def env_truthy(value: Optional[str]) -> bool:
    return value is not None and value.strip().lower() in _TRUTHY


def parse_level(value: Union[int, str, None]) -> Optional[int]:
    """Turn ``"debug"``, ``"10"`` or ``10`` into a logging level; None if invalid."""
    if isinstance(value, int):
        return value
    text = (value or "").strip()
    if not text:
        return None
    try:
        return int(text)
    except ValueError:
        pass
    level = logging.getLevelName(text.upper())
    return level if isinstance(level, int) else None


def env_level(environ: Optional[Mapping[str, str]] = None) -> Optional[int]:
    """Level forced by the environment, or None when it leaves the choice open."""
    env = os.environ if environ is None else environ
    level = parse_level(env.get(LEVEL_ENV))
    if level is not None:
        return level
    if env_truthy(env.get(DEBUG_ENV)):
        return logging.DEBUG
    return None


def env_forces_debug(environ: Optional[Mapping[str, str]] = None) -> bool:
    level = env_level(environ)
    return level is not None and level <= logging.DEBUG


def configure_root(default_level: Union[int, str] = logging.INFO) -> int:
    """Install the compact handler once and return the effective root level."""
    level = env_level()
    if level is None:
        level = parse_level(default_level)
    if level is None:
        level = logging.INFO

    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=level, format=LOG_FORMAT, datefmt=LOG_DATEFMT)
    root.setLevel(level)
    return level


def set_debug_logging(enabled: bool) -> int:
    """Apply ``SettingsConfig.debug_logging``; an environment level still wins."""
    level = env_level()
    if level is None:
        level = logging.DEBUG if enabled else logging.INFO
    logging.getLogger().setLevel(level)
    return level
