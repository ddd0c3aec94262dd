from __future__ import annotations

import logging
import os
from dataclasses import asdict, dataclass, replace
from typing import Any, Dict, Mapping, Optional

from ..utils.logging import env_forces_debug

_log = logging.getLogger(__name__)

ENV_PREFIX = "CALCPAD_"


@dataclass
class SettingsConfig:
    """Typed runtime settings; read from the environment, never persisted."""

    thousands_separator: str = ","
    window_title: str = "Calculator"
    web_host: str = "127.0.0.1"
    web_port: int = 8080
    debug_logging: bool = False


class SettingsVM:
    """Keeps runtime settings state and validation, no I/O here."""

    def __init__(self, *, config: Optional[SettingsConfig] = None) -> None:
        self.config = config or SettingsConfig(debug_logging=env_forces_debug())

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "SettingsVM":
        """Build settings from ``CALCPAD_<FIELD>`` variables, skipping invalid values.

        ``CALCPAD_DEBUG_LOGGING`` maps to ``debug_logging``; ``CALCPAD_LOG_LEVEL``
        and ``CALCPAD_DEBUG`` also turn it on when they force DEBUG."""
        env = os.environ if environ is None else environ
        vm = cls(config=SettingsConfig(debug_logging=env_forces_debug(env)))
        for key in SettingsConfig.__annotations__:
            raw = env.get(f"{ENV_PREFIX}{key.upper()}")
            if raw is None:
                continue
            try:
                vm.apply_dict({key: raw})
            except ValueError as exc:
                _log.warning("Ignoring %s%s: %s", ENV_PREFIX, key.upper(), exc)
        return vm

    # ------------------------------------------------------------------
    # Properties bridging to the typed config
    # ------------------------------------------------------------------
    @property
    def thousands_separator(self) -> str:
        return self.config.thousands_separator

    @thousands_separator.setter
    def thousands_separator(self, value: str) -> None:
        self.config = replace(self.config, thousands_separator=self._coerce_separator(value))

    @property
    def window_title(self) -> str:
        return self.config.window_title

    @window_title.setter
    def window_title(self, value: str) -> None:
        self.config = replace(self.config, window_title=self._coerce_title(value))

    @property
    def web_host(self) -> str:
        return self.config.web_host

    @web_host.setter
    def web_host(self, value: str) -> None:
        self.config = replace(self.config, web_host=self._coerce_host(value))

    @property
    def web_port(self) -> int:
        return self.config.web_port

    @web_port.setter
    def web_port(self, value: int) -> None:
        self.config = replace(self.config, web_port=self._coerce_port(value))

    @property
    def debug_logging(self) -> bool:
        return self.config.debug_logging

    @debug_logging.setter
    def debug_logging(self, value: bool) -> None:
        self.config = replace(self.config, debug_logging=self._coerce_bool(value))

    # ------------------------------------------------------------------
    def apply_dict(self, payload: Mapping[str, Any]) -> None:
        """Apply a flat settings mapping to the view-model."""
        if not isinstance(payload, Mapping):
            raise ValueError("Settings payload must be a mapping of flat keys.")

        unknown = set(payload.keys()) - set(SettingsConfig.__annotations__.keys())
        if unknown:
            raise ValueError(f"Unsupported settings keys: {', '.join(sorted(str(key) for key in unknown))}")

        updates: Dict[str, Any] = {
            key: self._coerce_config_value(key, value) for key, value in payload.items()
        }
        if updates:
            self.config = replace(self.config, **updates)

    def to_dict(self) -> dict:
        return asdict(self.config)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _coerce_config_value(self, key: str, raw: Any) -> Any:
        if key == "thousands_separator":
            return self._coerce_separator(raw)
        if key == "window_title":
            return self._coerce_title(raw)
        if key == "web_host":
            return self._coerce_host(raw)
        if key == "web_port":
            return self._coerce_port(raw)
        if key == "debug_logging":
            return self._coerce_bool(raw)
        raise ValueError(f"Unhandled config field: {key}")

    @staticmethod
    def _coerce_separator(value: Any) -> str:
        if not isinstance(value, str):
            raise ValueError("thousands_separator must be a string.")
        if any(ch.isdigit() or ch == "." for ch in value):
            raise ValueError("thousands_separator may not contain digits or '.'.")
        return value

    @staticmethod
    def _coerce_title(value: Any) -> str:
        if value is None:
            return ""
        return str(value).strip()

    @staticmethod
    def _coerce_host(value: Any) -> str:
        if not isinstance(value, str) or not value.strip():
            raise ValueError("web_host must be a non-empty string.")
        return value.strip()

    @staticmethod
    def _coerce_bool(value: Any) -> bool:
        if isinstance(value, bool):
            return value
        if isinstance(value, (int, float)):
            return bool(value)
        if isinstance(value, str):
            return value.strip().lower() in {"1", "true", "yes", "on"}
        return bool(value)

    @staticmethod
    def _coerce_port(value: Any) -> int:
        if isinstance(value, bool):
            raise ValueError("web_port must be an integer.")
        if isinstance(value, (int, float)):
            coerced = int(value)
        elif isinstance(value, str):
            try:
                coerced = int(value.strip())
            except (TypeError, ValueError) as exc:
                raise ValueError("web_port must be an integer.") from exc
        else:
            raise ValueError("web_port must be an integer.")
        if not 0 < coerced < 65536:
            raise ValueError("web_port must be between 1 and 65535.")
        return coerced
