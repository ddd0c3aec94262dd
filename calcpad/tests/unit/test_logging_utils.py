from __future__ import annotations

import logging

import pytest

from calcpad.utils import logging as logging_utils
from calcpad.viewmodels.settings_vm import SettingsVM


@pytest.fixture(autouse=True)
def _restore_root_level(monkeypatch):
    monkeypatch.delenv("CALCPAD_LOG_LEVEL", raising=False)
    monkeypatch.delenv("CALCPAD_DEBUG", raising=False)
    root = logging.getLogger()
    level = root.level
    yield
    root.setLevel(level)


def test_configure_root_uses_default_level() -> None:
    assert logging_utils.configure_root(logging.WARNING) == logging.WARNING
    assert logging.getLogger().level == logging.WARNING


def test_configure_root_accepts_level_names() -> None:
    assert logging_utils.configure_root("error") == logging.ERROR


def test_env_level_overrides_default(monkeypatch) -> None:
    monkeypatch.setenv("CALCPAD_LOG_LEVEL", "debug")

    assert logging_utils.configure_root(logging.ERROR) == logging.DEBUG
    assert logging_utils.env_forces_debug() is True


def test_numeric_env_level(monkeypatch) -> None:
    monkeypatch.setenv("CALCPAD_LOG_LEVEL", "30")

    assert logging_utils.configure_root() == logging.WARNING
    assert logging_utils.env_forces_debug() is False


@pytest.mark.parametrize("value", ["²", "verbose", "1.5", "   "])
def test_unparseable_env_level_is_ignored(monkeypatch, value: str) -> None:
    monkeypatch.setenv("CALCPAD_LOG_LEVEL", value)

    assert logging_utils.env_level() is None
    assert logging_utils.configure_root(logging.WARNING) == logging.WARNING
    assert SettingsVM.from_env().debug_logging is False
    assert SettingsVM().debug_logging is False


@pytest.mark.parametrize(
    "value,expected",
    [
        ("debug", logging.DEBUG),
        (" Warning ", logging.WARNING),
        ("15", 15),
        (logging.ERROR, logging.ERROR),
        ("²", None),
        ("", None),
        (None, None),
    ],
)
def test_parse_level(value, expected) -> None:
    assert logging_utils.parse_level(value) == expected


def test_debug_flag_forces_debug(monkeypatch) -> None:
    monkeypatch.setenv("CALCPAD_DEBUG", "yes")

    assert logging_utils.set_debug_logging(False) == logging.DEBUG
    assert SettingsVM.from_env().debug_logging is True


def test_set_debug_logging_without_env() -> None:
    assert logging_utils.set_debug_logging(True) == logging.DEBUG
    assert logging.getLogger().level == logging.DEBUG
    assert logging_utils.set_debug_logging(False) == logging.INFO
    assert logging_utils.env_forces_debug() is False


def test_env_level_wins_over_debug_setting(monkeypatch) -> None:
    monkeypatch.setenv("CALCPAD_LOG_LEVEL", "error")

    assert logging_utils.set_debug_logging(True) == logging.ERROR


def test_env_forces_debug_reads_given_mapping() -> None:
    assert logging_utils.env_forces_debug({"CALCPAD_DEBUG": "on"}) is True
    assert logging_utils.env_forces_debug({"CALCPAD_LOG_LEVEL": "info", "CALCPAD_DEBUG": "1"}) is False


@pytest.mark.parametrize("value", ["1", "true", " YES ", "on"])
def test_env_truthy(value: str) -> None:
    assert logging_utils.env_truthy(value) is True


def test_env_truthy_rejects_other_values() -> None:
    assert logging_utils.env_truthy(None) is False
    assert logging_utils.env_truthy("nope") is False
