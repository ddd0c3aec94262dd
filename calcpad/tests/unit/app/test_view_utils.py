from __future__ import annotations

import logging

from calcpad.app.views.view_utils import safe_call


def test_safe_call_forwards_arguments() -> None:
    calls = []

    safe_call(lambda *args: calls.append(args), "5", "KP_5")

    assert calls == [("5", "KP_5")]


def test_safe_call_ignores_missing_callback() -> None:
    safe_call(None, "x")


def test_safe_call_logs_failures(caplog) -> None:
    def on_keypad(_key) -> None:
        raise RuntimeError("boom")

    with caplog.at_level(logging.ERROR, logger="calcpad.app.views.view_utils"):
        safe_call(on_keypad, "AC")

    assert "on_keypad failed" in caplog.text
    assert "boom" in caplog.text
