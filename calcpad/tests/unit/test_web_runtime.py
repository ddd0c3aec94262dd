from __future__ import annotations

from calcpad.viewmodels.settings_vm import SettingsConfig, SettingsVM
from calcpad.web_ui.runtime import WebRuntime


def test_each_client_gets_an_independent_calculator() -> None:
    runtime = WebRuntime(SettingsVM(config=SettingsConfig(thousands_separator="_")))

    first = runtime.new_calculator()
    second = runtime.new_calculator()
    for d in "12345":
        first.cmd_digit(d)

    assert first.current_text() == "12_345"
    assert second.current_text() == ""
    assert runtime.clients_served == 2


def test_new_calculator_forwards_display_callback() -> None:
    updates = []
    runtime = WebRuntime(SettingsVM())

    vm = runtime.new_calculator(on_display_changed=updates.append)
    vm.handle_key("Escape")

    assert updates == [{"previous": "", "current": ""}]


def test_settings_payload_reflects_settings() -> None:
    runtime = WebRuntime(SettingsVM(config=SettingsConfig(web_port=9090)))

    assert runtime.settings_payload()["web_port"] == 9090
