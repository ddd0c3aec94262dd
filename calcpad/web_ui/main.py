"""NiceGUI entrypoint for the calculator web runtime."""

from __future__ import annotations

import argparse
from typing import Any, Dict

from nicegui import ui
from nicegui.events import KeyEventArguments

from calcpad.viewmodels.keypad import KEYPAD_COLUMNS, KEYPAD_ROWS, bind_command
from calcpad.web_ui.runtime import WebRuntime


def _install_theme() -> None:
    """Install global CSS tokens for the calculator page."""
    ui.add_head_html(
        """
<style>
:root {
  --calc-bg-a: #00aaff;
  --calc-bg-b: #00ff6c;
  --calc-output: rgba(0, 0, 0, 0.75);
  --calc-key: rgba(255, 255, 255, 0.75);
  --calc-key-hover: rgba(255, 255, 255, 0.9);
}
body {
  background: linear-gradient(to right, var(--calc-bg-a), var(--calc-bg-b));
}
.calc-grid {
  display: grid;
  grid-auto-rows: minmax(6rem, auto);
  justify-content: center;
  margin: 2rem auto;
}
.calc-output {
  grid-column: 1 / -1;
  background-color: var(--calc-output);
  display: flex;
  flex-direction: column;
  align-items: flex-end;
  justify-content: space-around;
  padding: 0.75rem;
  word-wrap: break-word;
  word-break: break-all;
}
.calc-previous { color: rgba(255, 255, 255, 0.75); font-size: 1.5rem; }
.calc-current { color: white; font-size: 2.5rem; }
.calc-key {
  font-size: 2rem;
  border: 1px solid white;
  border-radius: 0;
  background-color: var(--calc-key) !important;
  color: black !important;
}
.calc-key:hover { background-color: var(--calc-key-hover) !important; }
.calc-span-two { grid-column: span 2; }
</style>
"""
    )


def _build_ui(runtime: WebRuntime) -> None:
    """Register the NiceGUI pages for the runtime."""

    @ui.page("/")
    def index() -> None:
        labels: Dict[str, Any] = {}

        def apply_display(dto: Dict[str, str]) -> None:
            labels["previous"].set_text(dto["previous"])
            labels["current"].set_text(dto["current"])

        vm = runtime.new_calculator(on_display_changed=apply_display)

        def on_key(e: KeyEventArguments) -> None:
            if not e.action.keydown or e.action.repeat:
                return
            vm.handle_key(e.key.name)

        _install_theme()
        ui.keyboard(on_key=on_key, ignore=[])

        with ui.element("div").classes("calc-grid").style(
            f"grid-template-columns: repeat({KEYPAD_COLUMNS}, 6rem)"
        ):
            with ui.element("div").classes("calc-output"):
                labels["previous"] = ui.label("").classes("calc-previous")
                labels["current"] = ui.label("").classes("calc-current")
            for row in KEYPAD_ROWS:
                for key in row:
                    classes = "calc-key calc-span-two" if key.span == 2 else "calc-key"
                    ui.button(key.label, on_click=bind_command(vm, key)).classes(classes).props(
                        "flat unelevated"
                    )

        apply_display(vm.display())


def _parse_args() -> argparse.Namespace:
    """Parse CLI args for web runtime startup."""
    parser = argparse.ArgumentParser(description="Run the calculator NiceGUI web UI.")
    parser.add_argument("--host", default=None)
    parser.add_argument("--port", type=int, default=None)
    parser.add_argument("--reload", action="store_true")
    parser.add_argument("--smoke-test", action="store_true")
    return parser.parse_args()


def main() -> None:
    """CLI entrypoint for the NiceGUI runtime."""
    args = _parse_args()
    runtime = WebRuntime()
    if args.smoke_test:
        payload = runtime.settings_payload()
        print("web-smoke-ok", sorted(payload.keys()))
        return
    _build_ui(runtime)
    ui.run(
        host=args.host or runtime.settings_vm.web_host,
        port=args.port or runtime.settings_vm.web_port,
        title=runtime.settings_vm.window_title,
        reload=args.reload,
        show=False,
    )


if __name__ in {"__main__", "__mp_main__"}:
    main()
