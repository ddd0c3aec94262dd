"""Shared visual theme for the calculator desktop view.

The module centralizes ttk style tokens so the window does not carry styling
logic inline.
"""

from __future__ import annotations

import tkinter as tk
from tkinter import ttk

BACKGROUND = "#1f2937"
DISPLAY_BG = "#111827"
KEY_BG = "#e5e7eb"
ACCENT_BG = "#2457ff"
TEXT = "#f9fafb"
MUTED = "#9ca3af"


def apply_calculator_theme(root: tk.Misc) -> None:
    """Apply the calculator ttk + tk theme to the whole application.

    Args:
        root: Root Tk object or any widget tied to the app Tcl interpreter.
    """
    style = ttk.Style(root)
    if "clam" in style.theme_names():
        style.theme_use("clam")

    root.option_add("*Font", "TkDefaultFont 12")
    root.configure(bg=BACKGROUND)

    style.configure("TFrame", background=BACKGROUND)
    style.configure("Display.TFrame", background=DISPLAY_BG)
    style.configure(
        "Previous.TLabel",
        background=DISPLAY_BG,
        foreground=MUTED,
        anchor="e",
        font=("TkDefaultFont", 14),
    )
    style.configure(
        "Current.TLabel",
        background=DISPLAY_BG,
        foreground=TEXT,
        anchor="e",
        font=("TkDefaultFont", 26, "bold"),
    )

    style.configure(
        "Key.TButton",
        padding=(8, 14),
        background=KEY_BG,
        relief="flat",
        font=("TkDefaultFont", 16),
    )
    style.map("Key.TButton", background=[("active", "#ffffff")])
    style.configure(
        "Accent.TButton",
        padding=(8, 14),
        background=ACCENT_BG,
        foreground="#ffffff",
        relief="flat",
        font=("TkDefaultFont", 16, "bold"),
    )
    style.map("Accent.TButton", background=[("active", "#1b45ce")])
