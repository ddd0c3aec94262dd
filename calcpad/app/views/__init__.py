"""Tkinter views for the calculator window (UI-only)."""
