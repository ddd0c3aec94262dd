"""Four-function calculator with Tkinter and NiceGUI front ends."""

__version__ = "0.1.0"
