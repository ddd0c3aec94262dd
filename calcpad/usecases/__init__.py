"""Use-case layer for turning UI input into calculator transitions.

Each module coordinates domain objects without touching widgets, keeping the
MVVM boundaries intact.
"""
