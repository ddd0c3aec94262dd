"""Application composition layer for the Tkinter desktop calculator.

``main`` wires the window view to the calculator viewmodel without placing
calculator logic in the view.
"""
