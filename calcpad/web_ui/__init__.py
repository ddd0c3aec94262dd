"""NiceGUI browser runtime for the calculator."""
