"""ViewModel package for calculator UI state and command surfaces.

Call context:
    ``calcpad/app/main.py`` and ``calcpad/web_ui/main.py`` import concrete
    viewmodels from this package to bind view callbacks to state transitions.

Dependencies:
    Modules in this package depend on domain types and use-cases only.
    Widgets and toolkit event objects remain in the views.

Responsibilities:
    - Own the single calculator snapshot and expose command callbacks.
    - Turn snapshots into formatted display DTOs.
    - Hold runtime settings read from the environment.
"""
