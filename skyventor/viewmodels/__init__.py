"""ViewModel package for UI state and command surfaces.

Call context:
    ``skyventor/app/controller.py`` builds the concrete view models and
    ``skyventor/app/intents.py`` routes user intents to their commands.

Dependencies:
    Modules in this package depend on domain types, use-case callables, and
    lightweight formatting helpers only. I/O adapters stay outside.

Responsibilities:
    - Expose mutable UI state and command coroutines.
    - Turn domain results into view-facing text through ``TextResolver``.
    - Keep MVVM boundaries explicit by avoiding transport or persistence logic.
"""
