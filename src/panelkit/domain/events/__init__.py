"""Event system for per-instance component communication.

This package provides the Observable registry that components build on.
Handlers subscribe to named event types and are notified synchronously, in
subscription order, when the owner dispatches.

Example:
    ```python
    from panelkit.domain.events import Observable

    source = Observable()

    def handle_change(value):
        print(f"changed to {value}")

    source.subscribe("change", handle_change)
    source.dispatch("change", 42)
    ```
"""

from .bus import Observable
from .types import NO_SCOPE, Binding, EventHandler, NoScope

__all__ = [
    "Observable",
    "Binding",
    "EventHandler",
    "NO_SCOPE",
    "NoScope",
]
