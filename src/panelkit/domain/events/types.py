"""Binding types for the observable event registry."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable

__all__ = ["NO_SCOPE", "Binding", "EventHandler", "NoScope"]

EventHandler = Callable[..., Any]


class NoScope(Enum):
    """Sentinel type marking a binding without an execution scope."""

    TOKEN = "NO_SCOPE"

    def __repr__(self) -> str:
        return "NO_SCOPE"


NO_SCOPE = NoScope.TOKEN


@dataclass(frozen=True, eq=False)
class Binding:
    """A handler registered against one event type.

    Attributes:
        handler: The callable to run when the event fires.
        scope: Object the handler runs against. When it is not ``NO_SCOPE``
            the handler is called like a method bound to it, receiving the
            scope as its first positional argument.
    """

    handler: EventHandler
    scope: Any = NO_SCOPE

    def invoke(self, *args: Any) -> Any:
        """Call the handler with ``args``, preceded by the scope if there is one."""
        if self.scope is NO_SCOPE:
            return self.handler(*args)
        return self.handler(self.scope, *args)

    def matches(self, handler: EventHandler) -> bool:
        """Check whether this binding holds ``handler``.

        Handlers compare by identity. Bound methods are created anew on every
        attribute access, so two bound methods match when they are bound to
        the same instance and wrap the same function. Built-in bound methods
        (``items.append``) have no ``__func__`` and are compared by name.
        """
        if self.handler is handler:
            return True
        own_self = getattr(self.handler, "__self__", None)
        if own_self is None or own_self is not getattr(handler, "__self__", None):
            return False
        if type(self.handler) is not type(handler):
            return False
        own_func = getattr(self.handler, "__func__", None)
        if own_func is not None:
            return own_func is getattr(handler, "__func__", None)
        return getattr(self.handler, "__name__", None) == getattr(handler, "__name__", None)
