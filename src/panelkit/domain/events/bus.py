"""Observable implementation for per-instance, named-event communication.

An Observable owns a registry mapping event type names to an ordered list of
bindings. Subscribers attach handlers with :meth:`Observable.subscribe` and the
owner notifies them with :meth:`Observable.dispatch`.

Event Handler Contract:
    Handlers are called synchronously, in subscription order, with the
    positional arguments given to ``dispatch``. A handler may veto by
    returning exactly ``False``; any other return value (``None``, ``0``,
    ``""``) counts as approval.

    Handlers may subscribe or unsubscribe on the same instance while an event
    is being dispatched. Such changes take effect from the next dispatch.
"""

from collections.abc import Iterator, Mapping
from typing import Any, Optional

from panelkit.logger import get_logger

from .types import NO_SCOPE, Binding, EventHandler

logger = get_logger("events.bus")

SCOPE_KEY = "scope"


class Observable:
    """Per-instance publish/subscribe registry.

    Subclasses list the events they provide in an ``EVENTS`` class attribute.
    The tuples of every class in the hierarchy are declared when the instance
    is constructed, so a subclass only names the events it adds.

    Example:
        ```python
        class Download(Observable):
            EVENTS = ("progress", "done")

        download = Download(events={"done": on_done})
        download.subscribe("progress", print_progress)
        download.dispatch("progress", 0.5)
        ```

    Thread safety:
        This implementation is NOT thread-safe. All calls are expected to
        happen on one thread.
    """

    EVENTS: tuple[str, ...] = ()

    def __init__(self, events: Optional[Mapping[str, Any]] = None):
        """
        Initialize the registry.

        Args:
            events: Optional convenience mapping of event type to a single
                handler, plus an optional ``"scope"`` entry shared by all of
                them. See :meth:`configure`.
        """
        self._events: dict[str, list[Binding]] = {}
        """Registry of bindings by event type."""

        self.configure(events)
        self.declare_event_types(*self._collect_event_types())

    @classmethod
    def _collect_event_types(cls) -> Iterator[str]:
        for klass in reversed(cls.__mro__):
            yield from klass.__dict__.get("EVENTS", ())

    def configure(self, bindings: Optional[Mapping[str, Any]] = None) -> None:
        """
        Register an initial set of handlers, one per event type.

        Args:
            bindings: Mapping of event type to handler. The special ``"scope"``
                key, if present, is used as the scope of every handler in the
                mapping. Register more than one handler per type with
                :meth:`subscribe`.

        Raises:
            TypeError: If a handler in the mapping is not callable
        """
        if not bindings:
            return

        scope = bindings.get(SCOPE_KEY, NO_SCOPE)
        for event_type, handler in bindings.items():
            if event_type == SCOPE_KEY:
                continue
            if not callable(handler):
                raise TypeError(f"Handler for event '{event_type}' must be callable, got {type(handler).__name__}")
            self._events.setdefault(event_type, []).append(Binding(handler, scope))

        logger.debug(f"Configured {len(self._events)} event type(s) on {type(self).__name__}")

    def declare_event_types(self, *event_types: str) -> None:
        """
        Declare the event types this instance provides.

        Existing bindings are never touched; undeclared types get an empty
        binding list. Dispatching or subscribing does not require a type to be
        declared first.

        Args:
            event_types: Event type names
        """
        for event_type in event_types:
            self._events.setdefault(event_type, [])

    def event_types(self) -> tuple[str, ...]:
        """Return the known event types, in registration order."""
        return tuple(self._events)

    def has_subscribers(self, event_type: str) -> bool:
        """
        Check if there are any bindings for a specific event type.

        Args:
            event_type: The event type to check

        Returns:
            True if there are any bindings, False otherwise
        """
        return bool(self._events.get(event_type))

    def subscribe(self, event_type: str, handler: EventHandler, scope: Any = NO_SCOPE) -> None:
        """
        Start listening for an event type.

        The same handler may be subscribed more than once; every binding fires
        independently and each needs its own :meth:`unsubscribe` call.

        Args:
            event_type: Name of the event
            handler: Callable run with the dispatched arguments
            scope: Object the handler is bound to when called. Defaults to
                ``NO_SCOPE``, meaning the handler is called as is.
        """
        self._events.setdefault(event_type, []).append(Binding(handler, scope))
        logger.debug(f"Subscribed handler for '{event_type}' on {type(self).__name__}")

    def unsubscribe(self, event_type: str, handler: Optional[EventHandler] = None) -> bool:
        """
        Stop a handler from running when an event fires.

        Args:
            event_type: Name of the event
            handler: The handler to remove. Only the first matching binding is
                removed. If omitted, every binding for the type is removed.

        Returns:
            Whether anything was removed
        """
        if handler is None:
            return self.remove_all(event_type)

        bindings = self._events.get(event_type, [])
        for index, binding in enumerate(bindings):
            if binding.matches(handler):
                del bindings[index]
                logger.debug(f"Unsubscribed handler for '{event_type}' on {type(self).__name__}")
                return True

        logger.debug(f"Handler not found in subscriptions for '{event_type}'")
        return False

    def remove_all(self, event_type: str) -> bool:
        """
        Remove every binding for an event type.

        The type stays registered with an empty binding list.

        Returns:
            Whether there were any bindings to remove
        """
        had_bindings = bool(self._events.get(event_type))
        self._events[event_type] = []
        return had_bindings

    def dispatch(self, event_type: str, *args: Any) -> bool:
        """
        Fire an event, calling every bound handler with ``args``.

        Args:
            event_type: Name of the event to fire
            args: Positional arguments passed to every handler

        Returns:
            False if at least one handler returned exactly False, True
            otherwise (including when nothing is bound to the type)

        Error Handling:
            If a handler raises, the exception is logged and the remaining
            handlers still run. A failed handler does not affect the result.
        """
        bindings = tuple(self._events.get(event_type, ()))
        if not bindings:
            return True

        logger.debug(f"Dispatching '{event_type}' to {len(bindings)} handler(s)")

        result = True
        for binding in bindings:
            try:
                outcome = binding.invoke(*args)
            except Exception as e:
                logger.opt(exception=e).error(f"Error in event handler for '{event_type}': {e}")
                continue
            if outcome is False:
                result = False
        return result

    # Short aliases
    on = subscribe
    off = unsubscribe
    fire = dispatch
