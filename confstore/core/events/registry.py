"""
EventListenerList - Listener Registry

Keeps ordered (event type, listener) registrations and broadcasts events
to the listeners whose filter matches.
"""
from typing import Any, Callable, List, NamedTuple, Tuple
from loguru import logger

from .constants import EventType


class EventListenerRegistration(NamedTuple):
    """A listener together with the event type it was registered for."""
    event_type: EventType
    listener: Callable[[Any], None]


def _listener_name(listener: Callable) -> str:
    return getattr(listener, "__name__", repr(listener))


class EventListenerList:
    """
    Registry of event listeners keyed by event type filter.

    Listeners are invoked synchronously, in the order they were added.
    The same listener may be registered several times; each registration
    results in one notification per matching event.

    Usage:
        listeners = EventListenerList()
        listeners.add_event_listener(Events.ANY, on_event)
        listeners.fire(event)
    """

    def __init__(self):
        self._registrations: List[EventListenerRegistration] = []

    def add_event_listener(self, event_type: EventType, listener: Callable[[Any], None]) -> None:
        """
        Register a listener for an event type.

        Args:
            event_type: Type filter (Events.ANY receives everything)
            listener: Callable taking the event

        Raises:
            ValueError: If event type or listener is None
            TypeError: If event type is not an EventType
        """
        if event_type is None:
            raise ValueError("Event type must not be None")
        if not isinstance(event_type, EventType):
            raise TypeError(f"Event type must be an EventType, got {event_type!r}")
        if listener is None:
            raise ValueError("Listener must not be None")

        self._registrations.append(EventListenerRegistration(event_type, listener))
        logger.debug(f"Registered listener {_listener_name(listener)} for {event_type}")

    def remove_event_listener(self, event_type: EventType, listener: Callable[[Any], None]) -> bool:
        """
        Remove one registration of a listener.

        Args:
            event_type: Type filter used at registration
            listener: Listener to remove

        Returns:
            True if a registration was removed, False if none matched
        """
        for index, registration in enumerate(self._registrations):
            if registration.event_type == event_type and registration.listener == listener:
                del self._registrations[index]
                logger.debug(f"Removed listener {_listener_name(listener)} for {event_type}")
                return True
        return False

    def fire(self, event: Any) -> None:
        """
        Deliver an event to every matching listener.

        Works on a snapshot of the registrations, so listeners may fire
        further events or change registrations while being notified. A
        listener that raises aborts delivery; the exception propagates.

        Args:
            event: Event object with an ``event_type`` attribute
        """
        for registration in tuple(self._registrations):
            if registration.event_type.matches(event.event_type):
                registration.listener(event)

    def get_event_listeners(self, event_type: EventType) -> List[Callable[[Any], None]]:
        """
        Listeners that would receive an event of the given type.

        Args:
            event_type: Concrete event type

        Returns:
            Listeners in invocation order
        """
        return [r.listener for r in self._registrations if r.event_type.matches(event_type)]

    def registrations(self) -> Tuple[EventListenerRegistration, ...]:
        """Return all registrations in insertion order."""
        return tuple(self._registrations)

    def add_all(self, other: "EventListenerList") -> None:
        """Append all registrations of another list."""
        self._registrations.extend(other.registrations())

    def clear(self) -> None:
        """Remove all registrations."""
        self._registrations.clear()

    def __len__(self) -> int:
        return len(self._registrations)
