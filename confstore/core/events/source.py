"""
EventSource - Change Notification Core

Decides which events a mutation produces and in which order:

- an enclosing before/after pair for every public operation
- optional detail pairs for the sub-steps of an operation, visible only
  while detail mode is on
- error events for failed operations, delivered to error listeners

The after-event of an operation is only fired when the mutation
succeeded. Events already delivered are never retracted.
"""
from contextlib import contextmanager
from typing import Any, Callable, Iterator, List, Optional
from loguru import logger

from .constants import ErrorEvents, EventType
from .event import ConfigurationErrorEvent, ConfigurationEvent
from .registry import EventListenerList


class EventSource:
    """
    Base class for objects that notify listeners about their changes.

    Each instance owns its listener registries and its own detail-mode
    flag; nothing is shared between instances.

    Usage:
        source.add_event_listener(Events.ANY, listener)

        with source.notify(Events.SET_PROPERTY, "db.host", "localhost"):
            with source.detail_step(Events.CLEAR_PROPERTY, "db.host"):
                ...
            with source.detail_step(Events.ADD_PROPERTY, "db.host", "localhost"):
                ...
    """

    def __init__(self, detail_events: bool = False):
        self._listeners = EventListenerList()
        self._error_listeners = EventListenerList()
        self._detail_events = detail_events

    # --- Listener management ---

    def add_event_listener(self, event_type: EventType, listener: Callable[[ConfigurationEvent], None]) -> None:
        """Register a listener for change events of the given type."""
        self._listeners.add_event_listener(event_type, listener)

    def remove_event_listener(self, event_type: EventType, listener: Callable[[ConfigurationEvent], None]) -> bool:
        """Unregister a change listener. Unknown registrations are ignored."""
        return self._listeners.remove_event_listener(event_type, listener)

    def get_event_listeners(self, event_type: EventType) -> List[Callable[[ConfigurationEvent], None]]:
        """Listeners that would receive a change event of the given type."""
        return self._listeners.get_event_listeners(event_type)

    def clear_event_listeners(self) -> None:
        self._listeners.clear()

    def add_error_listener(self, event_type: EventType, listener: Callable[[ConfigurationErrorEvent], None]) -> None:
        """Register a listener for error events (ErrorEvents.READ, WRITE or ANY)."""
        self._error_listeners.add_event_listener(event_type, listener)

    def remove_error_listener(self, event_type: EventType, listener: Callable[[ConfigurationErrorEvent], None]) -> bool:
        """Unregister an error listener. Unknown registrations are ignored."""
        return self._error_listeners.remove_event_listener(event_type, listener)

    def get_error_listeners(self, event_type: EventType) -> List[Callable[[ConfigurationErrorEvent], None]]:
        return self._error_listeners.get_event_listeners(event_type)

    def clear_error_listeners(self) -> None:
        self._error_listeners.clear()

    def copy_event_listeners(self, source: "EventSource") -> None:
        """
        Register all change and error listeners of another source here too.

        Args:
            source: EventSource whose registrations are copied
        """
        self._listeners.add_all(source._listeners)
        self._error_listeners.add_all(source._error_listeners)

    # --- Detail mode ---

    def set_detail_events(self, enable: bool) -> None:
        """
        Switch detail mode on or off.

        While detail mode is on, the sub-steps of compound operations fire
        their own before/after pairs between the enclosing events.
        """
        self._detail_events = bool(enable)
        logger.debug(f"{self.__class__.__name__}: detail events {'enabled' if enable else 'disabled'}")

    def is_detail_events(self) -> bool:
        return self._detail_events

    @property
    def detail_events(self) -> bool:
        return self._detail_events

    @detail_events.setter
    def detail_events(self, enable: bool) -> None:
        self.set_detail_events(enable)

    @contextmanager
    def detail_mode(self, enabled: bool = True) -> Iterator[None]:
        """
        Set detail mode for the duration of a block, then restore it.

        Usage:
            with config.detail_mode():
                config.set_property("a", 1)
        """
        previous = self._detail_events
        self._detail_events = bool(enabled)
        try:
            yield
        finally:
            self._detail_events = previous

    # --- Firing ---

    def create_event(self, event_type: EventType, property_name: Optional[str],
                     property_value: Any, before_update: bool) -> ConfigurationEvent:
        """Build the event object passed to listeners."""
        return ConfigurationEvent(self, event_type, property_name, property_value, before_update)

    def fire_event(self, event_type: EventType, property_name: Optional[str] = None,
                   property_value: Any = None, before_update: bool = False) -> None:
        """
        Deliver a change event to all matching listeners.

        Args:
            event_type: Kind of mutation
            property_name: Affected key, None for whole-store operations
            property_value: Value involved, None for clear operations
            before_update: True before the mutation, False after it
        """
        if not self._listeners:
            return
        logger.trace(f"Firing {event_type} {property_name!r} before_update={before_update}")
        self._listeners.fire(self.create_event(event_type, property_name, property_value, before_update))

    def fire_error(self, event_type: EventType, operation_type: EventType, property_name: Optional[str],
                   property_value: Any, cause: BaseException) -> None:
        """
        Deliver an error event to all matching error listeners.

        Args:
            event_type: ErrorEvents.READ or ErrorEvents.WRITE
            operation_type: Kind of the failed operation
            property_name: Key involved
            property_value: Value involved
            cause: Exception raised by the operation
        """
        if not self._error_listeners:
            return
        self._error_listeners.fire(
            ConfigurationErrorEvent(self, event_type, operation_type, property_name, property_value, cause)
        )

    @contextmanager
    def notify(self, event_type: EventType, property_name: Optional[str] = None,
               property_value: Any = None) -> Iterator[None]:
        """
        Wrap a public mutation in its enclosing before/after events.

        The before-event is fired on entry. The after-event is fired only
        if the block completes; if it raises, a WRITE error event is sent
        to error listeners and the exception propagates unchanged.
        """
        self.fire_event(event_type, property_name, property_value, True)
        try:
            yield
        except Exception as e:
            logger.error(f"{self.__class__.__name__}: {event_type} of {property_name!r} failed: {e}")
            self.fire_error(ErrorEvents.WRITE, event_type, property_name, property_value, e)
            raise
        self.fire_event(event_type, property_name, property_value, False)

    @contextmanager
    def detail_step(self, event_type: EventType, property_name: Optional[str] = None,
                    property_value: Any = None) -> Iterator[None]:
        """
        Wrap one sub-step of a compound mutation in detail events.

        Events are only fired if detail mode is on when the step starts.
        A failing step fires no after-event; the enclosing ``notify``
        reports the failure.
        """
        emit = self._detail_events
        if emit:
            self.fire_event(event_type, property_name, property_value, True)
        yield
        if emit:
            self.fire_event(event_type, property_name, property_value, False)
