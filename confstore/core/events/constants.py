"""
Event Type Constants.

Standard event types for configuration change notifications.
Use these constants when registering listeners on a configuration store.

Usage:
    from confstore.core.events import Events

    config.add_event_listener(Events.ANY, on_any_change)
    config.add_event_listener(Events.SET_PROPERTY, on_set)

Derived stores declare their own kinds by value, e.g.
``ADD_NODES = EventType("ADD_NODES")``; the registry and dispatcher need
no changes for that.
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class EventType:
    """
    Identifier of a kind of event.

    Two event types are equal when their names are equal. The special
    ``ANY`` type acts as a wildcard filter.
    """
    name: str

    def matches(self, event_type: "EventType") -> bool:
        """
        Check whether a listener registered for this type receives an event.

        Args:
            event_type: Type of the event being delivered

        Returns:
            True if this is the wildcard or the exact same type
        """
        return self == ANY or self == event_type

    def __str__(self) -> str:
        return self.name


ANY = EventType("ANY")


class Events:
    """
    Mutation kinds produced by every configuration store.

    Example:
        >>> config.add_event_listener(Events.CLEAR, on_cleared)
    """

    # Wildcard - matches every event type
    ANY = ANY

    # Single-property mutations
    ADD_PROPERTY = EventType("ADD_PROPERTY")
    SET_PROPERTY = EventType("SET_PROPERTY")
    CLEAR_PROPERTY = EventType("CLEAR_PROPERTY")

    # Whole-store mutation
    CLEAR = EventType("CLEAR")


class ErrorEvents:
    """Kinds of error notifications delivered to error listeners."""

    ANY = ANY

    READ = EventType("READ")
    WRITE = EventType("WRITE")
