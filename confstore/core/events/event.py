"""
Event value objects passed to listeners.
"""
from dataclasses import dataclass, field
from typing import Any, Optional

from .constants import EventType


@dataclass(frozen=True)
class ConfigurationEvent:
    """
    One occurrence of a mutation on a configuration store.

    The event is frozen, but ``property_value`` is the object the caller
    passed to the mutation, not a copy. Listeners must not modify lists or
    dicts received this way.

    Attributes:
        source: Store that fired the event
        event_type: Kind of mutation
        property_name: Affected key, None for whole-store operations
        property_value: Value being added or set, None for clear operations
        before_update: True if fired before the mutation is applied
    """
    source: Any = field(repr=False, compare=False)
    event_type: EventType
    property_name: Optional[str] = None
    property_value: Any = None
    before_update: bool = False


@dataclass(frozen=True)
class ConfigurationErrorEvent:
    """
    Notification that an operation on a store failed.

    Attributes:
        source: Store on which the failure happened
        event_type: ErrorEvents.READ or ErrorEvents.WRITE
        operation_type: Kind of the operation that failed
        property_name: Key involved in the failed operation
        property_value: Value involved in the failed operation
        cause: The exception raised by the operation
    """
    source: Any = field(repr=False, compare=False)
    event_type: EventType
    operation_type: EventType
    property_name: Optional[str] = None
    property_value: Any = None
    cause: Optional[BaseException] = None
