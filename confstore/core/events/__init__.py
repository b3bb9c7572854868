"""
Event System - Configuration Change Notifications.

Provides:
- EventType / Events / ErrorEvents: event kinds and the ANY wildcard
- ConfigurationEvent / ConfigurationErrorEvent: immutable event objects
- EventListenerList: ordered listener registry
- EventSource: dispatcher deciding which events a mutation fires

Usage:
    from confstore.core.events import Events

    config.add_event_listener(Events.ANY, on_change)
    config.set_detail_events(True)
"""
from .constants import ANY, ErrorEvents, Events, EventType
from .event import ConfigurationErrorEvent, ConfigurationEvent
from .registry import EventListenerList, EventListenerRegistration
from .source import EventSource


__all__ = [
    "ANY",
    "EventType",
    "Events",
    "ErrorEvents",
    "ConfigurationEvent",
    "ConfigurationErrorEvent",
    "EventListenerList",
    "EventListenerRegistration",
    "EventSource",
]
