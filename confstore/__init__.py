"""
confstore - mutable configuration store with change notifications.
"""
from .core import (
    ConfigurationError,
    ConfigurationEvent,
    ConfigurationErrorEvent,
    ErrorEvents,
    Events,
    EventType,
    MapConfiguration,
    StoreSettings,
    TreeConfiguration,
    load_settings,
    setup_logging,
)

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "ConfigurationEvent",
    "ConfigurationErrorEvent",
    "ErrorEvents",
    "Events",
    "EventType",
    "MapConfiguration",
    "StoreSettings",
    "TreeConfiguration",
    "load_settings",
    "setup_logging",
]
