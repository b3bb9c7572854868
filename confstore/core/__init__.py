"""
confstore Core - Configuration Store Infrastructure.

Provides:
- AbstractConfiguration / MapConfiguration / TreeConfiguration: stores
- EventSource / EventListenerList: change notification
- Events / ErrorEvents / EventType: event kinds
- StoreSettings / load_settings: settings with JSON/TOML loading
- setup_logging: loguru configuration

Usage:
    from confstore.core import MapConfiguration, Events

    config = MapConfiguration()
    config.add_event_listener(Events.ANY, print)
    config.add_property("app.name", "demo")
"""
from .exceptions import ConfigurationError, InvalidKeyError, SettingsError
from .config import LoggingSettings, Settings, StoreSettings, load_settings
from .logging import setup_logging
from .events import (
    ANY,
    ConfigurationErrorEvent,
    ConfigurationEvent,
    ErrorEvents,
    EventListenerList,
    EventSource,
    Events,
    EventType,
)
from .configuration import (
    AbstractConfiguration,
    MapConfiguration,
    TreeConfiguration,
)

__all__ = [
    # Errors
    "ConfigurationError",
    "InvalidKeyError",
    "SettingsError",

    # Settings & logging
    "Settings",
    "StoreSettings",
    "LoggingSettings",
    "load_settings",
    "setup_logging",

    # Events
    "ANY",
    "EventType",
    "Events",
    "ErrorEvents",
    "ConfigurationEvent",
    "ConfigurationErrorEvent",
    "EventListenerList",
    "EventSource",

    # Stores
    "AbstractConfiguration",
    "MapConfiguration",
    "TreeConfiguration",
]
