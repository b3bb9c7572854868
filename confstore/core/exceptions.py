"""
Configuration Store Exceptions.

Errors raised by the store itself. Failures coming from the storage
collaborator or from listeners are never wrapped; they reach the caller
unchanged.
"""


class ConfigurationError(Exception):
    """Base exception for configuration store errors."""
    pass


class InvalidKeyError(ConfigurationError, ValueError):
    """Raised when a property key is empty or not a string."""
    pass


class SettingsError(ConfigurationError):
    """Raised when a settings file cannot be read or fails validation."""
    pass
