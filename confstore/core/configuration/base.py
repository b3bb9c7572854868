"""
AbstractConfiguration - Mutation Facade

Public mutating operations of a configuration store. Every operation is
wrapped in its enclosing before/after events; the storage work itself is
delegated to a handful of ``_..._direct`` hooks implemented by concrete
stores.

Usage:
    config = MapConfiguration()
    config.add_event_listener(Events.ANY, on_change)

    config.add_property("db.hosts", "a.example.com, b.example.com")
    config.set_property("db.port", 5432)
    config.clear_property("db.port")
    config.clear()
"""
from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping
from typing import Any, Iterator, List, Optional, Union

from ..config import StoreSettings
from ..events import Events, EventSource
from ..exceptions import InvalidKeyError


def split_list(value: str, delimiter: str) -> List[str]:
    """
    Split a string at a list delimiter.

    The delimiter can be escaped with a backslash. Parts are stripped.

    Example:
        >>> split_list("a, b\\\\, c", ",")
        ['a', 'b, c']
    """
    parts: List[str] = []
    current: List[str] = []
    escaped = False
    for ch in value:
        if escaped:
            if ch != delimiter:
                current.append("\\")
            current.append(ch)
            escaped = False
        elif ch == "\\":
            escaped = True
        elif ch == delimiter:
            parts.append("".join(current).strip())
            current = []
        else:
            current.append(ch)
    if escaped:
        current.append("\\")
    parts.append("".join(current).strip())
    return parts


class AbstractConfiguration(EventSource, ABC):
    """
    Base class of all configuration stores.

    Subclasses provide the storage hooks; this class drives the event
    dispatch around them. A value added to an existing key is appended,
    so a key can hold a list of values.
    """

    def __init__(self, settings: Optional[StoreSettings] = None):
        self.settings = settings or StoreSettings()
        super().__init__(detail_events=self.settings.detail_events)

    # --- Mutations ---

    def add_property(self, key: str, value: Any) -> None:
        """
        Add a value to a property.

        Strings containing the list delimiter and sequences are added as
        several values. Adding to an existing key keeps the old values.

        Args:
            key: Property key
            value: Value(s) to add; None adds nothing

        Raises:
            InvalidKeyError: If the key is empty or not a string
        """
        self._check_key(key)
        with self.notify(Events.ADD_PROPERTY, key, value):
            self._add_property_values(key, value)

    def set_property(self, key: str, value: Any) -> None:
        """
        Replace all values of a property.

        Implemented as a clear followed by an add; in detail mode both
        sub-steps fire their own events.
        """
        self._check_key(key)
        with self.notify(Events.SET_PROPERTY, key, value):
            with self.detail_step(Events.CLEAR_PROPERTY, key):
                self._clear_property_direct(key)
            self._add_property_values(key, value)

    def clear_property(self, key: str) -> None:
        """Remove a property. Clearing a missing key still fires its events."""
        self._check_key(key)
        with self.notify(Events.CLEAR_PROPERTY, key):
            self._clear_property_direct(key)

    def clear(self) -> None:
        """Remove all properties. Fires CLEAR even if the store is empty."""
        with self.notify(Events.CLEAR):
            self._clear_direct()

    def copy(self, other: Union["AbstractConfiguration", Mapping]) -> None:
        """
        Set every property of another configuration or mapping on this one.

        Each key fires its own SET_PROPERTY events. Values are taken as they
        are; strings are not split again.
        """
        for key, value in self._items_of(other):
            self.set_property(key, self._as_values(value))

    def append(self, other: Union["AbstractConfiguration", Mapping]) -> None:
        """Add every property of another configuration or mapping to this one."""
        for key, value in self._items_of(other):
            self.add_property(key, self._as_values(value))

    # --- Reads ---

    def get_property(self, key: str) -> Any:
        """Return the value of a property, a list for multi-valued keys, or None."""
        return self._get_property_direct(key)

    def get(self, key: str, default: Any = None) -> Any:
        value = self._get_property_direct(key)
        return default if value is None else value

    def contains_key(self, key: str) -> bool:
        return self._contains_key(key)

    def get_keys(self, prefix: Optional[str] = None) -> List[str]:
        """
        Return the keys of the store in insertion order.

        Args:
            prefix: Only return keys equal to prefix or starting with
                ``prefix + "."``
        """
        keys = list(self._get_keys())
        if prefix is None:
            return keys
        return [k for k in keys if k == prefix or k.startswith(prefix + ".")]

    def is_empty(self) -> bool:
        return not self._get_keys_list()

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self._contains_key(key)

    def __len__(self) -> int:
        return len(self._get_keys_list())

    # --- Helpers ---

    def _add_property_values(self, key: str, value: Any) -> None:
        for item in self._split_values(value):
            with self.detail_step(Events.ADD_PROPERTY, key, item):
                self._add_property_direct(key, item)

    def _split_values(self, value: Any) -> List[Any]:
        if value is None:
            return []
        if isinstance(value, str):
            if self.settings.splits_values and self.settings.list_delimiter in value:
                return split_list(value, self.settings.list_delimiter)
            return [value]
        if isinstance(value, Iterable) and not isinstance(value, (bytes, Mapping)):
            return [item for item in value if item is not None]
        return [value]

    def _clear_direct(self) -> None:
        for key in self._get_keys_list():
            with self.detail_step(Events.CLEAR_PROPERTY, key):
                self._clear_property_direct(key)

    def _get_keys_list(self) -> List[str]:
        return list(self._get_keys())

    def _as_values(self, value: Any) -> Any:
        # keep already split strings in one piece
        if isinstance(value, str) and len(self._split_values(value)) > 1:
            return [value]
        return value

    @staticmethod
    def _items_of(other: Union["AbstractConfiguration", Mapping]):
        if isinstance(other, AbstractConfiguration):
            return [(key, other.get_property(key)) for key in other.get_keys()]
        return list(other.items())

    @staticmethod
    def _check_key(key: Any) -> None:
        if not isinstance(key, str) or not key:
            raise InvalidKeyError(f"Invalid property key: {key!r}")

    # --- Storage hooks ---

    @abstractmethod
    def _add_property_direct(self, key: str, value: Any) -> None:
        """Store one value for a key, appending if the key exists."""
        pass

    @abstractmethod
    def _clear_property_direct(self, key: str) -> None:
        """Remove a key. Missing keys are ignored."""
        pass

    @abstractmethod
    def _get_property_direct(self, key: str) -> Any:
        pass

    @abstractmethod
    def _contains_key(self, key: str) -> bool:
        pass

    @abstractmethod
    def _get_keys(self) -> Iterator[str]:
        pass
