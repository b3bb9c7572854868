"""
MapConfiguration - flat store backed by a mutable mapping.
"""
from collections.abc import MutableMapping
from typing import Any, Iterator, Optional

from ..config import StoreSettings
from .base import AbstractConfiguration


class MapConfiguration(AbstractConfiguration):
    """
    Configuration store keeping its properties in a ``MutableMapping``.

    The mapping is used as given, not copied, so any mapping implementation
    can serve as storage. Errors raised by the mapping reach the caller
    of the mutating operation.

    Usage:
        config = MapConfiguration({"app.name": "demo"})
        config.set_property("app.debug", True)
    """

    def __init__(self, store: Optional[MutableMapping] = None, settings: Optional[StoreSettings] = None):
        super().__init__(settings)
        self._store = store if store is not None else {}

    @property
    def store(self) -> MutableMapping:
        return self._store

    def _add_property_direct(self, key: str, value: Any) -> None:
        if key not in self._store:
            self._store[key] = value
            return

        existing = self._store[key]
        if isinstance(existing, list):
            self._store[key] = existing + [value]
        else:
            self._store[key] = [existing, value]

    def _clear_property_direct(self, key: str) -> None:
        if key in self._store:
            del self._store[key]

    def _get_property_direct(self, key: str) -> Any:
        return self._store.get(key)

    def _contains_key(self, key: str) -> bool:
        return key in self._store

    def _get_keys(self) -> Iterator[str]:
        return iter(self._store)

    def _clear_direct(self) -> None:
        if self.is_detail_events():
            super()._clear_direct()
        else:
            self._store.clear()
