"""
Configuration Stores.

Provides:
- AbstractConfiguration: mutation facade driving change events
- MapConfiguration: flat store over any MutableMapping
- TreeConfiguration: hierarchical store with branch operations
"""
from .base import AbstractConfiguration, split_list
from .map_configuration import MapConfiguration
from .tree_configuration import TreeConfiguration

__all__ = [
    "AbstractConfiguration",
    "MapConfiguration",
    "TreeConfiguration",
    "split_list",
]
