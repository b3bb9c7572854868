"""
TreeConfiguration - hierarchical store.

Dotted keys address leaves in a tree of nested dictionaries: the key
``db.primary.host`` is stored as ``{"db": {"primary": {"host": ...}}}``.
Besides the single-property operations, whole branches can be added and
removed; these operations fire their own event kinds.
"""
import copy
from collections.abc import Mapping
from typing import Any, Dict, Iterator, List, Optional, Tuple

from ..config import StoreSettings
from ..events import Events, EventType
from ..exceptions import ConfigurationError, InvalidKeyError
from .base import AbstractConfiguration


class TreeConfiguration(AbstractConfiguration):
    """
    Configuration store organized as a tree.

    Event kinds in addition to the standard ones:
        ADD_NODES: a branch was added via add_nodes()
        CLEAR_TREE: a branch was removed via clear_tree()

    Usage:
        config = TreeConfiguration()
        config.add_nodes("db", {"host": "localhost", "pool": {"size": 5}})
        config.get_property("db.pool.size")  # 5
        config.clear_tree("db.pool")
    """

    ADD_NODES = EventType("ADD_NODES")
    CLEAR_TREE = EventType("CLEAR_TREE")

    def __init__(self, settings: Optional[StoreSettings] = None):
        super().__init__(settings)
        self._root: Dict[str, Any] = {}

    # --- Branch operations ---

    def add_nodes(self, key: str, nodes: Mapping) -> None:
        """
        Add a nested mapping below a key.

        Every leaf of ``nodes`` is added like add_property() would; in detail
        mode each leaf fires an ADD_PROPERTY pair.

        Args:
            key: Key of the branch to add to
            nodes: Mapping of child names to values or nested mappings

        Raises:
            TypeError: If nodes is not a mapping
            InvalidKeyError: If the key or any resulting leaf key is invalid
        """
        self._check_key(key)
        if not isinstance(nodes, Mapping):
            raise TypeError(f"nodes must be a mapping, got {type(nodes).__name__}")
        leaves = list(self._flatten(nodes, key))
        for leaf_key, _ in leaves:
            self._check_key(leaf_key)

        with self.notify(self.ADD_NODES, key, nodes):
            for leaf_key, value in leaves:
                self._add_property_values(leaf_key, value)

    def clear_tree(self, key: str) -> None:
        """
        Remove a key and everything below it.

        In detail mode each removed leaf fires a CLEAR_PROPERTY pair.
        """
        self._check_key(key)
        with self.notify(self.CLEAR_TREE, key):
            for leaf_key in self.get_keys(key):
                with self.detail_step(Events.CLEAR_PROPERTY, leaf_key):
                    self._clear_property_direct(leaf_key)

    def to_dict(self) -> Dict[str, Any]:
        """Return a deep copy of the tree."""
        return copy.deepcopy(self._root)

    # --- Storage hooks ---

    def _add_property_direct(self, key: str, value: Any) -> None:
        if isinstance(value, Mapping):
            raise ConfigurationError(f"Cannot store a mapping at '{key}', use add_nodes()")

        parent, name = self._parent_node(key, create=True)
        existing = parent.get(name)
        if name not in parent:
            parent[name] = value
        elif isinstance(existing, dict):
            raise ConfigurationError(f"Cannot add a value at '{key}': it has child nodes")
        elif isinstance(existing, list):
            parent[name] = existing + [value]
        else:
            parent[name] = [existing, value]

    def _clear_property_direct(self, key: str) -> None:
        path = key.split(".")
        nodes: List[Dict[str, Any]] = [self._root]
        for part in path[:-1]:
            child = nodes[-1].get(part)
            if not isinstance(child, dict):
                return
            nodes.append(child)

        parent = nodes[-1]
        if path[-1] not in parent or isinstance(parent[path[-1]], dict):
            return
        del parent[path[-1]]

        # prune branches left empty
        for depth in range(len(nodes) - 1, 0, -1):
            if nodes[depth]:
                break
            del nodes[depth - 1][path[depth - 1]]

    def _get_property_direct(self, key: str) -> Any:
        parent, name = self._parent_node(key, create=False)
        if parent is None:
            return None
        value = parent.get(name)
        return None if isinstance(value, dict) else value

    def _contains_key(self, key: str) -> bool:
        parent, name = self._parent_node(key, create=False)
        return parent is not None and name in parent and not isinstance(parent[name], dict)

    def _get_keys(self) -> Iterator[str]:
        return iter(list(self._leaves(self._root, "")))

    def _clear_direct(self) -> None:
        if self.is_detail_events():
            super()._clear_direct()
        else:
            self._root.clear()

    # --- Helpers ---

    @staticmethod
    def _check_key(key: Any) -> None:
        AbstractConfiguration._check_key(key)
        if "" in key.split("."):
            raise InvalidKeyError(f"Invalid property key: {key!r}")

    def _parent_node(self, key: str, create: bool) -> Tuple[Optional[Dict[str, Any]], str]:
        *path, name = key.split(".")
        node = self._root
        for index, part in enumerate(path):
            child = node.get(part)
            if child is None and part not in node:
                if not create:
                    return None, name
                child = node[part] = {}
            elif not isinstance(child, dict):
                if not create:
                    return None, name
                blocking = ".".join(path[:index + 1])
                raise ConfigurationError(f"Cannot add '{key}': '{blocking}' holds a value")
            node = child
        return node, name

    @classmethod
    def _leaves(cls, node: Dict[str, Any], prefix: str) -> Iterator[str]:
        for name, child in node.items():
            path = f"{prefix}.{name}" if prefix else name
            if isinstance(child, dict):
                yield from cls._leaves(child, path)
            else:
                yield path

    @classmethod
    def _flatten(cls, nodes: Mapping, prefix: str) -> Iterator[Tuple[str, Any]]:
        for name, value in nodes.items():
            path = f"{prefix}.{name}"
            if isinstance(value, Mapping):
                yield from cls._flatten(value, path)
            else:
                yield path, value
