"""Hierarchical isolation scopes for script execution."""

from __future__ import annotations

from collections import ChainMap
from itertools import count
from typing import Any


class IsolationScope:
    """A named, hierarchical namespace in which scripts are evaluated.

    Each scope owns a namespace layered over the namespace of its parent:
    names exported into a parent are visible in all of its descendants, while
    names exported into a child never leak into the parent or into siblings.
    Scripts are evaluated in a fresh child scope, so that scripts applied in
    the same configuration run do not see each other's definitions.
    """

    def __init__(self, name: str = "root", parent: IsolationScope | None = None) -> None:
        """Initialize an isolation scope.

        Args:
            name:   The name of the scope.
            parent: The parent scope (optional).
        """
        self._name = name
        self._parent = parent
        self._namespace: ChainMap[str, Any] = (
            ChainMap() if parent is None else parent.namespace.new_child()
        )
        self._child_ids = count(1)

    @property
    def name(self) -> str:
        """Return the name of the scope."""
        return self._name

    @property
    def parent(self) -> IsolationScope | None:
        """Return the parent scope, or `None` for a root scope."""
        return self._parent

    @property
    def namespace(self) -> ChainMap[str, Any]:
        """Return the namespace of the scope, including inherited names."""
        return self._namespace

    @property
    def path(self) -> str:
        """Return the dotted names of this scope and its ancestors."""
        if self._parent is None:
            return self._name
        return f"{self._parent.path}.{self._name}"

    def create_child(self, name: str | None = None) -> IsolationScope:
        """Create a new child scope.

        Args:
            name: The name of the child, numbered automatically if not given.

        Returns:
            The new scope.
        """
        child_id = next(self._child_ids)
        return IsolationScope(f"child{child_id}" if name is None else name, self)

    def export(self, name: str, value: Any) -> None:  # noqa: ANN401
        """Make a value visible in this scope and its descendants.

        Args:
            name:  The name to bind.
            value: The value to bind.
        """
        self._namespace[name] = value

    def __repr__(self) -> str:
        return f"IsolationScope({self.path!r})"
