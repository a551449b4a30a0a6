"""Deferred operations queued by a configuration action."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar

from objconf.enums import OperationKind

if TYPE_CHECKING:
    from objconf.plugins import Plugin


@dataclass(frozen=True, slots=True)
class ScriptOperation:
    """Apply a script to every target.

    Attributes:
        script: The script reference, resolved by the script loader.
    """

    kind: ClassVar[OperationKind] = OperationKind.SCRIPT

    script: Any


@dataclass(frozen=True, slots=True)
class PluginTypeOperation:
    """Apply a plugin, identified by its class, to every target.

    Attributes:
        plugin_type: The plugin class.
    """

    kind: ClassVar[OperationKind] = OperationKind.PLUGIN_TYPE

    plugin_type: type[Plugin]

    @property
    def description(self) -> str:
        """Describe the plugin by its fully qualified class name."""
        return f"class '{qualified_name(self.plugin_type)}'"


@dataclass(frozen=True, slots=True)
class PluginIdOperation:
    """Apply a plugin, identified by its id, to every target.

    Attributes:
        plugin_id: The plugin id.
    """

    kind: ClassVar[OperationKind] = OperationKind.PLUGIN_ID

    plugin_id: str

    @property
    def description(self) -> str:
        """Describe the plugin by its id."""
        return f"id '{self.plugin_id}'"


Operation = ScriptOperation | PluginTypeOperation | PluginIdOperation


def qualified_name(cls: type) -> str:
    """Return the fully qualified name of a class.

    Args:
        cls: The class.

    Returns:
        The module and qualified name of the class, joined by a dot.
    """
    return f"{cls.__module__}.{cls.__qualname__}"
