"""Exceptions raised within the `objconf` library."""

from __future__ import annotations

from typing import Any


class PluginApplicationError(Exception):
    """Raised when a plugin host fails to apply a plugin to a target.

    The original exception raised by the plugin host is always chained as the
    `__cause__` of this exception, so no diagnostic information is lost.
    """

    def __init__(self, description: str) -> None:
        """Initialize the PluginApplicationError exception.

        Args:
            description: Identifies the plugin, e.g. `"id 'java'"` or
                         `"class 'pkg.module.MyPlugin'"`.
        """
        self.description = description
        super().__init__(f"Failed to apply plugin [{description}]")


class UnsupportedTargetError(TypeError):
    """Raised when a plugin is applied to a target that is not plugin-aware.

    A target supports plugin application only if it is an instance of
    [`PluginAware`][objconf.plugins.PluginAware].
    """

    def __init__(self, message: str, *, plugin: Any, target: Any) -> None:  # noqa: ANN401
        """Initialize the UnsupportedTargetError exception.

        Args:
            message: The error message.
            plugin:  The plugin class or plugin id that was requested.
            target:  The offending target.
        """
        self.plugin = plugin
        self.target = target
        super().__init__(message)


class ActionStateError(RuntimeError):
    """Raised when a configuration action is used outside its building state."""


class PluginNotFoundError(ValueError):
    """Raised by the plugin manager when no plugin is registered for an id."""
