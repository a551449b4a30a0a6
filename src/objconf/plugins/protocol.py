"""This module defines the protocol to be followed by plugin hosts."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from objconf.plugins.base import Plugin


class PluginHost(Protocol):
    """Protocol for plugin hosts.

    A plugin host is exposed by every
    [`PluginAware`][objconf.plugins.PluginAware] object and applies plugins to
    it.
    """

    def apply(self, plugin: type[Plugin] | str) -> Plugin:
        """Apply a plugin, given by class or by id.

        Args:
            plugin: The plugin class, or its registered id.

        Returns:
            The applied plugin instance.
        """
