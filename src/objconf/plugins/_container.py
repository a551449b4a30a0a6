"""The default plugin host."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ._manager import PluginManager

if TYPE_CHECKING:
    from collections.abc import Iterator

    from .base import Plugin


class PluginContainer:
    """Applies plugins to a single target and keeps track of them.

    `PluginContainer` is the default implementation of the
    [`PluginHost`][objconf.plugins.protocol.PluginHost] protocol. A
    [`PluginAware`][objconf.plugins.PluginAware] object typically creates one
    container for itself and returns it from its `plugins` property.

    Each plugin class is applied at most once: applying a class, or an id that
    resolves to a class, a second time returns the instance created the first
    time. A plugin is recorded only after its `apply` method returns
    successfully.
    """

    def __init__(
        self, target: Any, plugin_manager: PluginManager | None = None  # noqa: ANN401
    ) -> None:
        """Initialize a plugin container.

        Args:
            target:         The object that plugins are applied to.
            plugin_manager: Used to resolve plugin ids (optional).
        """
        self._target = target
        self._plugin_manager = (
            PluginManager() if plugin_manager is None else plugin_manager
        )
        self._applied: dict[type[Plugin], Plugin] = {}

    @property
    def plugin_manager(self) -> PluginManager:
        """Return the plugin manager used to resolve ids.

        Returns:
            The plugin manager.
        """
        return self._plugin_manager

    def apply(self, plugin: type[Plugin] | str) -> Plugin:
        """Apply a plugin to the target, given by class or by id.

        Args:
            plugin: The plugin class, or its registered id.

        Returns:
            The applied plugin instance.
        """
        plugin_class = (
            self._plugin_manager.get_plugin(plugin)
            if isinstance(plugin, str)
            else plugin
        )
        instance = self._applied.get(plugin_class)
        if instance is None:
            instance = plugin_class()
            instance.apply(self._target)
            self._applied[plugin_class] = instance
        return instance

    def find_plugin(self, plugin: type[Plugin] | str) -> Plugin | None:
        """Return an applied plugin instance, if any.

        Args:
            plugin: The plugin class, or its registered id.

        Returns:
            The plugin instance, or `None` if it was not applied.
        """
        if isinstance(plugin, str):
            if plugin not in self._plugin_manager:
                return None
            plugin = self._plugin_manager.get_plugin(plugin)
        return self._applied.get(plugin)

    def has_plugin(self, plugin: type[Plugin] | str) -> bool:
        """Check if a plugin was applied.

        Args:
            plugin: The plugin class, or its registered id.

        Returns:
            `True` if the plugin was applied to the target.
        """
        return self.find_plugin(plugin) is not None

    def __iter__(self) -> Iterator[Plugin]:
        return iter(self._applied.values())

    def __len__(self) -> int:
        return len(self._applied)
