"""The plugin manager."""

from __future__ import annotations

import logging
from functools import cache
from importlib.metadata import entry_points
from typing import Final

from objconf.exceptions import PluginNotFoundError

from .base import Plugin

ENTRY_POINT_GROUP: Final = "objconf.plugins"

logger = logging.getLogger(__name__)


class PluginManager:
    """Manages the discovery and retrieval of `objconf` plugins.

    The `PluginManager` maps plugin ids to plugin classes. Upon
    initialization, it scans for entry points defined under the
    `objconf.plugins` group, loads them, and stores them by id. Ids are case
    insensitive, and are stored in lower case.

    **Example: Registering a Custom Plugin**

    To make a plugin available by id, define an entry point in your package's
    `pyproject.toml`:

    ```toml
    [project.entry-points."objconf.plugins"]
    my_plugin = "my_package.my_module:MyPlugin"
    ```

    The plugin can then be retrieved via `plugin_manager.get_plugin("my_plugin")`,
    or applied to a target using `action.plugin("my_plugin")`.
    """

    def __init__(self, *, discover: bool = True) -> None:
        """Initialize the plugin manager.

        Args:
            discover: If `True`, load the plugins registered as entry points.
        """
        self._plugins: dict[str, type[Plugin]] = {}
        if discover:
            for plugin_id, plugin in _from_entry_points().items():
                self.add_plugin(plugin_id, plugin)

    def add_plugin(
        self,
        plugin_id: str,
        plugin: type[Plugin],
        *,
        prioritize: bool = False,
    ) -> None:
        """Register a plugin class under the given id.

        Args:
            plugin_id:  The id of the plugin.
            plugin:     The plugin class.
            prioritize: If `True`, put the plugin in front of all others.

        Raises:
            ValueError: If the id is already in use.
            TypeError:  If the plugin does not derive from `Plugin`.
        """
        id_lower = plugin_id.lower()
        if id_lower in self._plugins:
            msg = f"Duplicate plugin id: {id_lower}"
            raise ValueError(msg)
        if not (isinstance(plugin, type) and issubclass(plugin, Plugin)):
            msg = f"Incorrect type for plugin `{id_lower}`: {plugin!r}"
            raise TypeError(msg)
        if prioritize:
            plugins = self._plugins
            self._plugins = {id_lower: plugin}
            self._plugins.update(plugins)
        else:
            self._plugins[id_lower] = plugin
        logger.debug("Registered plugin %s: %s", id_lower, plugin.__qualname__)

    def get_plugin(self, plugin_id: str) -> type[Plugin]:
        """Retrieve a plugin class by its id.

        Args:
            plugin_id: The id of the plugin.

        Returns:
            The plugin class registered under the id.

        Raises:
            PluginNotFoundError: If no plugin is registered under the id.
        """
        plugin = self._plugins.get(plugin_id.lower())
        if plugin is None:
            msg = f"Plugin with id '{plugin_id}' not found"
            raise PluginNotFoundError(msg)
        return plugin

    def get_plugin_id(self, plugin: type[Plugin]) -> str | None:
        """Return the id under which a plugin class is registered.

        Args:
            plugin: The plugin class.

        Returns:
            The id of the first registration of the class, or `None`.
        """
        for plugin_id, registered in self._plugins.items():
            if registered is plugin:
                return plugin_id
        return None

    def __contains__(self, plugin_id: str) -> bool:
        return plugin_id.lower() in self._plugins


@cache  # Without the cache, repeated calls are very slow
def _from_entry_points() -> dict[str, type[Plugin]]:
    plugins: dict[str, type[Plugin]] = {}
    for entry_point in entry_points().select(group=ENTRY_POINT_GROUP):
        plugin = entry_point.load()
        if not (isinstance(plugin, type) and issubclass(plugin, Plugin)):
            msg = f"Incorrect type for plugin `{entry_point.name}`: {type(plugin)}"
            raise TypeError(msg)
        plugins[entry_point.name] = plugin
    return plugins
