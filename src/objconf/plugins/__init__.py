"""Extending `objconf` with plugins.

Plugins are classes deriving from [`Plugin`][objconf.plugins.Plugin] that
configure a target object in their [`apply`][objconf.plugins.Plugin.apply]
method. Targets that accept plugins derive from
[`PluginAware`][objconf.plugins.PluginAware] and expose a plugin host, an
object following the [`PluginHost`][objconf.plugins.protocol.PluginHost]
protocol, that applies plugins by class or by id.

**Plugin Management and Discovery**

The [`PluginManager`][objconf.plugins.PluginManager] class maps plugin ids to
plugin classes. Plugins are discovered automatically using Python's standard
entry points mechanism, in the `objconf.plugins` group, and can also be
registered with [`add_plugin`][objconf.plugins.PluginManager.add_plugin].

**Plugin Hosts**

[`PluginContainer`][objconf.plugins.PluginContainer] is the default plugin
host. It resolves ids through a plugin manager, applies each plugin class at
most once, and keeps track of the applied plugin instances.
"""

from ._container import PluginContainer
from ._manager import PluginManager
from .base import Plugin, PluginAware
from .protocol import PluginHost

__all__ = [
    "Plugin",
    "PluginAware",
    "PluginContainer",
    "PluginHost",
    "PluginManager",
]
