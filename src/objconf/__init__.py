"""`objconf`: deferred configuration of objects by scripts and plugins.

The central class is
[`ObjectConfigurationAction`][objconf.action.ObjectConfigurationAction], which
collects a set of target objects and a queue of configuration operations, and
applies every operation to every target in a single execution pass.
"""

from .action import ObjectConfigurationAction, PluginApplication

__all__ = [
    "ObjectConfigurationAction",
    "PluginApplication",
]
