"""Records of plugin applications."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from objconf.plugins import Plugin, PluginAware


@dataclass(frozen=True, slots=True)
class PluginApplication:
    """A plugin that was successfully applied to a target.

    Instances are passed to the post-apply hook of a configuration action.

    Attributes:
        plugin: The applied plugin instance.
        target: The target the plugin was applied to.
    """

    plugin: Plugin
    target: PluginAware
