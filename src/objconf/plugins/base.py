"""This module defines the abstract base classes for plugins and their targets."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from objconf.plugins.protocol import PluginHost


class Plugin(ABC):
    """Abstract base class for all `objconf` plugins.

    Any class intended to be applied to a target object, either directly by
    class or via a registered plugin id, must inherit from this base class.
    Plugin classes are instantiated without arguments by the plugin host,
    which then calls [`apply`][objconf.plugins.Plugin.apply] once with the
    target.
    """

    @abstractmethod
    def apply(self, target: Any) -> None:  # noqa: ANN401
        """Apply this plugin to a target object.

        Args:
            target: The object to configure.
        """


class PluginAware(ABC):
    """Abstract base class for objects that support plugin application.

    Targets that can have plugins applied to them must inherit from this
    class. A [`ObjectConfigurationAction`][objconf.action.ObjectConfigurationAction]
    checks for this capability before applying a plugin, and refuses targets
    that do not have it.
    """

    @property
    @abstractmethod
    def plugins(self) -> PluginHost:
        """Return the plugin host responsible for this object.

        Returns:
            An object implementing the plugin host protocol.
        """
