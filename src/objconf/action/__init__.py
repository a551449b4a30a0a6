"""Deferred configuration of objects by scripts and plugins."""

from ._action import ObjectConfigurationAction
from ._application import PluginApplication
from ._operations import (
    Operation,
    PluginIdOperation,
    PluginTypeOperation,
    ScriptOperation,
)

__all__ = [
    "ObjectConfigurationAction",
    "Operation",
    "PluginApplication",
    "PluginIdOperation",
    "PluginTypeOperation",
    "ScriptOperation",
]
