"""Enumerations used within the `objconf` library."""

from enum import IntEnum, StrEnum


class ActionState(IntEnum):
    """Enumerates the lifecycle states of a configuration action.

    A [`ObjectConfigurationAction`][objconf.action.ObjectConfigurationAction]
    moves strictly forward through these states and is never reused.
    """

    BUILDING = 1
    "Targets and operations may be added."

    EXECUTING = 2
    "The action was triggered; default targets are resolved and operations run."

    DONE = 3
    "Terminal state, reached when execution returns or raises."


class OperationKind(StrEnum):
    """Enumerates the kinds of deferred operations."""

    SCRIPT = "script"
    "Apply a script to each target."

    PLUGIN_TYPE = "plugin_type"
    "Apply a plugin, identified by its class, to each target."

    PLUGIN_ID = "plugin_id"
    "Apply a plugin, identified by a string id, to each target."
