"""Loading and applying configuration scripts.

Scripts are applied through a script loader, an object following the
[`ScriptLoader`][objconf.scripts.protocol.ScriptLoader] protocol. The loader
resolves a script reference to a [`ScriptSource`][objconf.scripts.ScriptSource],
creates a [`ScriptHandler`][objconf.scripts.ScriptHandler] for the script's
dependencies, and compiles the script into a script plugin that can be
applied to any number of targets.

Each script runs in its own [`IsolationScope`][objconf.scripts.IsolationScope],
created as a child of the scope passed to the configuration action.

[`PythonScriptLoader`][objconf.scripts.PythonScriptLoader] is the default
loader, running plain Python files.
"""

from ._python import PythonScriptLoader, PythonScriptPlugin
from ._scope import IsolationScope
from ._source import ScriptHandler, ScriptSource
from .protocol import ScriptLoader, ScriptPlugin

__all__ = [
    "IsolationScope",
    "PythonScriptLoader",
    "PythonScriptPlugin",
    "ScriptHandler",
    "ScriptLoader",
    "ScriptPlugin",
    "ScriptSource",
]
