"""Script sources and script handlers."""

from __future__ import annotations

import importlib
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path
    from types import ModuleType

    from ._scope import IsolationScope


@dataclass(frozen=True, slots=True)
class ScriptSource:
    """A resolved script.

    Attributes:
        display_name: Short description of the kind of script.
        uri:          The URI of the script.
        path:         The local path of the script, if it has one.
    """

    display_name: str
    uri: str
    path: Path | None = None

    def __str__(self) -> str:
        return f"{self.display_name} '{self.uri}'"


@dataclass(slots=True)
class ScriptHandler:
    """Handles the dependencies of a single script.

    A script handler is created for each applied script, and is bound to the
    isolation scope of that script. It is available inside the script under
    the name `script_handler`.

    Attributes:
        source:       The script source.
        scope:        The isolation scope of the script.
        dependencies: Names of the modules required so far, in order.
    """

    source: ScriptSource
    scope: IsolationScope
    dependencies: list[str] = field(default_factory=list)

    def require(self, module_name: str, *, alias: str | None = None) -> ModuleType:
        """Import a module and export it into the script's scope.

        The running script sees the module through the return value only;
        the exported name is visible to later runs in the same scope and to
        child scopes.

        Args:
            module_name: The absolute name of the module.
            alias:       Name to bind in the scope, defaults to the last
                         component of the module name.

        Returns:
            The imported module.
        """
        module = importlib.import_module(module_name)
        self.scope.export(alias or module_name.rpartition(".")[2], module)
        if module_name not in self.dependencies:
            self.dependencies.append(module_name)
        return module
