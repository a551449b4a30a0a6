"""Protocols to be followed by script loaders and script plugins."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from ._scope import IsolationScope
    from ._source import ScriptHandler, ScriptSource


class ScriptPlugin(Protocol):
    """Protocol for compiled scripts that can configure a target.

    A script plugin may be applied repeatedly, to different targets.
    """

    def apply(self, target: Any) -> None:  # noqa: ANN401
        """Run the script against a target.

        Args:
            target: The object to configure.
        """


class ScriptLoader(Protocol):
    """Protocol for script loaders.

    A script loader turns an opaque script reference into a script plugin,
    in three steps: resolving the reference to a source, creating a handler
    for the script's dependencies, and compiling the script.
    """

    def resolve(self, script: Any) -> ScriptSource:  # noqa: ANN401
        """Resolve a script reference.

        Args:
            script: The script reference.

        Returns:
            The resolved script source.
        """

    def create_handler(
        self, source: ScriptSource, scope: IsolationScope
    ) -> ScriptHandler:
        """Create a handler for the dependencies of a script.

        Args:
            source: The script source.
            scope:  The isolation scope the script will run in.

        Returns:
            A script handler.
        """

    def create_script_plugin(
        self,
        source: ScriptSource,
        handler: ScriptHandler,
        target_scope: IsolationScope,
        base_scope: IsolationScope,
    ) -> ScriptPlugin:
        """Compile a script.

        Args:
            source:       The script source.
            handler:      The handler for the script's dependencies.
            target_scope: The isolation scope the script runs in.
            base_scope:   The parent of `target_scope`.

        Returns:
            A script plugin that can be applied to targets.
        """
