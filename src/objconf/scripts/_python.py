"""The default script loader, running Python scripts."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING, Any
from urllib.parse import urlparse
from urllib.request import url2pathname

from objconf.config import ScriptOptions

from ._source import ScriptHandler, ScriptSource

if TYPE_CHECKING:
    from types import CodeType

    from ._scope import IsolationScope

logger = logging.getLogger(__name__)


class PythonScriptLoader:
    """Loads Python files as configuration scripts.

    `PythonScriptLoader` implements the
    [`ScriptLoader`][objconf.scripts.protocol.ScriptLoader] protocol for
    plain Python source files. A script is read and compiled once, and the
    compiled code can then be run against any number of targets. Each run
    executes the module body in a fresh global namespace, initialized from
    the isolation scope of the script, in which the following names are
    bound:

    - The target, under the name given by
      [`ScriptOptions.target_name`][objconf.config.ScriptOptions] (`target`
      by default).
    - `script_handler`: the [`ScriptHandler`][objconf.scripts.ScriptHandler]
      of the script.
    - `__file__`, `__name__`, `__stage__` and `__top_level__`.

    For example, a script `configure.py` containing:

    ```python
    target.version = "1.0"
    ```

    sets the `version` attribute of every object it is applied to.
    """

    def __init__(self, options: ScriptOptions | dict[str, Any] | None = None) -> None:
        """Initialize the script loader.

        Args:
            options: Script options, as an object or a dictionary (optional).
        """
        self._options = (
            ScriptOptions()
            if options is None
            else ScriptOptions.model_validate(options)
        )

    @property
    def options(self) -> ScriptOptions:
        """Return the script options.

        Returns:
            The options used by the loader.
        """
        return self._options

    def resolve(self, script: Any) -> ScriptSource:  # noqa: ANN401
        """Resolve a script reference to a script source.

        Script references may be script sources, which are returned
        unchanged, `file:` URIs, or paths given as strings or path-like
        objects. Relative paths are resolved against the configured base
        directory, or the current working directory.

        Args:
            script: The script reference.

        Returns:
            The resolved script source.

        Raises:
            ValueError: If the reference is a URI with an unsupported scheme,
                        or a `file:` URI naming a remote host.
            TypeError:  If the reference cannot be converted to a path.
        """
        if isinstance(script, ScriptSource):
            return script
        if isinstance(script, str):
            parsed = urlparse(script)
            if parsed.scheme == "file":
                if parsed.netloc not in {"", "localhost"}:
                    msg = f"Unsupported host in script URI: {script}"
                    raise ValueError(msg)
                script = url2pathname(parsed.path)
            elif len(parsed.scheme) > 1:
                msg = f"Unsupported script URI: {script}"
                raise ValueError(msg)
        if not isinstance(script, str | os.PathLike):
            msg = f"Cannot convert {script!r} to a script source"
            raise TypeError(msg)
        path = Path(script)
        if not path.is_absolute():
            base_dir = (
                Path.cwd() if self._options.base_dir is None else self._options.base_dir
            )
            path = base_dir / path
        path = path.resolve()
        return ScriptSource(self._options.display_name, path.as_uri(), path)

    def create_handler(
        self, source: ScriptSource, scope: IsolationScope
    ) -> ScriptHandler:
        """Create a handler for the dependencies of a script.

        See the [`ScriptLoader`][objconf.scripts.protocol.ScriptLoader] protocol.

        # noqa
        """
        return ScriptHandler(source, scope)

    def create_script_plugin(
        self,
        source: ScriptSource,
        handler: ScriptHandler,
        target_scope: IsolationScope,
        base_scope: IsolationScope,
    ) -> PythonScriptPlugin:
        """Read and compile a script.

        Args:
            source:       The script source.
            handler:      The handler for the script's dependencies.
            target_scope: The isolation scope the script runs in.
            base_scope:   The parent of `target_scope`.

        Returns:
            The compiled script.

        Raises:
            ValueError: If the source has no local path.
        """
        if source.path is None:
            msg = f"Cannot load {source}: it has no local path"
            raise ValueError(msg)
        text = source.path.read_text(encoding=self._options.encoding)
        code = compile(text, str(source.path), "exec")
        logger.debug("Compiled %s in scope %s", source, target_scope.path)
        return PythonScriptPlugin(
            code,
            source=source,
            handler=handler,
            scope=target_scope,
            base_scope=base_scope,
            options=self._options,
        )


class PythonScriptPlugin:
    """A compiled Python script that can be applied to targets."""

    def __init__(  # noqa: PLR0913
        self,
        code: CodeType,
        *,
        source: ScriptSource,
        handler: ScriptHandler,
        scope: IsolationScope,
        base_scope: IsolationScope,
        options: ScriptOptions,
    ) -> None:
        self._code = code
        self._source = source
        self._handler = handler
        self._scope = scope
        self._base_scope = base_scope
        self._options = options

    @property
    def source(self) -> ScriptSource:
        """Return the source of the script."""
        return self._source

    @property
    def scope(self) -> IsolationScope:
        """Return the isolation scope of the script."""
        return self._scope

    @property
    def base_scope(self) -> IsolationScope:
        """Return the scope the script's own scope was created from."""
        return self._base_scope

    def apply(self, target: Any) -> None:  # noqa: ANN401
        """Run the script with the given target.

        Exceptions raised by the script propagate unchanged.

        Args:
            target: The object to configure.
        """
        namespace = dict(self._scope.namespace)
        namespace.update(
            {
                "__name__": self._scope.path,
                "__file__": str(self._source.path),
                "__stage__": self._options.stage,
                "__top_level__": self._options.top_level,
                "script_handler": self._handler,
                self._options.target_name: target,
            }
        )
        exec(self._code, namespace)  # noqa: S102
