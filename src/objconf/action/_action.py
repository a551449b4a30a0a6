"""This module defines the object configuration action."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Self, overload

from objconf.enums import ActionState
from objconf.exceptions import (
    ActionStateError,
    PluginApplicationError,
    UnsupportedTargetError,
)
from objconf.plugins import PluginAware
from objconf.utils import OrderedSet, flatten

from ._application import PluginApplication
from ._operations import (
    Operation,
    PluginIdOperation,
    PluginTypeOperation,
    ScriptOperation,
    qualified_name,
)

if TYPE_CHECKING:
    from collections.abc import Callable

    from objconf.plugins import Plugin
    from objconf.scripts import IsolationScope, ScriptLoader

logger = logging.getLogger(__name__)


def _do_nothing(_: PluginApplication) -> None:
    pass


class ObjectConfigurationAction:
    """Configure a set of objects using scripts and plugins.

    An `ObjectConfigurationAction` collects target objects and configuration
    operations, and applies all operations to all targets when
    [`execute`][objconf.action.ObjectConfigurationAction.execute] is called.
    Targets and operations can be added in any order, using a fluent
    interface:

    ```python
    action = ObjectConfigurationAction(loader, scope, default_project)
    action.to(project_a, project_b).plugin("java").from_("config.py").execute()
    ```

    **Targets:**

    Targets are added with [`to`][objconf.action.ObjectConfigurationAction.to].
    They form an ordered set: duplicates are dropped, and the order in which
    targets were first added is the order in which they are configured. If
    `to` is never called, the default targets passed at construction are used
    instead.

    **Operations:**

    Three kinds of operations are supported:

    1.  **Scripts**, added with
        [`from_`][objconf.action.ObjectConfigurationAction.from_]. The script
        is resolved and compiled once, in a child of the isolation scope of
        the action, and then applied to each target.
    2.  **Plugins by class**, added with
        [`plugin`][objconf.action.ObjectConfigurationAction.plugin].
    3.  **Plugins by id**, added with
        [`plugin`][objconf.action.ObjectConfigurationAction.plugin] by passing
        a string.

    Plugins can only be applied to targets that derive from
    [`PluginAware`][objconf.plugins.PluginAware]. After each successful
    plugin application, the `post_apply` hook is called with a
    [`PluginApplication`][objconf.action.PluginApplication] record.

    **Execution:**

    Operations run in the order they were added. An action is executed only
    once, and there is no rollback: if an operation fails, the operations
    before it remain applied and the operations after it are not run.
    """

    def __init__(
        self,
        script_loader: ScriptLoader,
        isolation_scope: IsolationScope,
        *default_targets: Any,  # noqa: ANN401
        post_apply: Callable[[PluginApplication], None] | None = None,
    ) -> None:
        """Initialize a configuration action.

        Args:
            script_loader:   Resolves and compiles scripts.
            isolation_scope: Parent of the isolation scopes of applied scripts.
            default_targets: Targets to configure if none are added.
            post_apply:      Called after each successful plugin application.
        """
        self._script_loader = script_loader
        self._isolation_scope = isolation_scope
        self._default_targets = default_targets
        self._post_apply = _do_nothing if post_apply is None else post_apply
        self._targets: OrderedSet[Any] = OrderedSet()
        self._targets_given = False
        self._operations: OrderedSet[Operation] = OrderedSet()
        self._state = ActionState.BUILDING

    @property
    def state(self) -> ActionState:
        """Return the lifecycle state of the action.

        Returns:
            The current state.
        """
        return self._state

    @property
    def targets(self) -> tuple[Any, ...]:
        """Return the targets added so far, in order.

        Default targets are only included after execution has started.

        Returns:
            The targets.
        """
        return tuple(self._targets)

    @property
    def operations(self) -> tuple[Operation, ...]:
        """Return the queued operations, in order.

        Returns:
            The operations.
        """
        return tuple(self._operations)

    def to(self, *targets: Any) -> Self:  # noqa: ANN401
        """Add targets to configure.

        Lists, tuples, sets and iterators of targets are flattened,
        recursively. Any other object is added as a single target, even if it
        is iterable.

        Args:
            targets: The targets.

        Returns:
            The action itself.
        """
        self._check_building("add targets")
        self._targets_given = True
        for target in flatten(targets):
            self._targets.add(target)
        return self

    def from_(self, script: Any) -> Self:  # noqa: ANN401
        """Queue a script to apply to the targets.

        The script reference is resolved by the script loader when the action
        is executed, not when it is added.

        Args:
            script: The script reference, for instance a path.

        Returns:
            The action itself.
        """
        self._add_operation(ScriptOperation(script))
        return self

    @overload
    def plugin(self, plugin: type[Plugin]) -> Self: ...
    @overload
    def plugin(self, plugin: str) -> Self: ...
    def plugin(self, plugin: type[Plugin] | str) -> Self:
        """Queue a plugin to apply to the targets.

        Args:
            plugin: The plugin class, or a plugin id.

        Returns:
            The action itself.
        """
        self._add_operation(
            PluginIdOperation(plugin)
            if isinstance(plugin, str)
            else PluginTypeOperation(plugin)
        )
        return self

    def execute(self) -> None:
        """Apply all queued operations to all targets.

        If no targets were added, the default targets are used. Operations
        are run in the order they were added, each one applied to the targets
        in order.

        Raises:
            ActionStateError:       If the action was already executed.
            UnsupportedTargetError: If a plugin is applied to a target that is
                                    not plugin-aware.
            PluginApplicationError: If the plugin host fails to apply a plugin.
        """
        self._check_building("execute")
        self._state = ActionState.EXECUTING
        try:
            if not self._targets_given:
                logger.debug("No targets given, using the default targets")
                for target in flatten(self._default_targets):
                    self._targets.add(target)
            for operation in self._operations:
                logger.debug("Running operation: %s", operation)
                match operation:
                    case ScriptOperation(script=script):
                        self._apply_script(script)
                    case PluginTypeOperation() | PluginIdOperation():
                        self._apply_plugin(operation)
        finally:
            self._state = ActionState.DONE

    def _check_building(self, what: str) -> None:
        if self._state != ActionState.BUILDING:
            msg = f"Cannot {what}: the action is in state {self._state.name}"
            raise ActionStateError(msg)

    def _add_operation(self, operation: Operation) -> None:
        self._check_building("add operations")
        self._operations.add(operation)

    def _apply_script(self, script: Any) -> None:  # noqa: ANN401
        source = self._script_loader.resolve(script)
        scope = self._isolation_scope.create_child()
        handler = self._script_loader.create_handler(source, scope)
        script_plugin = self._script_loader.create_script_plugin(
            source, handler, scope, self._isolation_scope
        )
        for target in self._targets:
            script_plugin.apply(target)
            logger.debug("Applied %s to %s", source, target)

    def _apply_plugin(self, operation: PluginTypeOperation | PluginIdOperation) -> None:
        plugin = (
            operation.plugin_type
            if isinstance(operation, PluginTypeOperation)
            else operation.plugin_id
        )
        for target in self._targets:
            if not isinstance(target, PluginAware):
                raise UnsupportedTargetError(
                    _unsupported_message(operation, target), plugin=plugin, target=target
                )
            try:
                applied = target.plugins.apply(plugin)
            except Exception as exc:
                raise PluginApplicationError(operation.description) from exc
            logger.debug("Applied plugin [%s] to %s", operation.description, target)
            self._post_apply(PluginApplication(applied, target))


def _unsupported_message(
    operation: PluginTypeOperation | PluginIdOperation,
    target: Any,  # noqa: ANN401
) -> str:
    plugin = (
        f"of class '{qualified_name(operation.plugin_type)}'"
        if isinstance(operation, PluginTypeOperation)
        else f"with id '{operation.plugin_id}'"
    )
    return (
        f"Cannot apply plugin {plugin} to '{target}' "
        f"(class: {qualified_name(type(target))}) "
        "as it does not implement PluginAware"
    )
