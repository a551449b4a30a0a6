from __future__ import annotations

from types import SimpleNamespace
from typing import TYPE_CHECKING

import pytest

from objconf.scripts import IsolationScope, PythonScriptLoader, ScriptSource

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path


def test_scope_hierarchy() -> None:
    root = IsolationScope("root")
    child1 = root.create_child()
    child2 = root.create_child()
    grandchild = child1.create_child("script")
    assert child1.parent is root
    assert child1.name == "child1"
    assert child2.name == "child2"
    assert grandchild.path == "root.child1.script"


def test_scope_namespace() -> None:
    root = IsolationScope()
    root.export("shared", 1)
    child = root.create_child()
    sibling = root.create_child()
    child.export("local", 2)
    assert child.namespace["shared"] == 1
    assert "local" not in root.namespace
    assert "local" not in sibling.namespace
    root.export("late", 3)
    assert child.namespace["late"] == 3


def test_resolve(tmp_path: Path, script_loader: PythonScriptLoader) -> None:
    source = script_loader.resolve("configure.py")
    assert source.path == (tmp_path / "configure.py").resolve()
    assert source.uri == source.path.as_uri()
    assert source.display_name == "script"
    assert script_loader.resolve(source) is source
    assert script_loader.resolve(source.uri) == source
    assert script_loader.resolve(f"file://localhost{source.path}") == source
    assert script_loader.resolve(tmp_path / "configure.py") == source


def test_resolve_errors(script_loader: PythonScriptLoader) -> None:
    with pytest.raises(ValueError, match="Unsupported script URI"):
        script_loader.resolve("https://example.org/configure.py")
    with pytest.raises(TypeError, match="Cannot convert 1 to a script source"):
        script_loader.resolve(1)
    with pytest.raises(ValueError, match="Unsupported host in script URI"):
        script_loader.resolve("file://server/share/configure.py")


def test_script_is_compiled_once(
    script_loader: PythonScriptLoader,
    write_script: Callable[[str, str], Path],
) -> None:
    path = write_script("configure.py", "target.value = target.name.upper()\n")
    root = IsolationScope()
    scope = root.create_child()
    source = script_loader.resolve("configure.py")
    handler = script_loader.create_handler(source, scope)
    script_plugin = script_loader.create_script_plugin(source, handler, scope, root)
    path.write_text("raise RuntimeError\n", encoding="utf-8")

    targets = [SimpleNamespace(name="a"), SimpleNamespace(name="b")]
    for target in targets:
        script_plugin.apply(target)
    assert [target.value for target in targets] == ["A", "B"]
    assert script_plugin.scope is scope
    assert script_plugin.base_scope is root


def test_script_namespace(
    tmp_path: Path,
    write_script: Callable[[str, str], Path],
) -> None:
    write_script(
        "configure.py",
        "obj.result = (__name__, __file__, __stage__, __top_level__, shared)\n"
        "obj.json = script_handler.require('json')\n"
        "private = 1\n",
    )
    loader = PythonScriptLoader(
        {"base_dir": tmp_path, "target_name": "obj", "stage": "init"}
    )
    root = IsolationScope("root")
    root.export("shared", "value")
    scope = root.create_child()
    source = loader.resolve("configure.py")
    handler = loader.create_handler(source, scope)
    target = SimpleNamespace()
    loader.create_script_plugin(source, handler, scope, root).apply(target)

    assert target.result == ("root.child1", str(source.path), "init", False, "value")
    assert target.json.__name__ == "json"
    assert handler.dependencies == ["json"]
    assert scope.namespace["json"] is target.json
    assert "json" not in root.namespace
    assert "private" not in scope.namespace


def test_script_errors_propagate(
    script_loader: PythonScriptLoader,
    write_script: Callable[[str, str], Path],
) -> None:
    write_script("broken.py", "def (\n")
    write_script("failing.py", "raise KeyError('oops')\n")
    scope = IsolationScope()
    source = script_loader.resolve("broken.py")
    handler = script_loader.create_handler(source, scope)
    with pytest.raises(SyntaxError):
        script_loader.create_script_plugin(source, handler, scope, scope)

    source = script_loader.resolve("failing.py")
    handler = script_loader.create_handler(source, scope)
    script_plugin = script_loader.create_script_plugin(source, handler, scope, scope)
    with pytest.raises(KeyError, match="oops"):
        script_plugin.apply(object())


def test_script_without_path(script_loader: PythonScriptLoader) -> None:
    source = ScriptSource("script", "mem:configure")
    scope = IsolationScope()
    handler = script_loader.create_handler(source, scope)
    with pytest.raises(ValueError, match="it has no local path"):
        script_loader.create_script_plugin(source, handler, scope, scope)
    assert str(source) == "script 'mem:configure'"
