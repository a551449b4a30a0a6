from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from objconf.config import ScriptOptions
from objconf.scripts import PythonScriptLoader


def test_defaults() -> None:
    options = ScriptOptions()
    assert options.display_name == "script"
    assert options.stage == "buildscript"
    assert not options.top_level
    assert options.encoding == "utf-8"
    assert options.target_name == "target"
    assert options.base_dir is None


def test_validate() -> None:
    options = ScriptOptions.model_validate({"base_dir": "scripts", "stage": " init "})
    assert options.base_dir == Path("scripts")
    assert options.stage == "init"


def test_invalid_target_name() -> None:
    with pytest.raises(ValidationError, match="Invalid target name: 1target"):
        ScriptOptions(target_name="1target")


def test_extra_fields() -> None:
    with pytest.raises(ValidationError, match="Extra inputs are not permitted"):
        ScriptOptions.model_validate({"foo": 1})


def test_immutable() -> None:
    options = ScriptOptions()
    with pytest.raises(ValidationError, match="Instance is frozen"):
        options.stage = "init"  # type: ignore[misc]


def test_loader_options() -> None:
    options = ScriptOptions(stage="init")
    assert PythonScriptLoader(options).options is options
    assert PythonScriptLoader({"stage": "init"}).options == options
    assert PythonScriptLoader().options == ScriptOptions()
