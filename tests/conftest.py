from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from objconf.scripts import IsolationScope, PythonScriptLoader

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path


@pytest.fixture
def scope() -> IsolationScope:
    return IsolationScope("root")


@pytest.fixture
def script_loader(tmp_path: Path) -> PythonScriptLoader:
    return PythonScriptLoader({"base_dir": tmp_path})


@pytest.fixture
def write_script(tmp_path: Path) -> Callable[[str, str], Path]:
    def _write_script(name: str, text: str) -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write_script
