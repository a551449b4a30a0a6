"""Configuration class for script application."""

from __future__ import annotations

from pathlib import Path  # noqa: TC003

from pydantic import BaseModel, ConfigDict, field_validator


class ScriptOptions(BaseModel):
    """Configuration class for loading and applying scripts.

    `ScriptOptions` controls how the default
    [`PythonScriptLoader`][objconf.scripts.PythonScriptLoader] resolves,
    compiles and runs configuration scripts:

    - **`display_name`**: The name used to describe script sources in messages
      and tracebacks.
    - **`stage`**: A label identifying the compilation stage. It is recorded
      on each compiled script and exported to the script namespace as
      `__stage__`.
    - **`top_level`**: Marks scripts as top-level scripts, rather than scripts
      applied on behalf of another object. Exported as `__top_level__`.
    - **`encoding`**: The text encoding of script files.
    - **`target_name`**: The global name under which the object being
      configured is visible to the script.
    - **`base_dir`**: Directory used to resolve relative script references.
      If not set, the current working directory at resolution time is used.

    Attributes:
        display_name: Description of script sources (default: `"script"`).
        stage:        Compilation stage label (default: `"buildscript"`).
        top_level:    Whether scripts are top-level (default: `False`).
        encoding:     Script file encoding (default: `"utf-8"`).
        target_name:  Name of the target in the script (default: `"target"`).
        base_dir:     Base directory for relative references (optional).
    """

    display_name: str = "script"
    stage: str = "buildscript"
    top_level: bool = False
    encoding: str = "utf-8"
    target_name: str = "target"
    base_dir: Path | None = None

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
        str_min_length=1,
        str_strip_whitespace=True,
        validate_default=True,
    )

    @field_validator("target_name")
    @classmethod
    def _check_target_name(cls, value: str) -> str:
        if not value.isidentifier():
            msg = f"Invalid target name: {value}"
            raise ValueError(msg)
        return value
