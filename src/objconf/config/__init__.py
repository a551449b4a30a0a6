"""The `objconf.config` module provides configuration classes.

These configuration classes are built using
[`pydantic`](https://docs.pydantic.dev/), which provides data validation and
parsing. Configuration objects are typically created from dictionaries using
the `model_validate` method provided by `pydantic`, or directly from keyword
arguments. All configuration objects are immutable.
"""

from ._script_options import ScriptOptions

__all__ = [
    "ScriptOptions",
]
