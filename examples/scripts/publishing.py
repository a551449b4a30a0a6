"""Configuration script adding publishing settings to a project.

This script is run by `configure_projects.py`, once for every project. The
project being configured is available as `target`.
"""

target.settings["publish"] = True  # noqa: F821
target.settings["repository"] = f"https://repo.example.org/{target.name}"  # noqa: F821
