"""Example of configuring a set of projects with plugins and scripts.

This example defines a minimal plugin-aware `Project` class and a plugin, and
then uses an `ObjectConfigurationAction` to apply the plugin, by id, and a
configuration script to all projects. It shows how to register plugins, how
default targets are used, and how the post-apply hook reports each plugin
application.
"""

from pathlib import Path
from typing import Any

from objconf import ObjectConfigurationAction, PluginApplication
from objconf.plugins import Plugin, PluginAware, PluginContainer, PluginManager
from objconf.scripts import IsolationScope, PythonScriptLoader

SCRIPTS = Path(__file__).parent / "scripts"


class Project(PluginAware):
    """A project that can be configured by plugins and scripts."""

    def __init__(self, name: str, plugin_manager: PluginManager) -> None:
        """Initialize a project.

        Args:
            name:           The name of the project.
            plugin_manager: Used to find plugins by id.
        """
        self.name = name
        self.settings: dict[str, Any] = {}
        self._plugins = PluginContainer(self, plugin_manager)

    @property
    def plugins(self) -> PluginContainer:
        """Return the plugins of the project."""
        return self._plugins

    def __str__(self) -> str:
        return f"project '{self.name}'"


class CompilePlugin(Plugin):
    """Plugin adding compilation settings."""

    def apply(self, target: Any) -> None:  # noqa: ANN401
        """Apply the plugin.

        Args:
            target: The project to configure.
        """
        target.settings["source_dir"] = f"{target.name}/src"


def report(application: PluginApplication) -> None:
    """Report a plugin application.

    Args:
        application: The plugin application.
    """
    print(f"  applied {type(application.plugin).__name__} to {application.target}")


def configure(names: list[str]) -> list[Project]:
    """Configure projects.

    Args:
        names: The names of the projects.

    Returns:
        The configured projects.
    """
    plugin_manager = PluginManager()
    plugin_manager.add_plugin("compile", CompilePlugin)
    projects = [Project(name, plugin_manager) for name in names]

    ObjectConfigurationAction(
        PythonScriptLoader({"base_dir": SCRIPTS}),
        IsolationScope("example"),
        projects,
        post_apply=report,
    ).plugin("compile").from_("publishing.py").execute()

    for project in projects:
        print(f"  {project}: {project.settings}")
    return projects


def main() -> None:
    """Run the example and check the result."""
    projects = configure(["core", "app"])
    assert [project.settings for project in projects] == [
        {
            "source_dir": "core/src",
            "publish": True,
            "repository": "https://repo.example.org/core",
        },
        {
            "source_dir": "app/src",
            "publish": True,
            "repository": "https://repo.example.org/app",
        },
    ]


if __name__ == "__main__":
    main()
