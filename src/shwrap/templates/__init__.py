"""Starter policy files written by ``shwrap config init``."""

from __future__ import annotations

from importlib.resources import files

from shwrap.core.exceptions import ConfigInitError

__all__ = ["PROJECT_TEMPLATES", "get_template"]

DEFAULT_TEMPLATE = "default"

PROJECT_TEMPLATES = ("nodejs", "python", "ruby", "go", "rust")


def get_template(name: str | None = None) -> str:
    """Return starter YAML for a project type, or the generic one.

    Raises:
        ConfigInitError: If the project type is unknown.
    """
    name = name or DEFAULT_TEMPLATE
    if name != DEFAULT_TEMPLATE and name not in PROJECT_TEMPLATES:
        raise ConfigInitError(
            f"Unknown template: {name} (available: {', '.join(PROJECT_TEMPLATES)})"
        )
    return files(__package__).joinpath(f"{name}.yaml").read_text()
