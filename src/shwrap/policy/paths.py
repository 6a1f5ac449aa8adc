"""Shell-style path expansion and bind spec parsing."""

from __future__ import annotations

import re

from shwrap.core.environment import Environment
from shwrap.core.exceptions import BindFormatError

__all__ = ["expand_path", "normalize_bind"]

_VARIABLE_PATTERN = re.compile(
    r"\$(?:\{(?P<braced>[A-Za-z_][A-Za-z0-9_]*)\}|(?P<bare>[A-Za-z_][A-Za-z0-9_]*))"
)


class _UndefinedVariable(LookupError):
    pass


def _expand_variables(path: str, environment: Environment) -> str:
    def substitute(match: re.Match[str]) -> str:
        name = match.group("braced") or match.group("bare")
        value = environment.get(name)
        if value is None:
            raise _UndefinedVariable(name)
        return value

    return _VARIABLE_PATTERN.sub(substitute, path)


def expand_path(path: str, environment: Environment) -> str:
    """Expand a leading ``~`` and ``$VAR`` / ``${VAR}`` references.

    If anything cannot be expanded the original string is returned
    untouched; bwrap then reports the bad path itself.
    """
    try:
        if path != "~" and not path.startswith("~/"):
            return _expand_variables(path, environment)
        if environment.home is None:
            raise _UndefinedVariable("HOME")
        # The home directory itself is inserted verbatim
        return str(environment.home) + _expand_variables(path[1:], environment)
    except _UndefinedVariable:
        return path


def normalize_bind(spec: str, environment: Environment) -> tuple[str, str]:
    """Split ``source:dest`` and expand both sides.

    Raises:
        BindFormatError: Unless the spec has exactly two non-empty parts.
    """
    parts = spec.split(":")
    if len(parts) != 2 or not all(part.strip() for part in parts):
        raise BindFormatError(spec)
    source, dest = (part.strip() for part in parts)
    return expand_path(source, environment), expand_path(dest, environment)
