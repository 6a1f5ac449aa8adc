"""shwrap exception hierarchy.

Fatal errors derive from ``ShwrapError`` and are reported by the CLI
before any process is spawned. ``BindFormatError`` is the only one the
argument assembler recovers from locally.
"""

from pathlib import Path


class ShwrapError(Exception):
    """Base exception for all shwrap errors."""


class ConfigNotFoundError(ShwrapError):
    """No policy document found in the search hierarchy."""

    def __init__(self, message: str = "No .shwrap.yaml configuration found"):
        super().__init__(message)


class ConfigParseError(ShwrapError):
    """Policy document is not valid YAML or does not match the schema."""

    def __init__(self, path: Path | None, reason: str):
        self.path = path
        self.reason = reason
        location = f" in {path}" if path else ""
        super().__init__(f"Failed to parse configuration{location}: {reason}")


class CommandNotConfiguredError(ShwrapError):
    """Requested command is absent from the document."""

    def __init__(self, command: str):
        self.command = command
        super().__init__(f"No configuration found for command '{command}'")


class CommandDisabledError(ShwrapError):
    """Requested command has ``enabled: false``."""

    def __init__(self, command: str):
        self.command = command
        super().__init__(f"Command '{command}' is disabled in configuration")


class BindFormatError(ShwrapError):
    """Bind spec is not of the form ``source:dest``."""

    def __init__(self, spec: str):
        self.spec = spec
        super().__init__(f"invalid bind format '{spec}', expected 'source:dest'")


class SandboxLaunchError(ShwrapError):
    """Sandbox binary could not be started."""


class ShellHookError(ShwrapError):
    """Unsupported shell or shell without a hook script."""


class ConfigInitError(ShwrapError):
    """Starter config could not be written."""
