"""Handlers for ``shwrap config ...``."""

from __future__ import annotations

from pathlib import Path

from shwrap.cli.context import Context
from shwrap.cli.theme import console, err_console
from shwrap.configs import ConfigLoader
from shwrap.configs.validation import IssueLevel, validate_document
from shwrap.core.constants import CONFIG_FILE_NAME
from shwrap.core.exceptions import ConfigInitError, ConfigNotFoundError
from shwrap.templates import get_template


def handle_init(args, context: Context) -> int:
    """Write a starter policy file into the working directory."""
    content = get_template(args.template)
    target = context.environment.cwd / CONFIG_FILE_NAME
    if target.exists():
        raise ConfigInitError(f"{CONFIG_FILE_NAME} already exists in {target.parent}")

    try:
        target.write_text(content)
    except OSError as e:
        raise ConfigInitError(f"Failed to write {target}: {e.strerror or e}") from e

    console.print(f"Created {CONFIG_FILE_NAME} configuration file", style="success")
    return 0


def handle_check(args, context: Context) -> int:
    """Parse and validate a policy file; exit 1 on any error."""
    if args.path:
        path = Path(args.path)
        if not path.is_absolute():
            path = context.environment.cwd / path
        if not path.is_file():
            raise ConfigNotFoundError(f"Configuration file not found: {path}")
    else:
        path = context.loader.require_config()

    document = ConfigLoader.from_file(path)
    issues = validate_document(document, context.environment)
    errors = [issue for issue in issues if issue.level == IssueLevel.ERROR]

    if args.silent:
        return 1 if errors else 0

    for issue in issues:
        style = "error" if issue.level == IssueLevel.ERROR else "warning"
        err_console.print(f"{issue.level.value}: {issue}", style=style, markup=False)

    if errors:
        err_console.print(
            f"Configuration is invalid: {path} ({len(errors)} error(s))",
            style="error",
            markup=False,
        )
        return 1

    console.print(f"Configuration is valid: {path}", markup=False)
    console.print(f"Found {len(document.commands)} command(s)")
    for name, command in document.commands.items():
        suffix = "" if command.enabled else " (disabled)"
        console.print(f"  - {name}{suffix}", markup=False)
    return 0


def handle_which(args, context: Context) -> int:
    """Print the policy file that applies to the working directory."""
    path = context.loader.find_config()
    if path is None:
        console.print(f"No {CONFIG_FILE_NAME} configuration found")
        return 1
    print(path)
    return 0
