"""CLI entry point."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from shwrap import __version__
from shwrap.cli.context import Context
from shwrap.cli.handlers import command, config, shell_hook
from shwrap.cli.theme import err_console
from shwrap.configs.enums import Shell
from shwrap.core.constants import APP_NAME, INTERRUPTED_EXIT_CODE
from shwrap.core.exceptions import ShwrapError
from shwrap.core.logging import configure_logging, get_logger
from shwrap.core.settings import get_settings
from shwrap.templates import PROJECT_TEMPLATES

logger = get_logger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Build the ``shwrap <subject> <action>`` argument parser."""
    parser = argparse.ArgumentParser(
        prog=APP_NAME,
        description="A profile manager for Bubblewrap (bwrap)",
    )
    parser.add_argument("--version", action="version", version=__version__)
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        default=None,
        help="Policy file to use instead of searching for .shwrap.yaml",
    )
    subjects = parser.add_subparsers(dest="subject", required=True)

    # config
    config_parser = subjects.add_parser("config", help="Manage policy files")
    config_actions = config_parser.add_subparsers(dest="action", required=True)

    init_parser = config_actions.add_parser(
        "init", help="Create a .shwrap.yaml in the current directory"
    )
    init_parser.add_argument(
        "-t", "--template", choices=PROJECT_TEMPLATES, help="Project type"
    )
    init_parser.set_defaults(handler=config.handle_init)

    check_parser = config_actions.add_parser(
        "check", help="Validate configuration syntax"
    )
    check_parser.add_argument(
        "path", nargs="?", help="Policy file (defaults to searching hierarchy)"
    )
    check_parser.add_argument(
        "--silent", action="store_true", help="No output, only the exit code"
    )
    check_parser.set_defaults(handler=config.handle_check)

    which_parser = config_actions.add_parser(
        "which", help="Show which .shwrap.yaml would be used"
    )
    which_parser.set_defaults(handler=config.handle_which)

    # command
    command_parser = subjects.add_parser("command", help="Run wrapped commands")
    command_actions = command_parser.add_subparsers(dest="action", required=True)

    list_parser = command_actions.add_parser("list", help="List enabled commands")
    list_parser.add_argument(
        "--simple", action="store_true", help="Names only, one per line"
    )
    list_parser.set_defaults(handler=command.handle_list)

    for action, handler, help_text in (
        ("exec", command.handle_exec, "Run a command inside bwrap"),
        ("show", command.handle_show, "Print the bwrap command line"),
    ):
        action_parser = command_actions.add_parser(action, help=help_text)
        action_parser.add_argument("command", help="Configured command name")
        action_parser.add_argument(
            "args", nargs=argparse.REMAINDER, help="Arguments for the command"
        )
        action_parser.set_defaults(handler=handler)

    # shell-hook
    hook_parser = subjects.add_parser("shell-hook", help="Shell integration")
    hook_actions = hook_parser.add_subparsers(dest="action", required=True)
    get_parser = hook_actions.add_parser("get", help="Print the hook script")
    get_parser.add_argument("shell", help=f"One of: {', '.join(Shell)}")
    get_parser.set_defaults(handler=shell_hook.handle_get)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Parse arguments, dispatch to a handler and return its exit code."""
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        settings = get_settings()
    except ValidationError as e:
        err_console.print(
            f"Error: invalid SHWRAP_* setting: {e}", style="error", markup=False
        )
        return 1
    configure_logging(logging.DEBUG if args.verbose else settings.log_level)

    try:
        context = Context.create(settings, args.config)
        return args.handler(args, context)
    except ShwrapError as e:
        logger.debug("Command failed", exc_info=True)
        err_console.print(f"Error: {e}", style="error", markup=False)
        return 1
    except KeyboardInterrupt:
        return INTERRUPTED_EXIT_CODE


def cli() -> None:
    """Console script entry point."""
    sys.exit(main())
