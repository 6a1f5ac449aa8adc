"""Handler for ``shwrap shell-hook get``."""

from __future__ import annotations

import sys

from shwrap.cli.context import Context
from shwrap.shell_hooks import get_hook, parse_shell


def handle_get(args, context: Context) -> int:
    """Print the integration script for a shell."""
    hook = get_hook(parse_shell(args.shell))
    sys.stdout.write(hook)
    return 0
