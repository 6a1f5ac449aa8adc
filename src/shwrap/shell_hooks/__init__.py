"""Shell integration scripts.

Each hook defines a shell function per enabled command so typing the
command name runs it through ``shwrap command exec``. The function set is
refreshed whenever the working directory changes.
"""

from __future__ import annotations

from importlib.resources import files

from shwrap.configs.enums import Shell
from shwrap.core.exceptions import ShellHookError

__all__ = ["HOOK_SCRIPTS", "get_hook", "parse_shell"]

HOOK_SCRIPTS: dict[Shell, str | None] = {
    Shell.BASH: "bash_hook.sh",
    Shell.ZSH: "zsh_hook.sh",
    Shell.FISH: None,
    Shell.NUSHELL: None,
}


def parse_shell(name: str) -> Shell:
    """Raises ShellHookError for shells shwrap does not know."""
    try:
        return Shell(name.strip().lower())
    except ValueError:
        raise ShellHookError(f"Unsupported shell: {name}") from None


def get_hook(shell: Shell) -> str:
    """Return the hook script text for a shell.

    Raises:
        ShellHookError: If no hook exists for the shell yet.
    """
    script = HOOK_SCRIPTS.get(shell)
    if script is None:
        raise ShellHookError(f"No hook found for shell {shell.value}")
    return files(__package__).joinpath(script).read_text()
