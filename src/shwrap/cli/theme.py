"""Console instances for CLI output."""

from rich.console import Console
from rich.theme import Theme

theme = Theme(
    {
        "command": "bold cyan",
        "muted": "dim",
        "success": "green",
        "warning": "yellow",
        "error": "bold red",
    }
)

console = Console(theme=theme, soft_wrap=True)
err_console = Console(theme=theme, stderr=True, soft_wrap=True)
