"""Application-wide constants."""

from pathlib import Path

APP_NAME = "shwrap"

CONFIG_FILE_NAME = ".shwrap.yaml"
USER_CONFIG_DIR = Path(".config") / APP_NAME
USER_CONFIG_FILE_NAME = "default.yaml"

DEFAULT_SANDBOX_BINARY = "bwrap"

# Exit code when the wrapped process reports none (e.g. killed by a signal)
DEFAULT_FAILURE_EXIT_CODE = 1
INTERRUPTED_EXIT_CODE = 130
