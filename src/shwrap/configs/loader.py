"""Policy file discovery and parsing."""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import ValidationError

from shwrap.configs.policy import PolicyDocument
from shwrap.core.constants import (
    CONFIG_FILE_NAME,
    USER_CONFIG_DIR,
    USER_CONFIG_FILE_NAME,
)
from shwrap.core.environment import Environment
from shwrap.core.exceptions import ConfigNotFoundError, ConfigParseError
from shwrap.core.logging import get_logger

__all__ = ["ConfigLoader", "parse_document"]

logger = get_logger(__name__)


def parse_document(content: str, path: Path | None = None) -> PolicyDocument:
    """Parse YAML text into a policy document.

    Raises:
        ConfigParseError: If the text is not YAML or does not fit the schema.
    """
    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigParseError(path, str(e)) from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigParseError(
            path, f"top-level value must be a mapping, got {type(data).__name__}"
        )

    try:
        return PolicyDocument.model_validate(data)
    except ValidationError as e:
        raise ConfigParseError(path, str(e)) from e


class ConfigLoader:
    """Locates and loads the policy file for an environment.

    Search order: explicit path, ``.shwrap.yaml`` in the working directory
    or its nearest ancestor, then the user-level default file.
    """

    def __init__(self, environment: Environment, explicit_path: Path | None = None):
        self.environment = environment
        self.explicit_path = explicit_path

    def find_local_config(self) -> Path | None:
        """Find .shwrap.yaml in the working directory or a parent."""
        directory = self.environment.cwd
        for candidate_dir in (directory, *directory.parents):
            candidate = candidate_dir / CONFIG_FILE_NAME
            if candidate.is_file():
                return candidate
        return None

    def user_config_path(self) -> Path | None:
        xdg_config_home = self.environment.get("XDG_CONFIG_HOME")
        if xdg_config_home:
            return Path(xdg_config_home) / USER_CONFIG_DIR.name / USER_CONFIG_FILE_NAME
        if self.environment.home is None:
            return None
        return self.environment.home / USER_CONFIG_DIR / USER_CONFIG_FILE_NAME

    def find_user_config(self) -> Path | None:
        """Find the user-level default policy file."""
        path = self.user_config_path()
        if path is not None and path.is_file():
            return path
        return None

    def find_config(self) -> Path | None:
        """Return the policy file that applies, or None.

        Raises:
            ConfigNotFoundError: If an explicit path was given but is missing.
        """
        if self.explicit_path is not None:
            path = self.explicit_path
            if path.parts and path.parts[0] == "~" and self.environment.home:
                path = self.environment.home.joinpath(*path.parts[1:])
            if not path.is_absolute():
                path = self.environment.cwd / path
            if not path.is_file():
                raise ConfigNotFoundError(f"Configuration file not found: {path}")
            return path

        return self.find_local_config() or self.find_user_config()

    def require_config(self) -> Path:
        path = self.find_config()
        if path is None:
            raise ConfigNotFoundError()
        return path

    @staticmethod
    def from_file(path: Path) -> PolicyDocument:
        """Load a policy document from a file.

        Raises:
            ConfigParseError: If the file cannot be read or parsed.
        """
        try:
            content = path.read_text()
        except OSError as e:
            raise ConfigParseError(path, e.strerror or str(e)) from e

        logger.debug(f"Loading policy from {path}")
        return parse_document(content, path)

    def load(self) -> tuple[Path, PolicyDocument]:
        """Locate and parse the applicable policy file.

        Raises:
            ConfigNotFoundError: If no policy file exists.
            ConfigParseError: If the file is malformed.
        """
        path = self.require_config()
        return path, self.from_file(path)
