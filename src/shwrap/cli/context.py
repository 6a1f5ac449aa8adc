"""Per-invocation state shared by CLI handlers."""

from __future__ import annotations

from pathlib import Path

from shwrap.configs import ConfigLoader, PolicyDocument
from shwrap.core.environment import Environment
from shwrap.core.settings import Settings


class Context:
    """Settings plus an environment snapshot taken once at startup."""

    def __init__(
        self,
        settings: Settings,
        environment: Environment,
        config_path: Path | None = None,
    ):
        self.settings = settings
        self.environment = environment
        # --config wins over SHWRAP_CONFIG
        self.config_path = config_path or settings.config

    @classmethod
    def create(cls, settings: Settings, config_path: Path | None = None) -> Context:
        return cls(settings, Environment.capture(), config_path)

    @property
    def loader(self) -> ConfigLoader:
        return ConfigLoader(self.environment, self.config_path)

    def load_document(self) -> tuple[Path, PolicyDocument]:
        """Raises ConfigNotFoundError or ConfigParseError."""
        return self.loader.load()
