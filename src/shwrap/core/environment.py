"""Process environment snapshot.

Path expansion and config discovery take an ``Environment`` instead of
reading ``os.environ`` / ``Path.home()`` themselves, so the resolution
engine stays a pure function of (document, command name, environment).
"""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

__all__ = ["Environment"]


class Environment(BaseModel):
    """Immutable view of home, working directory and variables."""

    model_config = ConfigDict(frozen=True)

    home: Path | None = Field(default=None, description="Home directory")
    cwd: Path = Field(description="Working directory")
    variables: dict[str, str] = Field(default_factory=dict)

    @classmethod
    def capture(cls) -> Environment:
        """Snapshot the current process environment."""
        variables = dict(os.environ)
        home = variables.get("HOME")
        return cls(
            home=Path(home) if home else None,
            cwd=Path.cwd(),
            variables=variables,
        )

    def get(self, name: str) -> str | None:
        return self.variables.get(name)
