"""Sandbox policy configuration models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

__all__ = [
    "CommandPolicy",
    "EffectivePolicy",
    "PolicyDocument",
    "TemplatePolicy",
]


def _none_as_empty(value: Any) -> Any:
    # An empty YAML key ("bind:") parses as None
    return () if value is None else value


class PolicyModel(BaseModel):
    """Base for policy models: immutable, YAML keys as aliases."""

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)


class TemplatePolicy(PolicyModel):
    """Reusable policy fragment inherited through ``extends``."""

    shared_namespaces: tuple[str, ...] = Field(
        default=(),
        alias="share",
        description="Namespaces NOT isolated from the host",
    )
    bind: tuple[str, ...] = Field(
        default=(), description="Read-write bind mounts as 'source:dest'"
    )
    read_only_bind: tuple[str, ...] = Field(
        default=(),
        alias="ro_bind",
        description="Paths mounted read-only at the same location",
    )

    @field_validator("shared_namespaces", "bind", "read_only_bind", mode="before")
    @classmethod
    def _empty_sequences(cls, value: Any) -> Any:
        return _none_as_empty(value)


class EffectivePolicy(TemplatePolicy):
    """Fully merged policy for one command, ready for argument synthesis."""

    enabled: bool = Field(default=True, description="Whether the command is wrapped")
    device_bind: tuple[str, ...] = Field(
        default=(), alias="dev_bind", description="Device nodes bound as-is"
    )
    tmpfs_mounts: tuple[str, ...] = Field(
        default=(), alias="tmpfs", description="Paths mounted as fresh tmpfs"
    )
    env_set: dict[str, str] = Field(
        default_factory=dict,
        alias="env",
        description="Environment variables set inside the sandbox",
    )
    env_unset: tuple[str, ...] = Field(
        default=(),
        alias="unset_env",
        description="Environment variables removed inside the sandbox",
    )

    @field_validator("device_bind", "tmpfs_mounts", "env_unset", mode="before")
    @classmethod
    def _empty_command_sequences(cls, value: Any) -> Any:
        return _none_as_empty(value)

    @field_validator("env_set", mode="before")
    @classmethod
    def _stringify_env(cls, value: Any) -> Any:
        """YAML turns ``DEBUG: true`` into a bool; bwrap needs text."""
        if value is None:
            return {}
        if not isinstance(value, dict):
            return value
        result = {}
        for key, item in value.items():
            if item is None:
                raise ValueError(f"environment variable '{key}' has no value")
            if isinstance(item, (list, dict)):
                raise ValueError(f"environment variable '{key}' must be a scalar")
            if isinstance(item, bool):
                item = "true" if item else "false"
            result[str(key)] = item if isinstance(item, str) else str(item)
        return result


class CommandPolicy(EffectivePolicy):
    """Policy for one wrapped command, as written in the document."""

    extends: str | None = Field(
        default=None, description="Name of the template to inherit from"
    )


class PolicyDocument(PolicyModel):
    """Parsed policy file: wrapped commands plus reusable templates."""

    commands: dict[str, CommandPolicy] = Field(default_factory=dict)
    templates: dict[str, TemplatePolicy] = Field(default_factory=dict)

    @field_validator("commands", "templates", mode="before")
    @classmethod
    def _empty_entries(cls, value: Any) -> Any:
        if value is None:
            return {}
        if isinstance(value, dict):
            # "node:" with no body means "wrap with defaults"
            return {str(k): {} if v is None else v for k, v in value.items()}
        return value

    def get_command(self, name: str) -> CommandPolicy | None:
        return self.commands.get(name)

    def enabled_commands(self) -> dict[str, CommandPolicy]:
        return {name: cmd for name, cmd in self.commands.items() if cmd.enabled}
