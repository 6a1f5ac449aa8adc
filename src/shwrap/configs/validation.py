"""Strict checks behind ``shwrap config check``.

Resolution and argument building tolerate unknown namespaces, bad bind
specs and missing templates. This module reports them instead.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, Field

from shwrap.configs.enums import NamespaceKind
from shwrap.configs.policy import PolicyDocument, TemplatePolicy
from shwrap.core.environment import Environment
from shwrap.core.exceptions import BindFormatError
from shwrap.policy.namespaces import parse_namespace
from shwrap.policy.paths import normalize_bind

__all__ = ["ConfigIssue", "IssueLevel", "validate_document"]


class IssueLevel(StrEnum):
    ERROR = "error"
    WARNING = "warning"


class ConfigIssue(BaseModel):
    """One problem found in a policy document."""

    level: IssueLevel
    location: str = Field(description="e.g. 'commands.node.bind'")
    message: str

    def __str__(self) -> str:
        return f"{self.location}: {self.message}"


def _check_fragment(
    location: str, policy: TemplatePolicy, environment: Environment
) -> list[ConfigIssue]:
    issues = []
    for name in policy.shared_namespaces:
        if parse_namespace(name) is None:
            issues.append(
                ConfigIssue(
                    level=IssueLevel.ERROR,
                    location=f"{location}.share",
                    message=(
                        f"unknown namespace '{name}' "
                        f"(expected one of: {', '.join(NamespaceKind)})"
                    ),
                )
            )
    for spec in policy.bind:
        try:
            normalize_bind(spec, environment)
        except BindFormatError as e:
            issues.append(
                ConfigIssue(
                    level=IssueLevel.ERROR, location=f"{location}.bind", message=str(e)
                )
            )
    return issues


def validate_document(
    document: PolicyDocument, environment: Environment
) -> list[ConfigIssue]:
    """Collect every issue in document order, templates first."""
    issues: list[ConfigIssue] = []

    for name, template in document.templates.items():
        issues.extend(_check_fragment(f"templates.{name}", template, environment))

    used_templates = set()
    for name, command in document.commands.items():
        location = f"commands.{name}"
        issues.extend(_check_fragment(location, command, environment))

        if command.extends is not None:
            used_templates.add(command.extends)
            if command.extends not in document.templates:
                issues.append(
                    ConfigIssue(
                        level=IssueLevel.ERROR,
                        location=f"{location}.extends",
                        message=f"template '{command.extends}' is not defined",
                    )
                )

        for key in command.env_unset:
            if key in command.env_set:
                issues.append(
                    ConfigIssue(
                        level=IssueLevel.WARNING,
                        location=f"{location}.unset_env",
                        message=f"'{key}' is both set and unset, it will be unset",
                    )
                )

    for name in document.templates:
        if name not in used_templates:
            issues.append(
                ConfigIssue(
                    level=IssueLevel.WARNING,
                    location=f"templates.{name}",
                    message="template is not used by any command",
                )
            )

    return issues
