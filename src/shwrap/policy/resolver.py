"""Template inheritance for command policies."""

from __future__ import annotations

from collections.abc import Iterable

from shwrap.configs.policy import CommandPolicy, EffectivePolicy, PolicyDocument
from shwrap.core.logging import get_logger

__all__ = ["resolve"]

logger = get_logger(__name__)


def _union(*groups: Iterable[str]) -> tuple[str, ...]:
    """Concatenate keeping first occurrences only."""
    return tuple(dict.fromkeys(item for group in groups for item in group))


def resolve(document: PolicyDocument, command: CommandPolicy) -> EffectivePolicy:
    """Merge the command's template (if any) into an effective policy.

    Template entries come first. A template name that does not exist is
    ignored rather than raised, use ``config check`` to catch it.
    """
    fields = command.model_dump(exclude={"extends"})

    if command.extends is None:
        return EffectivePolicy(**fields)

    template = document.templates.get(command.extends)
    if template is None:
        logger.debug(
            f"Template '{command.extends}' not found, using command policy as-is"
        )
        return EffectivePolicy(**fields)

    fields["shared_namespaces"] = _union(
        template.shared_namespaces, command.shared_namespaces
    )
    fields["bind"] = template.bind + command.bind
    fields["read_only_bind"] = template.read_only_bind + command.read_only_bind
    return EffectivePolicy(**fields)
