"""Default-deny namespace policy.

Every namespace is unshared from the host unless the policy lists it as
shared, so each relaxation is explicit in the policy file.
"""

from __future__ import annotations

from collections.abc import Iterable

from shwrap.configs.enums import NamespaceKind
from shwrap.core.logging import get_logger

__all__ = ["compute_unshare_set", "parse_namespace", "parse_shared_namespaces"]

logger = get_logger(__name__)


def parse_namespace(name: str) -> NamespaceKind | None:
    """Map a configured name to a namespace, or None if unknown."""
    try:
        return NamespaceKind(name.strip().lower())
    except ValueError:
        return None


def parse_shared_namespaces(names: Iterable[str]) -> set[NamespaceKind]:
    """Interpret ``share`` entries; unknown names are warned about and dropped."""
    shared: set[NamespaceKind] = set()
    for name in names:
        namespace = parse_namespace(name)
        if namespace is None:
            logger.warning(
                f"Ignoring unknown namespace '{name}' "
                f"(expected one of: {', '.join(NamespaceKind)})"
            )
            continue
        shared.add(namespace)
    return shared


def compute_unshare_set(shared: Iterable[NamespaceKind]) -> list[NamespaceKind]:
    """Namespaces to isolate, in declaration order."""
    shared = set(shared)
    return [namespace for namespace in NamespaceKind if namespace not in shared]
