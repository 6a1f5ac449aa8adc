"""Policy resolution: template merging, namespace policy, path handling."""

from shwrap.policy.namespaces import compute_unshare_set, parse_shared_namespaces
from shwrap.policy.paths import expand_path, normalize_bind
from shwrap.policy.resolver import resolve

__all__ = [
    "compute_unshare_set",
    "expand_path",
    "normalize_bind",
    "parse_shared_namespaces",
    "resolve",
]
