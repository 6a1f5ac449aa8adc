"""Bubblewrap (bwrap) argument assembly."""

from __future__ import annotations

from shwrap.core.constants import DEFAULT_SANDBOX_BINARY
from shwrap.core.exceptions import BindFormatError
from shwrap.core.logging import get_logger
from shwrap.policy.namespaces import compute_unshare_set, parse_shared_namespaces
from shwrap.policy.paths import expand_path, normalize_bind
from shwrap.sandboxes.base import Sandbox

logger = get_logger(__name__)


class BubblewrapSandbox(Sandbox):
    """Wraps commands with bwrap (Linux only)."""

    sandbox_name = "bubblewrap"
    default_binary = DEFAULT_SANDBOX_BINARY

    def _expand(self, path: str) -> str:
        return expand_path(path, self.environment)

    def build_args(self) -> list[str]:
        """Build bwrap arguments from the effective policy.

        Emission order is fixed, bwrap applies mounts in argument order:
        - --unshare-* for every namespace not shared (default-deny)
        - --bind for custom binds; malformed specs are skipped with a warning
        - --ro-bind, --dev-bind (same path inside and out)
        - --tmpfs
        - --setenv, then --unsetenv
        """
        policy = self.policy
        bwrap_args: list[str] = []

        shared = parse_shared_namespaces(policy.shared_namespaces)
        for namespace in compute_unshare_set(shared):
            bwrap_args.append(namespace.unshare_flag)

        for spec in policy.bind:
            try:
                source, dest = normalize_bind(spec, self.environment)
            except BindFormatError as e:
                logger.warning(f"Skipping bind: {e}")
                continue
            bwrap_args.extend(["--bind", source, dest])

        for path in policy.read_only_bind:
            expanded = self._expand(path)
            bwrap_args.extend(["--ro-bind", expanded, expanded])

        for path in policy.device_bind:
            expanded = self._expand(path)
            bwrap_args.extend(["--dev-bind", expanded, expanded])

        for path in policy.tmpfs_mounts:
            bwrap_args.extend(["--tmpfs", self._expand(path)])

        for key, value in policy.env_set.items():
            bwrap_args.extend(["--setenv", key, value])

        for key in policy.env_unset:
            bwrap_args.extend(["--unsetenv", key])

        return bwrap_args
