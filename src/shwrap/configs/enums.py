"""Enum types for configuration."""

from enum import StrEnum

__all__ = [
    "NamespaceKind",
    "Shell",
]


class NamespaceKind(StrEnum):
    """Kernel namespaces bwrap can unshare.

    Declaration order is the emission order of ``--unshare-*`` flags.
    """

    USER = "user"
    PID = "pid"
    NETWORK = "network"
    IPC = "ipc"
    UTS = "uts"
    CGROUP = "cgroup"

    @property
    def unshare_flag(self) -> str:
        # bwrap abbreviates the network namespace
        if self is NamespaceKind.NETWORK:
            return "--unshare-net"
        return f"--unshare-{self.value}"


class Shell(StrEnum):
    """Shells shwrap knows about."""

    BASH = "bash"
    ZSH = "zsh"
    FISH = "fish"
    NUSHELL = "nushell"
