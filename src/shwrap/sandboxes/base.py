"""Sandbox launcher base class."""

from __future__ import annotations

import shlex
import subprocess
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from shwrap.core.constants import DEFAULT_FAILURE_EXIT_CODE
from shwrap.core.exceptions import SandboxLaunchError
from shwrap.core.logging import get_logger

if TYPE_CHECKING:
    from shwrap.configs import EffectivePolicy
    from shwrap.core.environment import Environment


logger = get_logger(__name__)


class Sandbox(ABC):
    """Turns an effective policy into a launcher command line."""

    # Subclasses should override these
    sandbox_name: str = "sandbox"
    default_binary: str = "sandbox"

    def __init__(
        self,
        policy: EffectivePolicy,
        environment: Environment,
        binary: str | None = None,
    ):
        self.policy = policy
        self.environment = environment
        self.binary = binary or self.default_binary

    @abstractmethod
    def build_args(self) -> list[str]:
        """Build launcher arguments; the wrapped command is appended later."""

    def command_line(self, command: str, args: list[str]) -> list[str]:
        """Full argv: launcher, its arguments, wrapped command and its args."""
        return [self.binary, *self.build_args(), command, *args]

    def show(self, command: str, args: list[str]) -> str:
        """Render the command line as a single shell-quoted string."""
        return shlex.join(self.command_line(command, args))

    def exec(self, command: str, args: list[str]) -> int:
        """Run the wrapped command and wait for it.

        Returns:
            The child's exit code, or 1 if it was killed by a signal.

        Raises:
            SandboxLaunchError: If the launcher cannot be started.
        """
        argv = self.command_line(command, args)
        logger.debug(f"Executing in {self.sandbox_name}: {shlex.join(argv)}")

        try:
            completed = subprocess.run(argv, check=False)
        except OSError as e:
            raise SandboxLaunchError(
                f"Failed to execute {self.binary}: {e.strerror or e}"
            ) from e

        if completed.returncode < 0:
            logger.debug(
                f"{command} terminated by signal {-completed.returncode}"
            )
            return DEFAULT_FAILURE_EXIT_CODE
        return completed.returncode
