"""Sandbox launchers."""

from shwrap.sandboxes.base import Sandbox
from shwrap.sandboxes.bubblewrap import BubblewrapSandbox

__all__ = [
    "BubblewrapSandbox",
    "Sandbox",
]
