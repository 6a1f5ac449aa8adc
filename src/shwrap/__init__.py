"""shwrap: profile manager for Bubblewrap (bwrap)."""

__version__ = "0.3.0"
