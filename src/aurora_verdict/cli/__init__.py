"""Command-line interface for the aurora verdict engine."""

from aurora_verdict import __version__


__all__ = ["__version__"]
