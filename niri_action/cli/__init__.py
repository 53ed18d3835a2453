"""CLI for niri-action."""

from .commands import cli, main

__all__ = ["cli", "main"]
