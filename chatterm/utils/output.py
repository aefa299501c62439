"""Shared console output utilities."""

import sys

from rich.console import Console

# Shared console instance for all CLI output
console = Console(stderr=True)


def is_non_interactive() -> bool:
    """Return True when stdin is not a TTY (piped input, CI, ...)."""
    return not sys.stdin.isatty()
