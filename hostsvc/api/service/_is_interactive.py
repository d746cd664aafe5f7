"""Detect whether the process is attached to an interactive terminal."""

import sys


def is_interactive() -> bool:
    """True when stdout is a TTY, i.e. the program was not started by a service manager."""
    try:
        return sys.stdout.isatty()
    except (AttributeError, ValueError):
        return False
