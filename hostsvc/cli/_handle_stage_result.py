"""Decorator to handle StageResult for CLI display."""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import TypeVar

import click
import typer

from .display.CLIDisplay import CLIDisplay

F = TypeVar("F", bound=Callable)


def _extract_display_format() -> str:
    """Get the display format from the active Typer/Click context, defaulting to yaml."""
    current: click.Context | None = click.get_current_context(silent=True)
    while current is not None:
        obj = current.obj
        if isinstance(obj, dict) and obj.get("display_format") in ("json", "yaml"):
            return obj["display_format"]
        current = current.parent
    return "yaml"


def _handle_stage_result(func: F) -> F:
    """Wrap a command function to handle StageResult for CLI display.

    This wrapper handles the 4-stage pattern for CLI:
    1. Announce (print to stderr)
    2. Progress (print to stderr)
    3. Result (print to stderr)
    4. Output (print to stdout as JSON or YAML)

    Exits with 0 on success and 1 otherwise.
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        display = CLIDisplay()
        display_format = _extract_display_format()

        result = func(*args, **kwargs)

        # Stage 1: Announce
        display.status(result.announce)

        # Stage 2: Progress
        for progress_percent, message in result.progress_callback(result):
            display.info(f"[dim]Progress:[/dim] {message} ({progress_percent:.0%})")

        if not result.result:
            raise ValueError("progress_callback must set result.result to a non-empty string")

        # Stage 3: Result
        if result.success:
            display.success(result.result)
        else:
            display.error(result.result)

        # Stage 4: Output
        display.json_output(result.output, format=display_format)

        raise typer.Exit(0 if result.success else 1)

    return wrapper  # type: ignore[return-value]
