"""Rich console output utilities for synthcsv.

This module provides formatted console output with Rich, supporting
colored error messages and plain report lines, respecting the NO_COLOR
environment variable.

Messages are printed without markup interpretation, highlighting or
wrapping, since report lines are consumed by scripts.
"""

from __future__ import annotations

import os
from typing import Any

from rich.console import Console
from rich.markup import escape

# Rich automatically respects NO_COLOR, but we also support --no-color flag
_force_no_color = os.environ.get("NO_COLOR") is not None


def create_console(no_color: bool = False) -> Console:
    """Create a Rich Console instance with appropriate color settings.

    Args:
        no_color: If True, disable colored output. Also respects NO_COLOR env var.

    Returns:
        Configured Console instance.
    """
    force_terminal = None
    if no_color or _force_no_color:
        force_terminal = False
    return Console(
        force_terminal=force_terminal,
        no_color=no_color or _force_no_color,
        highlight=False,
        soft_wrap=True,
    )


# Default console instance
console = create_console()


def error(message: str, **kwargs: Any) -> None:
    """Print an error message with red X.

    Example:
        >>> error("Invalid flags: fields cannot be empty")
        ✗ Invalid flags: fields cannot be empty
    """
    console.print(f"[red]✗[/red] {escape(message)}", **kwargs)


def info(message: str, **kwargs: Any) -> None:
    """Print an informational message verbatim.

    Example:
        >>> info("Generating CSV file...")
        Generating CSV file...
    """
    console.print(message, markup=False, **kwargs)


def set_no_color(no_color: bool) -> None:
    """Update the global console to enable/disable colors.

    Args:
        no_color: If True, disable colored output.

    Note:
        This updates the module-level console instance.
    """
    global console
    console = create_console(no_color=no_color)
