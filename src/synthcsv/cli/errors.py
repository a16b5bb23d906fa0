"""CLI error handling for synthcsv.

This module maps synthcsv exceptions to user-facing messages and exit codes.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, NoReturn

from pydantic import ValidationError as PydanticValidationError

from synthcsv.cli.output import error
from synthcsv.errors import (
    InvalidFieldSelectionError,
    InvalidRequestError,
    SynthCsvError,
)

if TYPE_CHECKING:
    from pydantic_core import ErrorDetails


# Exit codes following sysexits.h convention
EXIT_SUCCESS = 0
EXIT_USER_ERROR = 1  # User error (invalid flags, invalid fields)
EXIT_SYSTEM_ERROR = 2  # System error (directory/file creation, write failure)


def format_pydantic_error(err: PydanticValidationError) -> str:
    """Format Pydantic validation error into user-friendly message.

    Args:
        err: Pydantic ValidationError instance.

    Returns:
        Formatted error message with field paths and issues.

    Example:
        >>> format_pydantic_error(err)
        "Validation failed:\\n  - default_rows: Input should be a valid integer..."
    """
    errors: list[ErrorDetails] = err.errors()
    lines = ["Validation failed:"]

    for e in errors:
        loc = ".".join(str(x) for x in e["loc"])
        msg = e["msg"]
        lines.append(f"  - {loc}: {msg}")

    return "\n".join(lines)


def describe_error(err: SynthCsvError) -> tuple[str, int]:
    """Return the message and exit code to report for ``err``.

    Args:
        err: Any synthcsv exception.

    Returns:
        Tuple of (message, exit code).
    """
    if isinstance(err, InvalidRequestError):
        return f"Invalid flags: {err.user_message}", EXIT_USER_ERROR
    if isinstance(err, InvalidFieldSelectionError):
        return err.user_message, EXIT_USER_ERROR
    return f"Failed to generate CSV data: {err.user_message}", EXIT_SYSTEM_ERROR


def exit_with_error(message: str, exit_code: int = EXIT_USER_ERROR) -> NoReturn:
    """Exit the CLI with an error message.

    Args:
        message: Error message to display.
        exit_code: Exit code for the CLI.

    Note:
        This function never returns - it always calls sys.exit().
    """
    error(message)
    sys.exit(exit_code)
