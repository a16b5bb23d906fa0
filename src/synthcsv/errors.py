"""Custom exception hierarchy for synthcsv.

This module defines the exception classes used throughout synthcsv:
- SynthCsvError: Base exception for all synthcsv errors
- InvalidRequestError: Row count, field list or filename fails a sanity check
- InvalidFieldSelectionError: Field list contains names outside the vocabulary
- OutputSetupError: Output directory or file cannot be created
- WriteError: Header or data row cannot be written

User-facing messages are safe to display. Technical details passed as
``internal_details`` are logged via structlog at debug level and never
shown on the console.
"""

from __future__ import annotations

from collections.abc import Sequence

import structlog

logger = structlog.get_logger(__name__)


class SynthCsvError(Exception):
    """Base exception for synthcsv.

    Args:
        user_message: Safe message to display to the user.
        internal_details: Optional technical details for logging. This is
            logged internally but never exposed to the user.

    Example:
        >>> raise SynthCsvError(
        ...     "failed to create directory: permission denied",
        ...     internal_details="PermissionError(13) on /srv/output",
        ... )
    """

    def __init__(
        self,
        user_message: str,
        *,
        internal_details: str | None = None,
    ) -> None:
        """Initialize SynthCsvError with user message and optional internal details.

        Args:
            user_message: Safe message to display to the user.
            internal_details: Technical details for internal logging only.
        """
        super().__init__(user_message)
        self.user_message = user_message

        if internal_details:
            logger.debug(
                "synthcsv_error",
                error_type=self.__class__.__name__,
                user_message=user_message,
                internal_details=internal_details,
            )


class InvalidRequestError(SynthCsvError):
    """Raised when a generation request fails a basic sanity check.

    Use this exception when:
    - The row count is zero or negative
    - The raw field-list string is empty
    - The output filename is empty

    Example:
        >>> raise InvalidRequestError("invalid number of rows: 0")
    """

    pass


class InvalidFieldSelectionError(SynthCsvError):
    """Raised when the field list contains names outside the vocabulary.

    The message lists every invalid token, not just the first one.

    Attributes:
        invalid_fields: Invalid tokens in input order.

    Example:
        >>> raise InvalidFieldSelectionError(["foo", "bar"])
        # User sees: "Unable to generate CSV data. Invalid fields selected: foo, bar"
    """

    def __init__(
        self,
        invalid_fields: Sequence[str],
        *,
        internal_details: str | None = None,
    ) -> None:
        """Initialize InvalidFieldSelectionError.

        Args:
            invalid_fields: Invalid tokens in input order.
            internal_details: Technical details for internal logging only.
        """
        user_message = (
            "Unable to generate CSV data. "
            f"Invalid fields selected: {', '.join(invalid_fields)}"
        )
        super().__init__(user_message, internal_details=internal_details)
        self.invalid_fields = list(invalid_fields)


class OutputSetupError(SynthCsvError):
    """Raised when the output directory or file cannot be created.

    No rows are generated once this is raised.

    Attributes:
        path: The directory or file path that could not be created.
    """

    def __init__(
        self,
        user_message: str,
        *,
        path: str | None = None,
        internal_details: str | None = None,
    ) -> None:
        """Initialize OutputSetupError.

        Args:
            user_message: Safe message to display to the user.
            path: The directory or file path that could not be created.
            internal_details: Technical details for internal logging only.
        """
        super().__init__(user_message, internal_details=internal_details)
        self.path = path


class WriteError(SynthCsvError):
    """Raised when the header row or a data row cannot be written.

    Rows written before the failure stay on disk.

    Attributes:
        rows_written: Data rows written before the failure.
    """

    def __init__(
        self,
        user_message: str,
        *,
        rows_written: int = 0,
        internal_details: str | None = None,
    ) -> None:
        """Initialize WriteError.

        Args:
            user_message: Safe message to display to the user.
            rows_written: Data rows written before the failure.
            internal_details: Technical details for internal logging only.
        """
        super().__init__(user_message, internal_details=internal_details)
        self.rows_written = rows_written
