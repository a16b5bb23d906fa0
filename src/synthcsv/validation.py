"""Request and field-list validation.

Checks run before any I/O or generation: first the request sanity checks
(row count, field list, filename), then the field vocabulary.
"""

from __future__ import annotations

from synthcsv.errors import InvalidFieldSelectionError, InvalidRequestError
from synthcsv.generators.registry import VALID_FIELDS
from synthcsv.schemas import GenerationRequest


def parse_field_list(fields: str) -> list[str]:
    """Split a comma-separated field list.

    Tokens are kept verbatim (no whitespace trimming), in order, with
    duplicates.
    """
    return fields.split(",")


def validate_selected_fields(fields: str) -> list[str]:
    """Return every token of ``fields`` that is not a valid field name.

    Args:
        fields: Comma-separated field list.

    Returns:
        Invalid tokens in input order. Empty when all tokens are valid.

    Example:
        >>> validate_selected_fields("name,invalid")
        ['invalid']
    """
    return [token for token in parse_field_list(fields) if token not in VALID_FIELDS]


def validate_request(rows: int, fields: str, filename: str) -> None:
    """Check the row count, field list and filename.

    Checks run in that order and the first failure is raised.

    Raises:
        InvalidRequestError: If ``rows`` <= 0, ``fields`` is empty or
            ``filename`` is empty.
    """
    if rows <= 0:
        raise InvalidRequestError(f"invalid number of rows: {rows}")

    if fields == "":
        raise InvalidRequestError("fields cannot be empty")

    if filename == "":
        raise InvalidRequestError("filename cannot be empty")


def build_request(rows: int, fields: str, filename: str, seed: int = 0) -> GenerationRequest:
    """Validate user input and build a GenerationRequest.

    Args:
        rows: Number of data rows.
        fields: Comma-separated field list.
        filename: Output file name.
        seed: Provider seed.

    Returns:
        Frozen GenerationRequest.

    Raises:
        InvalidRequestError: If a sanity check fails.
        InvalidFieldSelectionError: If any field name is outside the vocabulary.
    """
    validate_request(rows, fields, filename)

    invalid_fields = validate_selected_fields(fields)
    if invalid_fields:
        raise InvalidFieldSelectionError(invalid_fields)

    return GenerationRequest(rows=rows, fields=fields, filename=filename, seed=seed)
