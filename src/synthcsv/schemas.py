"""Pydantic schemas for synthcsv.

This module defines:
- BaseFields: Per-row bundle of mutually consistent identity values
- GenerationRequest: Validated (rows, fields, filename, seed) tuple for one run
- WriteResult: Outcome of writing a CSV file
- GenerationResult: Outcome of a full generation run

All models are immutable (frozen=True) and validate at construction time.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class BaseFields(BaseModel):
    """Identity values generated together for one row.

    ``name``, ``first_name``, ``last_name`` and ``email`` are derived from the
    same first/last name draw, so any subset of them selected as columns is
    consistent within the row.

    Attributes:
        name: Full name, first and last name joined by a single space
        first_name: Given name
        last_name: Family name
        email: ``lowercase(first).lowercase(last)@domain``

    Example:
        >>> base = BaseFields(
        ...     name="Zion Brakus",
        ...     first_name="Zion",
        ...     last_name="Brakus",
        ...     email="zion.brakus@example.com",
        ... )
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(..., description="Full name")
    first_name: str = Field(..., description="Given name")
    last_name: str = Field(..., description="Family name")
    email: str = Field(..., description="Email derived from the name")


class GenerationRequest(BaseModel):
    """Validated generation request.

    Build this through ``synthcsv.validation.build_request`` so that the
    field vocabulary is checked as well.

    Attributes:
        rows: Number of data rows (>= 1)
        fields: Raw comma-separated field list
        filename: Output file name
        seed: Seed for the fake-value provider
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    rows: int = Field(..., ge=1, description="Number of data rows")
    fields: str = Field(..., min_length=1, description="Comma-separated field list")
    filename: str = Field(..., min_length=1, description="Output file name")
    seed: int = Field(default=0, description="Provider seed")

    @property
    def field_list(self) -> list[str]:
        """Ordered field names, duplicates included."""
        return self.fields.split(",")


class WriteResult(BaseModel):
    """Result of a CSV write.

    Attributes:
        path: Path of the written file
        rows_written: Number of data rows written (header excluded)
    """

    model_config = ConfigDict(frozen=True)

    path: str
    rows_written: int


class GenerationResult(BaseModel):
    """Result of a generation run.

    Attributes:
        path: Path of the written file
        rows_written: Number of data rows written
        fields: Header row
        seed: Seed used for the run
        elapsed_seconds: Time spent generating and writing
    """

    model_config = ConfigDict(frozen=True)

    path: str
    rows_written: int
    fields: list[str]
    seed: int
    elapsed_seconds: float
