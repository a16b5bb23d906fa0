"""Synthetic value and row generators.

This module provides:
- FakeValueProvider: Seeded Faker wrapper for atomic values
- derive_base_fields: Per-row identity bundle
- FieldName / FIELD_GENERATORS: The field registry
- TableGenerator: Row generation over a field list
"""

from __future__ import annotations

from synthcsv.generators.base import DataGenerator
from synthcsv.generators.base_fields import derive_base_fields
from synthcsv.generators.provider import FakeValueProvider
from synthcsv.generators.registry import (
    FIELD_GENERATORS,
    VALID_FIELDS,
    FieldName,
    generate_field,
)
from synthcsv.generators.table import TableGenerator, assemble

__all__ = [
    "DataGenerator",
    "FIELD_GENERATORS",
    "FakeValueProvider",
    "FieldName",
    "TableGenerator",
    "VALID_FIELDS",
    "assemble",
    "derive_base_fields",
    "generate_field",
]
