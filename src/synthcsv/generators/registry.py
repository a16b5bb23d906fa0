"""Field registry: the fixed vocabulary of column names and their generators.

Each generator takes the row's BaseFields and the run's provider and returns
one cell value. Identity fields read the bundle; the others draw fresh values
from the provider, so duplicated identity columns repeat within a row while
duplicated independent columns do not.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum

from synthcsv.generators.provider import FakeValueProvider
from synthcsv.schemas import BaseFields

MIN_AGE = 18
MAX_AGE = 99


class FieldName(str, Enum):
    """Valid column names."""

    NAME = "name"
    AGE = "age"
    EMAIL = "email"
    FIRST_NAME = "firstName"
    LAST_NAME = "lastName"
    MIDDLE_NAME = "middleName"
    CITY = "city"
    JOB_TITLE = "jobTitle"


FieldGenerator = Callable[[BaseFields, FakeValueProvider], str]

FIELD_GENERATORS: dict[FieldName, FieldGenerator] = {
    FieldName.NAME: lambda base, provider: base.name,
    FieldName.AGE: lambda base, provider: str(provider.number(MIN_AGE, MAX_AGE)),
    FieldName.EMAIL: lambda base, provider: base.email,
    FieldName.FIRST_NAME: lambda base, provider: base.first_name,
    FieldName.LAST_NAME: lambda base, provider: base.last_name,
    FieldName.MIDDLE_NAME: lambda base, provider: provider.middle_name(),
    FieldName.CITY: lambda base, provider: provider.city(),
    FieldName.JOB_TITLE: lambda base, provider: provider.job_title(),
}

_missing = set(FieldName) - FIELD_GENERATORS.keys()
if _missing:  # pragma: no cover - import-time guard
    raise RuntimeError(f"No generator registered for: {sorted(f.value for f in _missing)}")

VALID_FIELDS: frozenset[str] = frozenset(field.value for field in FieldName)


def generate_field(field: str, base: BaseFields, provider: FakeValueProvider) -> str:
    """Produce one cell value for ``field``.

    Args:
        field: A name from the vocabulary.
        base: The row's base fields.
        provider: The run's value provider.

    Returns:
        Cell value as a string.

    Raises:
        KeyError: If ``field`` is not a registered name. Callers validate first.
    """
    try:
        key = FieldName(field)
    except ValueError:
        raise KeyError(field) from None
    return FIELD_GENERATORS[key](base, provider)
