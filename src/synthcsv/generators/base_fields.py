"""Per-row base field derivation.

To keep name, first name, last name and email consistent, the base fields are
generated for every row regardless of which of them are selected as columns.
"""

from __future__ import annotations

from synthcsv.generators.provider import FakeValueProvider
from synthcsv.schemas import BaseFields


def derive_base_fields(provider: FakeValueProvider) -> BaseFields:
    """Draw one consistent identity bundle.

    Draw order is first name, last name, domain. Call exactly once per row.

    Args:
        provider: Seeded value provider for the run.

    Returns:
        BaseFields for a single row.
    """
    first_name = provider.first_name()
    last_name = provider.last_name()
    domain = provider.domain_name()

    return BaseFields(
        name=f"{first_name} {last_name}",
        first_name=first_name,
        last_name=last_name,
        email=f"{first_name.lower()}.{last_name.lower()}@{domain}",
    )
