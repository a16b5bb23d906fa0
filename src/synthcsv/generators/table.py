"""Row and table assembly.

This module provides the TableGenerator, which turns an ordered field list
into rows of cell values.

For every row a fresh BaseFields bundle is derived, then each field in list
order is evaluated against it. Rows come out in index order and cells in
field-list order; with the same seed and field list the output is identical
across runs.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from synthcsv.generators.base import DataGenerator, Row
from synthcsv.generators.base_fields import derive_base_fields
from synthcsv.generators.provider import DEFAULT_LOCALE, FakeValueProvider
from synthcsv.generators.registry import generate_field


class TableGenerator(DataGenerator):
    """Generator for rows over the fixed field vocabulary.

    Attributes:
        seed: Random seed for reproducibility
        provider: Value provider shared by every row of the run

    Example:
        >>> generator = TableGenerator(seed=1)
        >>> rows = list(generator.generate_rows(2, ["name", "age"]))
        >>> len(rows)
        2
    """

    def __init__(
        self,
        seed: int = 0,
        *,
        locale: str = DEFAULT_LOCALE,
        provider: FakeValueProvider | None = None,
    ) -> None:
        """Initialize the generator.

        Args:
            seed: Random seed, ignored when ``provider`` is given.
            locale: Faker locale, ignored when ``provider`` is given.
            provider: Pre-built provider to draw values from.
        """
        self.provider = provider or FakeValueProvider(seed=seed, locale=locale)
        self.seed = self.provider.seed

    def generate_row(self, fields: Sequence[str]) -> Row:
        """Generate a single row from one fresh base-field bundle."""
        base = derive_base_fields(self.provider)
        return [generate_field(field, base, self.provider) for field in fields]

    def generate_rows(self, count: int, fields: Sequence[str]) -> Iterator[Row]:
        """Lazily yield ``count`` rows.

        Args:
            count: Number of rows to generate
            fields: Ordered, validated field names

        Yields:
            One row per iteration, in row-index order
        """
        produced = 0
        try:
            for _ in range(count):
                row = self.generate_row(fields)
                produced += 1
                yield row
        finally:
            self._log_generation("rows", produced)

    def reset(self) -> None:
        """Rewind the provider to the original seed."""
        self.provider.reset()


def assemble(
    row_count: int,
    fields: Sequence[str],
    seed: int = 0,
) -> tuple[Row, Iterator[Row]]:
    """Build the header and a lazy row sequence for one run.

    Args:
        row_count: Number of data rows
        fields: Ordered, validated field names
        seed: Provider seed

    Returns:
        Tuple of (header row, iterator over data rows)
    """
    generator = TableGenerator(seed=seed)
    return generator.header(fields), generator.generate_rows(row_count, fields)
