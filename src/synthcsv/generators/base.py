"""Base generator protocol.

This module defines the DataGenerator abstract class that table generators
implement.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator, Sequence

import structlog

logger = structlog.get_logger(__name__)

Row = list[str]


class DataGenerator(ABC):
    """Abstract base class for synthetic row generators.

    All generators must implement generate_rows, which lazily yields rows
    in order.

    Generators should support deterministic seeding for reproducibility.
    """

    def header(self, fields: Sequence[str]) -> Row:
        """Return the header row: the field list verbatim, duplicates included."""
        return list(fields)

    @abstractmethod
    def generate_rows(  # pragma: no cover - abstract method
        self, count: int, fields: Sequence[str]
    ) -> Iterator[Row]:
        """Yield ``count`` rows, one cell per field in ``fields`` order.

        Args:
            count: Number of rows to generate
            fields: Ordered, validated field names

        Yields:
            Rows of string cells
        """
        ...

    def _log_generation(self, entity: str, count: int) -> None:
        """Log generation activity.

        Args:
            entity: Name of the entity being generated
            count: Number of records generated
        """
        logger.info("data_generated", entity=entity, count=count)
