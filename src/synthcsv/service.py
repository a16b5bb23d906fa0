"""Generation orchestration: assemble rows and write them to a CSV file."""

from __future__ import annotations

import time
from pathlib import Path

import structlog

from synthcsv.generators.base import DataGenerator
from synthcsv.generators.provider import DEFAULT_LOCALE
from synthcsv.generators.table import TableGenerator
from synthcsv.observability import span
from synthcsv.schemas import GenerationRequest, GenerationResult
from synthcsv.writers.csv_file import CsvFileSink

logger = structlog.get_logger(__name__)


def generate_csv(
    request: GenerationRequest,
    *,
    output_dir: Path | str = "output",
    locale: str = DEFAULT_LOCALE,
    sink: CsvFileSink | None = None,
    generator: DataGenerator | None = None,
) -> GenerationResult:
    """Generate ``request.rows`` rows and write them with a header.

    Rows are generated lazily while the file is written, so a write failure
    stops generation at that row.

    Args:
        request: Validated generation request.
        output_dir: Directory for the output file (ignored when ``sink`` is given).
        locale: Faker locale (ignored when ``generator`` is given).
        sink: Sink to write to (default: CsvFileSink on ``output_dir``).
        generator: Row generator (default: TableGenerator seeded from the request).

    Returns:
        GenerationResult describing the written file.

    Raises:
        OutputSetupError: If the output directory or file cannot be created.
        WriteError: If a row cannot be written.
    """
    start = time.perf_counter()
    sink = sink or CsvFileSink(output_dir)
    generator = generator or TableGenerator(seed=request.seed, locale=locale)
    fields = request.field_list

    attributes = {
        "csv.filename": request.filename,
        "csv.rows": request.rows,
        "csv.fields": request.fields,
        "csv.seed": request.seed,
    }
    with span("generate_csv", attributes=attributes):
        written = sink.write(
            request.filename,
            generator.header(fields),
            generator.generate_rows(request.rows, fields),
        )

    elapsed = time.perf_counter() - start
    logger.info(
        "csv_generated",
        path=written.path,
        rows=written.rows_written,
        elapsed_seconds=elapsed,
    )

    return GenerationResult(
        path=written.path,
        rows_written=written.rows_written,
        fields=fields,
        seed=request.seed,
        elapsed_seconds=elapsed,
    )
