"""CSV file sink.

This module provides the CsvFileSink for persisting generated rows as
comma-delimited text.

Features:
- Output directory (and any directory part of the filename) created on demand
- Rows written as they are produced
- Pluggable filesystem and row-writer seams for testing

A failure creating the directory or file happens before any row is drawn.
A failure mid-stream leaves the rows written so far on disk.
"""

from __future__ import annotations

import csv
from collections.abc import Callable, Iterable, Sequence
from pathlib import Path
from typing import Protocol, TextIO

import structlog

from synthcsv.errors import OutputSetupError, WriteError
from synthcsv.schemas import WriteResult

logger = structlog.get_logger(__name__)


class FileSystem(Protocol):
    """Directory and file creation used by the sink."""

    def make_dirs(self, path: Path) -> None: ...

    def open_for_write(self, path: Path) -> TextIO: ...


class RowWriter(Protocol):
    """Anything with a csv-writer style ``writerow``."""

    def writerow(self, row: Sequence[str]) -> object: ...


class LocalFileSystem:
    """FileSystem backed by the local disk."""

    def make_dirs(self, path: Path) -> None:
        path.mkdir(parents=True, exist_ok=True)

    def open_for_write(self, path: Path) -> TextIO:
        return path.open("w", newline="", encoding="utf-8")


def default_row_writer(handle: TextIO) -> RowWriter:
    """Standard CSV writer: comma delimiter, minimal quoting, ``\\n`` line ends."""
    return csv.writer(handle, lineterminator="\n")


class CsvFileSink:
    """Write a header and rows to ``<output_dir>/<filename>``.

    Example:
        >>> sink = CsvFileSink(Path("output"))
        >>> result = sink.write("people.csv", ["name", "age"], rows)
        >>> print(f"Wrote {result.rows_written} rows to {result.path}")
    """

    def __init__(
        self,
        output_dir: Path | str,
        *,
        filesystem: FileSystem | None = None,
        row_writer_factory: Callable[[TextIO], RowWriter] = default_row_writer,
    ) -> None:
        """Initialize the sink.

        Args:
            output_dir: Directory the file is written to.
            filesystem: Directory/file creation (default: local disk).
            row_writer_factory: Builds the row writer for an open handle.
        """
        self.output_dir = Path(output_dir)
        self._filesystem = filesystem or LocalFileSystem()
        self._row_writer_factory = row_writer_factory

    def write(
        self,
        filename: str,
        header: Sequence[str],
        rows: Iterable[Sequence[str]],
    ) -> WriteResult:
        """Write the header, then every row, to the output file.

        Args:
            filename: File name relative to the output directory.
            header: Header row.
            rows: Data rows, consumed lazily.

        Returns:
            WriteResult with the path and number of data rows written.

        Raises:
            OutputSetupError: If the directory or file cannot be created.
            WriteError: If the header or a row cannot be written.
        """
        path = self.output_dir / filename

        try:
            self._filesystem.make_dirs(path.parent)
        except OSError as e:
            raise OutputSetupError(
                f"failed to create directory: {e}",
                path=str(path.parent),
                internal_details=repr(e),
            ) from e

        try:
            handle = self._filesystem.open_for_write(path)
        except OSError as e:
            raise OutputSetupError(
                f"failed to create file: {e}",
                path=str(path),
                internal_details=repr(e),
            ) from e

        rows_written = 0
        with handle:
            writer = self._row_writer_factory(handle)

            try:
                writer.writerow(header)
            except (OSError, csv.Error) as e:
                raise WriteError(
                    f"failed to write header row: {e}",
                    internal_details=repr(e),
                ) from e

            for row in rows:
                try:
                    writer.writerow(row)
                except (OSError, csv.Error) as e:
                    raise WriteError(
                        f"failed to write row: {e}",
                        rows_written=rows_written,
                        internal_details=repr(e),
                    ) from e
                rows_written += 1

        logger.info("csv_written", path=str(path), rows=rows_written)

        return WriteResult(path=str(path), rows_written=rows_written)
