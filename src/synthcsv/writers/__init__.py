"""Output sinks for generated rows."""

from __future__ import annotations

from synthcsv.writers.csv_file import CsvFileSink, FileSystem, LocalFileSystem

__all__ = ["CsvFileSink", "FileSystem", "LocalFileSystem"]
