"""Shared test fixtures for synthcsv tests.

Provides CliRunner fixtures, seeded generators and helpers for reading
generated CSV files.
"""

from __future__ import annotations

import csv
import os
from collections.abc import Callable, Generator
from pathlib import Path

from click.testing import CliRunner
import pytest

from synthcsv.cli import output
from synthcsv.generators.provider import FakeValueProvider
from synthcsv.generators.table import TableGenerator


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Click test runner.

    Returns:
        CliRunner instance for testing CLI commands.
    """
    return CliRunner()


@pytest.fixture
def isolated_runner(cli_runner: CliRunner) -> Generator[CliRunner, None, None]:
    """Create a Click test runner with an isolated filesystem.

    The generated ``output/`` directory lands in a temporary directory that
    is removed after the test.

    Yields:
        CliRunner instance with isolated filesystem.
    """
    with cli_runner.isolated_filesystem():
        yield cli_runner


@pytest.fixture(autouse=True)
def plain_console() -> Generator[None, None, None]:
    """Use an uncolored console and restore the module console afterwards."""
    original_console = output.console
    output.set_no_color(True)
    yield
    output.console = original_console


@pytest.fixture(autouse=True)
def clean_settings_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove SYNTHCSV_* variables so settings come from defaults."""
    for key in list(os.environ):
        if key.startswith("SYNTHCSV_"):
            monkeypatch.delenv(key)


@pytest.fixture
def provider() -> FakeValueProvider:
    """Provider seeded with 1."""
    return FakeValueProvider(seed=1)


@pytest.fixture
def seeded_generator() -> TableGenerator:
    """TableGenerator seeded with 1."""
    return TableGenerator(seed=1)


@pytest.fixture
def read_csv() -> Callable[[Path], list[list[str]]]:
    """Factory fixture that reads a CSV file into a list of records.

    Returns:
        Function returning every record (header included) of a CSV file.
    """

    def _read(path: Path) -> list[list[str]]:
        with path.open(newline="", encoding="utf-8") as handle:
            return list(csv.reader(handle))

    return _read
