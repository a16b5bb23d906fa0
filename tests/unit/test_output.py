"""Unit tests for synthcsv.cli.output module."""

from __future__ import annotations

import pytest

from synthcsv.cli import output

pytestmark = pytest.mark.unit


class TestCreateConsole:
    """Tests for create_console function."""

    def test_create_console_no_color(self) -> None:
        console = output.create_console(no_color=True)

        assert console.no_color is True

    def test_create_console_disables_wrapping(self) -> None:
        console = output.create_console()

        assert console.soft_wrap is True


class TestError:
    """Tests for error() function."""

    def test_error_message(self, capsys: pytest.CaptureFixture[str]) -> None:
        output.error("Invalid flags: fields cannot be empty")

        captured = capsys.readouterr()
        assert captured.out == "✗ Invalid flags: fields cannot be empty\n"

    def test_error_escapes_markup(self, capsys: pytest.CaptureFixture[str]) -> None:
        output.error("Invalid fields selected: [bold]")

        captured = capsys.readouterr()
        assert "[bold]" in captured.out


class TestInfo:
    """Tests for info() function."""

    def test_info_is_verbatim(self, capsys: pytest.CaptureFixture[str]) -> None:
        output.info("Fields: [name],age")

        captured = capsys.readouterr()
        assert captured.out == "Fields: [name],age\n"

    def test_long_lines_are_not_wrapped(self, capsys: pytest.CaptureFixture[str]) -> None:
        fields = ",".join(["name", "age", "email", "firstName", "lastName"] * 10)

        output.info(f"Fields: {fields}")

        captured = capsys.readouterr()
        assert captured.out == f"Fields: {fields}\n"


class TestSetNoColor:
    """Tests for set_no_color()."""

    def test_replaces_console(self) -> None:
        output.set_no_color(True)

        assert output.console.no_color is True
