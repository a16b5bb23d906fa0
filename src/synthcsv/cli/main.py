"""CLI entry point for synthcsv.

Flags accept both the single-dash form (``-rows 10``) and the double-dash
form (``--rows 10``). Report lines go to stdout in a fixed order:

    Rows: <rows>
    Fields: <fields>
    Filename: <filename>
    Generating CSV file...
    CSV file successfully generated at <output_dir>/<filename>.
    (Elapsed time: <seconds> seconds)
"""

from __future__ import annotations

import time
from pathlib import Path

import click
import rich_click as rclick
from pydantic import ValidationError as PydanticValidationError

from synthcsv import __version__
from synthcsv.cli.errors import describe_error, exit_with_error, format_pydantic_error
from synthcsv.cli.output import info, set_no_color
from synthcsv.config import GeneratorSettings
from synthcsv.errors import SynthCsvError
from synthcsv.generators.registry import FieldName
from synthcsv.observability import configure_logging
from synthcsv.service import generate_csv
from synthcsv.validation import build_request

# Configure rich-click for better help formatting
rclick.rich_click.TEXT_MARKUP = "markdown"
rclick.rich_click.SHOW_ARGUMENTS = True

_FIELD_CHOICES = ", ".join(field.value for field in FieldName)


@click.command(cls=rclick.RichCommand)
@click.version_option(version=__version__, prog_name="synthcsv")
@click.option(
    "--no-color",
    is_flag=True,
    default=False,
    help="Disable colored output.",
    is_eager=True,
    expose_value=False,
    callback=lambda ctx, param, value: set_no_color(value) if value else None,
)
@click.option(
    "-rows",
    "--rows",
    "rows",
    type=int,
    default=None,
    help="Number of rows to include in the generated CSV file. [default: 1]",
)
@click.option(
    "-fields",
    "--fields",
    "fields",
    type=str,
    default=None,
    help=(
        "Comma separated list of fields (ex. 'name,age,email') to include in the "
        f"generated CSV file. Valid fields: {_FIELD_CHOICES}. [default: name,age]"
    ),
)
@click.option(
    "-filename",
    "--filename",
    "filename",
    type=str,
    default=None,
    help="Name of the file to write the generated CSV data to. [default: output.csv]",
)
@click.option(
    "-seed",
    "--seed",
    "seed",
    type=int,
    default=None,
    help="Seed for random number generation. [default: 0]",
)
@click.option(
    "--output-dir",
    "output_dir",
    type=click.Path(file_okay=False),
    default=None,
    help="Directory the CSV file is written to. [default: output]",
)
def cli(
    rows: int | None,
    fields: str | None,
    filename: str | None,
    seed: int | None,
    output_dir: str | None,
) -> None:
    """Generate a CSV file of synthetic data.

    Writes a header row followed by `-rows` data rows, one column per
    entry in `-fields`. Name, first name, last name and email stay
    consistent within each row.

    **Examples:**

    - `synthcsv -rows 100 -fields name,email,city`
    - `synthcsv -rows 10 -seed 42 -filename people.csv`
    """
    start = time.perf_counter()

    try:
        settings = GeneratorSettings()
    except PydanticValidationError as e:
        exit_with_error(f"Invalid settings:\n{format_pydantic_error(e)}")

    configure_logging(log_level=settings.log_level, json_format=settings.log_json)

    rows = settings.default_rows if rows is None else rows
    fields = settings.default_fields if fields is None else fields
    filename = settings.default_filename if filename is None else filename
    seed = settings.default_seed if seed is None else seed
    output_dir = settings.output_dir if output_dir is None else output_dir

    try:
        request = build_request(rows, fields, filename, seed)
    except SynthCsvError as e:
        exit_with_error(*describe_error(e))

    info(f"Rows: {request.rows}")
    info(f"Fields: {request.fields}")
    info(f"Filename: {request.filename}")
    info("Generating CSV file...")

    try:
        generate_csv(request, output_dir=output_dir, locale=settings.locale)
    except SynthCsvError as e:
        exit_with_error(*describe_error(e))

    elapsed = time.perf_counter() - start
    display_path = (Path(output_dir) / request.filename).as_posix()

    info(f"CSV file successfully generated at {display_path}.")
    info(f"(Elapsed time: {elapsed:f} seconds)")
