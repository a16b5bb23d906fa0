"""Synthetic CSV data generation.

This package generates synthetic tabular data and writes it to a delimited
text file. Each requested field is produced by a generator from a fixed
registry, and identity fields (name, first name, last name, email) stay
consistent within a row.

Key Components:
- generators: Faker-based provider, per-row base fields, field registry, table generator
- validation: Field-list and request checks
- writers: CSV file sink
- service: Generation orchestration (assemble rows, write file)
- cli: The ``synthcsv`` command

Example:
    >>> from synthcsv.generators.table import TableGenerator
    >>>
    >>> generator = TableGenerator(seed=1)
    >>> fields = ["name", "email", "age"]
    >>> header = generator.header(fields)
    >>> rows = list(generator.generate_rows(10, fields))

Example writing a file:
    >>> from pathlib import Path
    >>> from synthcsv.service import generate_csv
    >>> from synthcsv.validation import build_request
    >>>
    >>> request = build_request(rows=100, fields="name,age", filename="people.csv", seed=1)
    >>> result = generate_csv(request, output_dir=Path("output"))
"""

from __future__ import annotations

__version__ = "0.1.0"
