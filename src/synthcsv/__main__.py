"""Allows running synthcsv as a module:

    python -m synthcsv -rows 10 -fields name,email
"""

from __future__ import annotations

from synthcsv.cli.main import cli

if __name__ == "__main__":
    cli(prog_name="synthcsv")
