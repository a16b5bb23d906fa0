"""Runtime settings for synthcsv.

Settings are read from environment variables with the ``SYNTHCSV_`` prefix
(or a local ``.env`` file). Command-line flags override them.
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class GeneratorSettings(BaseSettings):
    """Configuration for the generator and CLI.

    Example:
        >>> # From environment (SYNTHCSV_OUTPUT_DIR=/tmp/data)
        >>> settings = GeneratorSettings()
        >>>
        >>> # Explicit
        >>> settings = GeneratorSettings(output_dir="data", default_seed=7)
    """

    model_config = SettingsConfigDict(
        env_prefix="SYNTHCSV_",
        env_file=".env",
        extra="ignore",
    )

    output_dir: str = Field(
        default="output",
        min_length=1,
        description="Directory the CSV file is written to",
    )
    default_rows: int = Field(
        default=1,
        description="Row count used when -rows is not given",
    )
    default_fields: str = Field(
        default="name,age",
        description="Field list used when -fields is not given",
    )
    default_filename: str = Field(
        default="output.csv",
        description="Filename used when -filename is not given",
    )
    default_seed: int = Field(
        default=0,
        description="Seed used when -seed is not given",
    )
    locale: str = Field(
        default="en_US",
        description="Faker locale for generated values",
    )
    log_level: LogLevel = Field(
        default="WARNING",
        description="Minimum log level",
    )
    log_json: bool = Field(
        default=False,
        description="Emit JSON log lines instead of console-formatted ones",
    )
