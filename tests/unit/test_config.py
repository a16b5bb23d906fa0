"""Unit tests for GeneratorSettings."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from synthcsv.config import GeneratorSettings

pytestmark = pytest.mark.unit


class TestGeneratorSettings:
    """Tests for GeneratorSettings."""

    def test_defaults(self) -> None:
        settings = GeneratorSettings()

        assert settings.output_dir == "output"
        assert settings.default_rows == 1
        assert settings.default_fields == "name,age"
        assert settings.default_filename == "output.csv"
        assert settings.default_seed == 0
        assert settings.locale == "en_US"
        assert settings.log_level == "WARNING"
        assert settings.log_json is False

    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SYNTHCSV_OUTPUT_DIR", "data")
        monkeypatch.setenv("SYNTHCSV_DEFAULT_ROWS", "25")
        monkeypatch.setenv("SYNTHCSV_DEFAULT_SEED", "7")
        monkeypatch.setenv("SYNTHCSV_LOG_JSON", "true")

        settings = GeneratorSettings()

        assert settings.output_dir == "data"
        assert settings.default_rows == 25
        assert settings.default_seed == 7
        assert settings.log_json is True

    def test_explicit_values(self) -> None:
        settings = GeneratorSettings(output_dir="elsewhere", default_fields="email")

        assert settings.output_dir == "elsewhere"
        assert settings.default_fields == "email"

    def test_invalid_environment_value(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SYNTHCSV_DEFAULT_ROWS", "many")

        with pytest.raises(ValidationError):
            GeneratorSettings()

    def test_invalid_log_level(self) -> None:
        with pytest.raises(ValidationError):
            GeneratorSettings(log_level="LOUD")  # type: ignore[arg-type]

    def test_empty_output_dir_rejected(self) -> None:
        with pytest.raises(ValidationError):
            GeneratorSettings(output_dir="")
