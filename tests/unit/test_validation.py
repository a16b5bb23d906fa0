"""Unit tests for request and field-list validation."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from synthcsv.errors import InvalidFieldSelectionError, InvalidRequestError
from synthcsv.schemas import GenerationRequest
from synthcsv.validation import (
    build_request,
    parse_field_list,
    validate_request,
    validate_selected_fields,
)

pytestmark = pytest.mark.unit


class TestParseFieldList:
    """Tests for parse_field_list()."""

    def test_preserves_order(self) -> None:
        assert parse_field_list("email,name,age") == ["email", "name", "age"]

    def test_keeps_duplicates(self) -> None:
        assert parse_field_list("age,name,age") == ["age", "name", "age"]

    def test_does_not_trim_whitespace(self) -> None:
        assert parse_field_list("name, age") == ["name", " age"]

    def test_empty_string_is_one_empty_token(self) -> None:
        assert parse_field_list("") == [""]


class TestValidateSelectedFields:
    """Tests for validate_selected_fields()."""

    def test_single_invalid(self) -> None:
        """An unknown token is reported."""
        assert validate_selected_fields("invalid") == ["invalid"]

    def test_all_valid(self) -> None:
        """Known tokens produce no invalid entries."""
        assert validate_selected_fields("name,age") == []

    def test_full_vocabulary_is_valid(self) -> None:
        fields = "name,age,email,firstName,lastName,middleName,city,jobTitle"

        assert validate_selected_fields(fields) == []

    def test_reports_every_invalid_token_in_order(self) -> None:
        """All invalid tokens are reported, not just the first."""
        assert validate_selected_fields("foo,name,bar,age,baz") == ["foo", "bar", "baz"]

    def test_comparison_is_verbatim(self) -> None:
        """Whitespace and case differences make a token invalid."""
        assert validate_selected_fields("name, age,Email") == [" age", "Email"]

    def test_trailing_comma_yields_empty_token(self) -> None:
        assert validate_selected_fields("name,") == [""]


class TestValidateRequest:
    """Tests for validate_request()."""

    @pytest.mark.parametrize("rows", [0, -1])
    def test_non_positive_rows(self, rows: int) -> None:
        """Zero and negative row counts are rejected."""
        with pytest.raises(InvalidRequestError) as exc_info:
            validate_request(rows, "name,age", "output.csv")

        assert str(exc_info.value) == f"invalid number of rows: {rows}"

    def test_one_row_is_valid(self) -> None:
        validate_request(1, "name,age", "output.csv")

    def test_empty_fields(self) -> None:
        with pytest.raises(InvalidRequestError, match="fields cannot be empty"):
            validate_request(1, "", "output.csv")

    def test_empty_filename(self) -> None:
        with pytest.raises(InvalidRequestError, match="filename cannot be empty"):
            validate_request(1, "name", "")

    def test_rows_checked_first(self) -> None:
        """With several problems, the row count is reported."""
        with pytest.raises(InvalidRequestError, match="invalid number of rows: 0"):
            validate_request(0, "", "")

    def test_fields_checked_before_filename(self) -> None:
        with pytest.raises(InvalidRequestError, match="fields cannot be empty"):
            validate_request(1, "", "")


class TestBuildRequest:
    """Tests for build_request()."""

    def test_returns_frozen_request(self) -> None:
        request = build_request(2, "name,age", "people.csv", seed=9)

        assert request == GenerationRequest(
            rows=2, fields="name,age", filename="people.csv", seed=9
        )
        with pytest.raises(ValidationError):
            request.rows = 3  # type: ignore[misc]

    def test_field_list_property(self) -> None:
        request = build_request(1, "email,email,city", "out.csv")

        assert request.field_list == ["email", "email", "city"]

    def test_default_seed(self) -> None:
        assert build_request(1, "name", "out.csv").seed == 0

    def test_invalid_fields(self) -> None:
        """Unknown fields raise with every invalid token listed."""
        with pytest.raises(InvalidFieldSelectionError) as exc_info:
            build_request(1, "name,foo,bar", "out.csv")

        assert exc_info.value.invalid_fields == ["foo", "bar"]
        assert str(exc_info.value) == (
            "Unable to generate CSV data. Invalid fields selected: foo, bar"
        )

    def test_request_checks_run_before_field_checks(self) -> None:
        with pytest.raises(InvalidRequestError):
            build_request(0, "invalid", "out.csv")
