"""Unit tests for citation schemas."""

import pytest
from pydantic import ValidationError

from citation_service.core.exceptions import UnsupportedStyleError
from citation_service.schemas.citations import (
    CitationFields,
    CitationResult,
    CitationValidationError,
    SourceType,
    Style,
    ValidationErrorKind,
    parse_source_type,
    parse_style,
    resolve_style,
)


class TestStyle:
    """Tests for the Style enum."""

    def test_values(self) -> None:
        """Three styles are defined."""
        assert [s.value for s in Style] == ["apa", "mla", "chicago"]

    def test_labels(self) -> None:
        """Each style has a display label."""
        assert Style.APA.label == "APA"
        assert Style.CHICAGO.label == "Chicago"

    def test_parse_style_case_insensitive(self) -> None:
        """Style names parse regardless of case and padding."""
        assert parse_style(" MLA ") is Style.MLA
        assert parse_style(Style.APA) is Style.APA

    def test_parse_style_unknown(self) -> None:
        """Unknown names raise UnsupportedStyleError."""
        with pytest.raises(UnsupportedStyleError):
            parse_style("harvard")

    def test_resolve_style_returns_none_for_unknown(self) -> None:
        """resolve_style is the non-raising lookup behind parse_style."""
        assert resolve_style("harvard") is None
        assert resolve_style(" Chicago ") is Style.CHICAGO
        assert resolve_style(Style.MLA) is Style.MLA


class TestSourceType:
    """Tests for the SourceType enum."""

    def test_values(self) -> None:
        """Book and website are defined."""
        assert {t.value for t in SourceType} == {"book", "website"}

    def test_parse_source_type(self) -> None:
        """Source type names parse case-insensitively."""
        assert parse_source_type("Website") is SourceType.WEBSITE


class TestCitationFields:
    """Tests for the CitationFields model."""

    def test_defaults_are_empty(self) -> None:
        """Every field defaults to an empty string."""
        fields = CitationFields()

        assert fields.author == ""
        assert fields.access_date == ""

    def test_strips_whitespace(self) -> None:
        """Values are trimmed at the boundary."""
        assert CitationFields(title="  T  ").title == "T"

    def test_alias_and_field_name(self) -> None:
        """Both camelCase aliases and field names are accepted."""
        by_alias = CitationFields.model_validate({"siteName": "S", "accessDate": "2023-01-01"})
        by_name = CitationFields(site_name="S", access_date="2023-01-01")

        assert by_alias == by_name

    def test_frozen(self) -> None:
        """Fields cannot be reassigned."""
        fields = CitationFields(title="T")

        with pytest.raises(ValidationError):
            fields.title = "Other"


class TestCitationResult:
    """Tests for CitationResult."""

    def test_success(self) -> None:
        """A success carries the citation."""
        result = CitationResult.success("Smith (2020). <i>T</i>. P.")

        assert result.ok
        assert result.unwrap() == "Smith (2020). <i>T</i>. P."

    def test_failure(self) -> None:
        """A failure carries the kind and fields."""
        result = CitationResult.failure(ValidationErrorKind.MISSING_REQUIRED_FIELD, ["author"])

        assert not result.ok
        assert result.error == CitationValidationError(
            kind=ValidationErrorKind.MISSING_REQUIRED_FIELD,
            fields=("author",),
        )

    def test_requires_exactly_one_outcome(self) -> None:
        """Neither or both outcomes is rejected."""
        with pytest.raises(ValueError):
            CitationResult()

    def test_error_messages(self) -> None:
        """Messages name the offending fields."""
        missing = CitationValidationError(ValidationErrorKind.MISSING_REQUIRED_FIELD, ("author", "year"))
        bad_date = CitationValidationError(ValidationErrorKind.UNPARSABLE_DATE, ("access_date",))

        assert missing.message == "Please fill in all required fields: author, year"
        assert bad_date.message == "Could not parse date field(s): access_date"
