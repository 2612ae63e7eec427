"""Unit tests for custom exceptions.

Pattern: Custom exception hierarchy
"""

import pytest

from citation_service.core.exceptions import (
    CitationError,
    CitationFieldsError,
    UnsupportedStyleError,
)


class TestCitationError:
    """Tests for base CitationError exception."""

    def test_citation_error_message(self) -> None:
        """CitationError stores its message."""
        assert str(CitationError("Test error message")) == "Test error message"

    def test_subclasses_caught_as_citation_error(self) -> None:
        """Service exceptions share the CitationError base."""
        with pytest.raises(CitationError):
            raise UnsupportedStyleError("harvard")


class TestCitationFieldsError:
    """Tests for CitationFieldsError."""

    def test_stores_kind_and_fields(self) -> None:
        """Kind and field names are kept on the exception."""
        error = CitationFieldsError("missing", kind="missing_required_field", fields=["year"])

        assert error.kind == "missing_required_field"
        assert error.fields == ["year"]

    def test_fields_default_to_empty(self) -> None:
        """Fields default to an empty list."""
        assert CitationFieldsError("bad", kind="unparsable_date").fields == []


class TestUnsupportedStyleError:
    """Tests for UnsupportedStyleError."""

    def test_message_names_value_and_kind(self) -> None:
        """The message names what was not recognized."""
        error = UnsupportedStyleError("film", kind="source_type")

        assert str(error) == "Unsupported source_type 'film'"
        assert error.value == "film"
