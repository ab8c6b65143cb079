"""Unit tests for the error kind variants."""

from __future__ import annotations

import pytest
from pydantic import TypeAdapter, ValidationError

from leakguard.models.errors import DatabaseError, ErrorKind, GenericError


class TestErrorKinds:
    """Tests for DatabaseError and GenericError."""

    def test_database_error_carries_detail(self) -> None:
        error = DatabaseError(detail="boom")
        assert error.kind == "database"
        assert error.detail == "boom"
        assert error.carries_sensitive_payload is True
        assert str(error) == "Database operation failed: boom"

    def test_generic_error_has_no_payload(self) -> None:
        error = GenericError()
        assert error.kind == "generic"
        assert error.carries_sensitive_payload is False
        assert str(error) == "An unexpected application error occurred."

    def test_variants_are_immutable(self) -> None:
        error = DatabaseError(detail="boom")
        with pytest.raises(ValidationError):
            error.detail = "changed"  # type: ignore[misc]

    def test_discriminated_union_parses_each_kind(self) -> None:
        adapter = TypeAdapter(ErrorKind)
        assert adapter.validate_python({"kind": "database", "detail": "x"}) == DatabaseError(
            detail="x"
        )
        assert adapter.validate_python({"kind": "generic"}) == GenericError()

    def test_unknown_kind_is_rejected(self) -> None:
        adapter = TypeAdapter(ErrorKind)
        with pytest.raises(ValidationError):
            adapter.validate_python({"kind": "timeout"})
