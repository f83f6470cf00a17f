"""Tests for the definition name error hierarchy."""

from __future__ import annotations

import pytest

from kubespec.constants import ERROR_CODES
from kubespec.names.errors import (
    BadPrefixError,
    DefinitionNameError,
    InvalidFieldError,
    MissingFieldError,
    ParseError,
    TooFewSegmentsError,
    TrailingSegmentsError,
    UnknownFamilyKeywordError,
    UnparseError,
    UnrecognizedFamilyError,
)


class TestErrorHierarchy:
    """Errors share a base class and split into parse and unparse failures."""

    @pytest.mark.parametrize(
        "error",
        [
            TooFewSegmentsError("io.k8s", 2, 6),
            BadPrefixError("com.k8s.x.pkg.api.v1.Pod"),
            UnknownFamilyKeywordError("io.k8s.x.pkg.weird.v1.Foo", "weird"),
            TrailingSegmentsError("io.k8s.x.pkg.runtime.A.B", ["B"]),
        ],
    )
    def test_parse_errors(self, error: DefinitionNameError) -> None:
        assert isinstance(error, ParseError)
        assert isinstance(error, ValueError)
        assert error.code in ERROR_CODES.values()

    @pytest.mark.parametrize(
        "error",
        [
            MissingFieldError("CORE", "version"),
            UnrecognizedFamilyError("bogus"),
            InvalidFieldError("CORE", [{"field": "kind", "message": "bad"}]),
        ],
    )
    def test_unparse_errors(self, error: DefinitionNameError) -> None:
        assert isinstance(error, UnparseError)
        assert not isinstance(error, ParseError)
        assert error.code in ERROR_CODES.values()

    def test_str_is_message(self) -> None:
        error = BadPrefixError("com.k8s.x.pkg.api.v1.Pod")
        assert str(error) == error.message


class TestErrorToDict:
    """to_dict renders errors as plain response dicts."""

    def test_with_details(self) -> None:
        result = TooFewSegmentsError("io.k8s", 2, 6).to_dict()

        assert result["error_type"] == "TOO_FEW_SEGMENTS"
        assert "io.k8s" in result["message"]
        assert result["details"] == {"name": "io.k8s", "count": 2, "required": 6}

    def test_without_details(self) -> None:
        result = DefinitionNameError(code="X", message="plain").to_dict()
        assert result == {"error_type": "X", "message": "plain", "details": None}

    def test_invalid_field_lists_fields(self) -> None:
        errors = [
            {"field": "kind", "message": "String should have at least 1 character"},
            {"field": "codebase", "message": "Input should be a valid string"},
        ]
        result = InvalidFieldError("CORE", errors).to_dict()

        assert "kind" in result["message"]
        assert "codebase" in result["message"]
        assert result["details"]["errors"] == errors
