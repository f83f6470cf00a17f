"""Error hierarchy for definition name parsing and unparsing."""

from __future__ import annotations

from typing import Any

from kubespec.constants import ErrorCodes


class DefinitionNameError(Exception):
    """Base error for all definition name failures.

    Carries a stable ``code``, a human-readable ``message`` and a ``details``
    dict with the offending values, so callers can decide whether to skip,
    escalate or retry with a corrected name.
    """

    def __init__(self, code: str, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details: dict[str, Any] = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert the error to a plain response dict."""
        return {
            "error_type": self.code,
            "message": self.message,
            "details": self.details if self.details else None,
        }


class ParseError(DefinitionNameError, ValueError):
    """Raised when a dotted name cannot be parsed."""


class TooFewSegmentsError(ParseError):
    """Raised when a name has fewer segments than its family requires."""

    def __init__(self, name: str, count: int, required: int) -> None:
        super().__init__(
            code=ErrorCodes["TOO_FEW_SEGMENTS"],
            message=f"Failed to parse definition name '{name}': expected at least {required} segments, got {count}",
            details={"name": name, "count": count, "required": required},
        )


class BadPrefixError(ParseError):
    """Raised when a name does not start with io.k8s.<codebase>.pkg."""

    def __init__(self, name: str) -> None:
        super().__init__(
            code=ErrorCodes["BAD_PREFIX"],
            message=f"Failed to parse definition name '{name}': expected prefix 'io.k8s.<codebase>.pkg'",
            details={"name": name},
        )


class UnknownFamilyKeywordError(ParseError):
    """Raised when the package-family keyword is not recognised."""

    def __init__(self, name: str, keyword: str) -> None:
        super().__init__(
            code=ErrorCodes["UNKNOWN_FAMILY_KEYWORD"],
            message=f"Failed to parse definition name '{name}': unknown package family '{keyword}'",
            details={"name": name, "keyword": keyword},
        )


class TrailingSegmentsError(ParseError):
    """Raised in strict mode when segments follow the kind."""

    def __init__(self, name: str, trailing: list[str]) -> None:
        super().__init__(
            code=ErrorCodes["TRAILING_SEGMENTS"],
            message=f"Failed to parse definition name '{name}': unexpected trailing segments {'.'.join(trailing)!r}",
            details={"name": name, "trailing": trailing},
        )


class UnparseError(DefinitionNameError, ValueError):
    """Raised when a record cannot be turned back into a dotted name."""


class MissingFieldError(UnparseError):
    """Raised when a field required by the record's family is missing."""

    def __init__(self, family: str, field: str) -> None:
        super().__init__(
            code=ErrorCodes["MISSING_FIELD"],
            message=f"Definition of package family '{family}' requires field '{field}'",
            details={"family": family, "field": field},
        )


class UnrecognizedFamilyError(UnparseError):
    """Raised when a record's family tag is outside the known families."""

    def __init__(self, family: Any) -> None:
        super().__init__(
            code=ErrorCodes["UNRECOGNIZED_FAMILY"],
            message=f"Failed to unparse definition name, did not recognize package family {family!r}",
            details={"family": repr(family)},
        )


class InvalidFieldError(UnparseError):
    """Raised when a record field has the wrong type or shape."""

    def __init__(self, family: str, errors: list[dict[str, Any]]) -> None:
        fields = ", ".join(f"{err['field']}: {err['message']}" for err in errors)
        super().__init__(
            code=ErrorCodes["INVALID_FIELD"],
            message=f"Invalid fields for package family '{family}': {fields}",
            details={"family": family, "errors": errors},
        )
