"""Fixed vocabulary of Kubernetes OpenAPI definition names."""

from __future__ import annotations

# Segments at positions 0, 1 and 3 of every definition name.
NAME_PREFIX = ("io", "k8s")
PKG_SEGMENT = "pkg"
SEPARATOR = "."

# Index of the package-family keyword ("api", "apis", ...).
FAMILY_KEYWORD_INDEX = 4

# Shortest name the parser will look at: io.k8s.<codebase>.pkg.<family>.<kind>
MIN_SEGMENTS = 6

# Minimum segment count per family keyword.
FAMILY_MIN_SEGMENTS: dict[str, int] = {
    "api": 7,
    "apis": 8,
    "util": 7,
    "runtime": 6,
    "version": 6,
}

ERROR_CODES: dict[str, str] = {
    "TOO_FEW_SEGMENTS": "TOO_FEW_SEGMENTS",
    "BAD_PREFIX": "BAD_PREFIX",
    "UNKNOWN_FAMILY_KEYWORD": "UNKNOWN_FAMILY_KEYWORD",
    "TRAILING_SEGMENTS": "TRAILING_SEGMENTS",
    "MISSING_FIELD": "MISSING_FIELD",
    "UNRECOGNIZED_FAMILY": "UNRECOGNIZED_FAMILY",
    "INVALID_FIELD": "INVALID_FIELD",
}

ErrorCodes = ERROR_CODES

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})
