"""kubespec: parse and rebuild Kubernetes OpenAPI definition names."""

from __future__ import annotations

import logging

from kubespec._types import DefinitionName
from kubespec.constants import ERROR_CODES, FAMILY_MIN_SEGMENTS, VALID_LOG_LEVELS
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
from kubespec.names.models import (
    APIsName,
    CoreName,
    PackageFamily,
    ParsedDefinitionName,
    RuntimeName,
    UtilName,
    VersionName,
    from_dict,
    to_dict,
)
from kubespec.names.parser import is_definition_name, parse, parse_definition_name
from kubespec.names.unparser import unparse

__all__ = [
    # Public API
    "parse",
    "parse_definition_name",
    "unparse",
    "is_definition_name",
    "to_dict",
    "from_dict",
    "configure_logging",
    # Records
    "DefinitionName",
    "PackageFamily",
    "ParsedDefinitionName",
    "CoreName",
    "APIsName",
    "UtilName",
    "RuntimeName",
    "VersionName",
    # Errors
    "DefinitionNameError",
    "ParseError",
    "TooFewSegmentsError",
    "BadPrefixError",
    "UnknownFamilyKeywordError",
    "TrailingSegmentsError",
    "UnparseError",
    "MissingFieldError",
    "UnrecognizedFamilyError",
    "InvalidFieldError",
    # Constants
    "ERROR_CODES",
    "FAMILY_MIN_SEGMENTS",
]

__version__ = "0.1.0"

logger = logging.getLogger(__name__)


def configure_logging(log_level: str) -> None:
    """Set the log level for the kubespec logger (e.g. "DEBUG", "INFO").

    Handlers are left to the host application.
    """
    if log_level.upper() not in VALID_LOG_LEVELS:
        raise ValueError(f"Unknown log level: {log_level!r}. Valid: {sorted(VALID_LOG_LEVELS)}")
    logging.getLogger("kubespec").setLevel(getattr(logging, log_level.upper()))
    logger.debug("kubespec log level set to %s", log_level.upper())
