"""Names: definition name records, parser, unparser and errors."""

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
    "PackageFamily",
    "ParsedDefinitionName",
    "CoreName",
    "APIsName",
    "UtilName",
    "RuntimeName",
    "VersionName",
    "parse",
    "parse_definition_name",
    "is_definition_name",
    "unparse",
    "to_dict",
    "from_dict",
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
]
