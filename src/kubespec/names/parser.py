"""Parse dotted OpenAPI definition names into structured records."""

from __future__ import annotations

import logging

from kubespec.constants import (
    FAMILY_KEYWORD_INDEX,
    FAMILY_MIN_SEGMENTS,
    MIN_SEGMENTS,
    NAME_PREFIX,
    PKG_SEGMENT,
    SEPARATOR,
)
from kubespec.names.errors import (
    BadPrefixError,
    ParseError,
    TooFewSegmentsError,
    TrailingSegmentsError,
    UnknownFamilyKeywordError,
)
from kubespec.names.models import (
    APIsName,
    CoreName,
    PackageFamily,
    ParsedDefinitionName,
    RuntimeName,
    UtilName,
    VersionName,
)

logger = logging.getLogger(__name__)


def parse_definition_name(name: str, *, strict: bool = False) -> ParsedDefinitionName:
    """Parse a definition name such as ``io.k8s.kubernetes.pkg.api.v1.Container``.

    The segment after ``pkg`` selects the package family, which fixes how
    many segments follow and what they mean. The kind is always exactly one
    segment; anything after it is dropped unless ``strict`` is set.

    Args:
        name: The dotted definition name.
        strict: Reject names with segments after the kind instead of
            dropping them.

    Returns:
        The family-specific record (CoreName, APIsName, UtilName,
        RuntimeName or VersionName).

    Examples:
        >>> parse_definition_name("io.k8s.kubernetes.pkg.apis.batch.v1.JobList")
        APIsName(codebase='kubernetes', group='batch', version='v1', kind='JobList')

    Raises:
        TooFewSegmentsError: If the name is shorter than its family requires.
        BadPrefixError: If the name does not start with ``io.k8s.<codebase>.pkg``.
        UnknownFamilyKeywordError: If the family keyword is not recognised.
        TrailingSegmentsError: If ``strict`` and segments follow the kind.
    """
    try:
        return _parse(name, strict)
    except ParseError as exc:
        logger.debug("Rejected definition name %r: %s", name, exc.code)
        raise


def _parse(name: str, strict: bool) -> ParsedDefinitionName:
    split = name.split(SEPARATOR)
    if len(split) < MIN_SEGMENTS:
        raise TooFewSegmentsError(name, len(split), MIN_SEGMENTS)
    if (split[0], split[1]) != NAME_PREFIX or split[3] != PKG_SEGMENT:
        raise BadPrefixError(name)

    codebase = split[2]
    keyword = split[FAMILY_KEYWORD_INDEX]

    required = FAMILY_MIN_SEGMENTS.get(keyword)
    if required is None:
        raise UnknownFamilyKeywordError(name, keyword)
    if len(split) < required:
        raise TooFewSegmentsError(name, len(split), required)

    trailing = split[required:]
    if trailing:
        if strict:
            raise TrailingSegmentsError(name, trailing)
        logger.debug("Dropping trailing segments %r from definition name %r", trailing, name)

    family = PackageFamily(keyword)
    if family is PackageFamily.CORE:
        # e.g. io.k8s.kubernetes.pkg.api.v1.LimitRangeSpec
        return CoreName(codebase=codebase, version=split[5], kind=split[6])
    if family is PackageFamily.APIS:
        # e.g. io.k8s.kubernetes.pkg.apis.batch.v1.JobList
        return APIsName(codebase=codebase, group=split[5], version=split[6], kind=split[7])
    if family is PackageFamily.UTIL:
        # e.g. io.k8s.apimachinery.pkg.util.intstr.IntOrString
        return UtilName(codebase=codebase, subpackage=split[5], kind=split[6])
    if family is PackageFamily.RUNTIME:
        # e.g. io.k8s.apimachinery.pkg.runtime.RawExtension
        return RuntimeName(codebase=codebase, kind=split[5])
    # e.g. io.k8s.apimachinery.pkg.version.Info
    return VersionName(codebase=codebase, kind=split[5])


# Short alias, the inverse of ``unparse``.
parse = parse_definition_name


def is_definition_name(name: str) -> bool:
    """Return True if ``name`` parses as a definition name."""
    try:
        parse_definition_name(name)
    except ParseError:
        return False
    return True
