"""Turn structured definition name records back into dotted names."""

from __future__ import annotations

import logging
from typing import Any

from kubespec._types import DefinitionName
from kubespec.constants import NAME_PREFIX, PKG_SEGMENT, SEPARATOR
from kubespec.names.errors import MissingFieldError, UnrecognizedFamilyError
from kubespec.names.models import PackageFamily

logger = logging.getLogger(__name__)


def _require(name: Any, family: PackageFamily, field: str) -> str:
    value = getattr(name, field, None)
    if value is None:
        raise MissingFieldError(family.name, field)
    return value


def _join(codebase: str, family: PackageFamily, *rest: str) -> DefinitionName:
    return DefinitionName(SEPARATOR.join((*NAME_PREFIX, codebase, PKG_SEGMENT, family.value, *rest)))


def unparse(name: Any) -> DefinitionName:
    """Transform a parsed record back into its dotted definition name.

    Dispatches on ``name.family``. Works with the record classes from
    :mod:`kubespec.names.models` and with any object carrying the same
    attributes.

    Examples:
        >>> from kubespec.names.models import CoreName
        >>> unparse(CoreName(codebase="kubernetes", version="v1", kind="Container"))
        'io.k8s.kubernetes.pkg.api.v1.Container'

    Raises:
        MissingFieldError: If the codebase, kind, or a group or version the
            family needs is None.
        UnrecognizedFamilyError: If the family tag is not a PackageFamily.
    """
    family = getattr(name, "family", None)
    if not isinstance(family, PackageFamily):
        logger.debug("Failed to unparse definition name, did not recognize package family %r", family)
        raise UnrecognizedFamilyError(family)

    codebase = _require(name, family, "codebase")
    kind = _require(name, family, "kind")

    if family is PackageFamily.CORE:
        version = _require(name, family, "version")
        return _join(codebase, family, version, kind)
    if family is PackageFamily.UTIL:
        # Flat records carry the sub-package in the version slot.
        field = "subpackage" if hasattr(name, "subpackage") else "version"
        return _join(codebase, family, _require(name, family, field), kind)
    if family is PackageFamily.APIS:
        group = _require(name, family, "group")
        version = _require(name, family, "version")
        return _join(codebase, family, group, version, kind)
    # Version and Runtime names carry no group or version.
    return _join(codebase, family, kind)
