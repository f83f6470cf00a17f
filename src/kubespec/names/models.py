"""Structured forms of Kubernetes OpenAPI definition names.

A parsed name is one of five frozen dataclasses, one per package family.
Each variant declares only the fields its family has, so a ``group`` can
only ever appear on :class:`APIsName` and a version only on
:class:`CoreName`, :class:`APIsName` and :class:`UtilName`.
"""

from __future__ import annotations

import dataclasses
import enum
import functools
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Annotated, Any, ClassVar

from pydantic import StringConstraints, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from kubespec.names.errors import InvalidFieldError, MissingFieldError, UnrecognizedFamilyError

# A single dotted segment. May be empty, as the parser accepts "io.k8s..pkg...".
Segment = Annotated[str, StringConstraints(pattern=r"^[^.]*$")]


class PackageFamily(str, enum.Enum):
    """Package family of a definition, valued by its wire keyword."""

    # Kubernetes core objects, no API group.
    CORE = "api"
    # Non-core packages grouped by API group (apps, batch, extensions, ...).
    APIS = "apis"
    # Utilities used for both testing and running Kubernetes.
    UTIL = "util"
    # Utilities used in the Kubernetes runtime.
    RUNTIME = "runtime"
    # Version information collected at build time.
    VERSION = "version"

    def __str__(self) -> str:
        return self.value


class _DefinitionNameBase:
    """Behaviour shared by every parsed name variant."""

    family: ClassVar[PackageFamily]

    def unparse(self) -> str:
        """Return the dotted definition name for this record."""
        from kubespec.names.unparser import unparse

        return unparse(self)

    def to_dict(self) -> dict[str, Any]:
        return to_dict(self)


@dataclass(frozen=True)
class CoreName(_DefinitionNameBase):
    """``io.k8s.<codebase>.pkg.api.<version>.<kind>``"""

    family: ClassVar[PackageFamily] = PackageFamily.CORE

    codebase: Segment
    version: Segment
    kind: Segment


@dataclass(frozen=True)
class APIsName(_DefinitionNameBase):
    """``io.k8s.<codebase>.pkg.apis.<group>.<version>.<kind>``"""

    family: ClassVar[PackageFamily] = PackageFamily.APIS

    codebase: Segment
    group: Segment
    version: Segment
    kind: Segment


@dataclass(frozen=True)
class UtilName(_DefinitionNameBase):
    """``io.k8s.<codebase>.pkg.util.<subpackage>.<kind>``

    The segment after ``util`` names a sub-package (e.g. ``intstr``), not an
    API version. It is exposed as ``version`` too, because that is the slot
    it occupies in the flat view.
    """

    family: ClassVar[PackageFamily] = PackageFamily.UTIL

    codebase: Segment
    subpackage: Segment
    kind: Segment

    @property
    def version(self) -> str:
        return self.subpackage


@dataclass(frozen=True)
class RuntimeName(_DefinitionNameBase):
    """``io.k8s.<codebase>.pkg.runtime.<kind>``"""

    family: ClassVar[PackageFamily] = PackageFamily.RUNTIME

    codebase: Segment
    kind: Segment


@dataclass(frozen=True)
class VersionName(_DefinitionNameBase):
    """``io.k8s.<codebase>.pkg.version.<kind>``"""

    family: ClassVar[PackageFamily] = PackageFamily.VERSION

    codebase: Segment
    kind: Segment


ParsedDefinitionName = CoreName | APIsName | UtilName | RuntimeName | VersionName

VARIANTS: dict[PackageFamily, type[_DefinitionNameBase]] = {
    PackageFamily.CORE: CoreName,
    PackageFamily.APIS: APIsName,
    PackageFamily.UTIL: UtilName,
    PackageFamily.RUNTIME: RuntimeName,
    PackageFamily.VERSION: VersionName,
}


@functools.cache
def _adapter(cls: type) -> TypeAdapter[Any]:
    return TypeAdapter(cls)


def _coerce_family(value: Any) -> PackageFamily:
    """Accept a PackageFamily, its keyword ("apis") or its member name ("APIS")."""
    if isinstance(value, PackageFamily):
        return value
    try:
        return PackageFamily(value)
    except ValueError:
        pass
    if isinstance(value, str) and value.upper() in PackageFamily.__members__:
        return PackageFamily[value.upper()]
    raise UnrecognizedFamilyError(value)


def to_dict(name: ParsedDefinitionName) -> dict[str, Any]:
    """Return the flat five-field view of a parsed name.

    Fields a family does not have are ``None``. For Util names the
    sub-package is reported under ``"version"``.

    Examples:
        >>> to_dict(RuntimeName("apimachinery", "RawExtension"))["version"] is None
        True
    """
    family = getattr(name, "family", None)
    if family not in VARIANTS:
        raise UnrecognizedFamilyError(family)
    return {
        "family": family,
        "codebase": name.codebase,
        "group": getattr(name, "group", None),
        "version": getattr(name, "version", None),
        "kind": name.kind,
    }


def from_dict(data: Mapping[str, Any]) -> ParsedDefinitionName:
    """Build the parsed name variant described by ``data``.

    ``data`` uses the keys produced by :func:`to_dict`. Keys a family does not
    use are ignored. Util names accept either ``"subpackage"`` or
    ``"version"``.

    Raises:
        UnrecognizedFamilyError: If ``family`` is missing or unknown.
        MissingFieldError: If a field required by the family is missing or None.
        InvalidFieldError: If a field is not a string or contains a dot.
    """
    family = _coerce_family(data.get("family"))
    cls = VARIANTS[family]

    payload = dict(data)
    if family is PackageFamily.UTIL and payload.get("subpackage") is None:
        payload["subpackage"] = payload.get("version")

    values: dict[str, Any] = {}
    for f in dataclasses.fields(cls):
        if payload.get(f.name) is None:
            raise MissingFieldError(family.name, f.name)
        values[f.name] = payload[f.name]

    try:
        return _adapter(cls).validate_python(values)
    except PydanticValidationError as exc:
        errors = [
            {"field": ".".join(str(part) for part in err["loc"]), "message": err["msg"]}
            for err in exc.errors()
        ]
        raise InvalidFieldError(family.name, errors) from exc
