"""Internal type definitions and type aliases for kubespec."""

from __future__ import annotations

from typing import NewType

# Raw dotted identifier, e.g. "io.k8s.kubernetes.pkg.api.v1.Container"
DefinitionName = NewType("DefinitionName", str)
