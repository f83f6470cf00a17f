"""Shared test fixtures for kubespec tests."""

from __future__ import annotations

import logging

import pytest

# ---------------------------------------------------------------------------
# Definition names as emitted by real Kubernetes OpenAPI generators, one or
# more per package family.
# ---------------------------------------------------------------------------

CORE_NAMES = [
    "io.k8s.kubernetes.pkg.api.v1.Container",
    "io.k8s.kubernetes.pkg.api.v1.LimitRangeSpec",
    "io.k8s.api.pkg.api.v1beta1.PodSpec",
]

APIS_NAMES = [
    "io.k8s.kubernetes.pkg.apis.batch.v1.JobList",
    "io.k8s.kubernetes.pkg.apis.apps.v1beta1.Deployment",
    "io.k8s.apimachinery.pkg.apis.meta.v1.ObjectMeta",
]

UTIL_NAMES = [
    "io.k8s.apimachinery.pkg.util.intstr.IntOrString",
]

RUNTIME_NAMES = [
    "io.k8s.apimachinery.pkg.runtime.RawExtension",
]

VERSION_NAMES = [
    "io.k8s.apimachinery.pkg.version.Info",
]

ALL_NAMES = CORE_NAMES + APIS_NAMES + UTIL_NAMES + RUNTIME_NAMES + VERSION_NAMES


@pytest.fixture(params=ALL_NAMES)
def definition_name(request: pytest.FixtureRequest) -> str:
    """Each well-formed definition name in turn."""
    return request.param


@pytest.fixture
def reset_kubespec_logger():
    """Restore the kubespec logger level after a test changes it."""
    kubespec_logger = logging.getLogger("kubespec")
    level = kubespec_logger.level
    yield kubespec_logger
    kubespec_logger.setLevel(level)
