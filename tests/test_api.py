"""Tests for the kubespec public API surface."""

from __future__ import annotations

import logging

import pytest

import kubespec
from kubespec import (
    APIsName,
    CoreName,
    PackageFamily,
    RuntimeName,
    UnknownFamilyKeywordError,
    VersionName,
    configure_logging,
    parse,
    unparse,
)


class TestScenarios:
    """End-to-end parse and unparse through the package root."""

    def test_core_container(self) -> None:
        assert parse("io.k8s.kubernetes.pkg.api.v1.Container") == CoreName("kubernetes", "v1", "Container")

    def test_apis_job_list(self) -> None:
        assert parse("io.k8s.kubernetes.pkg.apis.batch.v1.JobList") == APIsName("kubernetes", "batch", "v1", "JobList")

    def test_runtime_raw_extension(self) -> None:
        assert parse("io.k8s.apimachinery.pkg.runtime.RawExtension") == RuntimeName("apimachinery", "RawExtension")

    def test_version_info(self) -> None:
        result = parse("io.k8s.apimachinery.pkg.version.Info")
        assert result == VersionName("apimachinery", "Info")
        assert result.family is PackageFamily.VERSION

    def test_unknown_family(self) -> None:
        with pytest.raises(UnknownFamilyKeywordError):
            parse("io.k8s.x.pkg.weird.v1.Foo")

    def test_unparse_apis_job_list(self) -> None:
        name = APIsName(codebase="kubernetes", group="batch", version="v1", kind="JobList")
        assert unparse(name) == "io.k8s.kubernetes.pkg.apis.batch.v1.JobList"


class TestPublicExports:
    """Everything in __all__ is importable from the package root."""

    def test_all_exports_exist(self) -> None:
        for name in kubespec.__all__:
            assert hasattr(kubespec, name), f"kubespec.{name} missing"

    def test_version(self) -> None:
        assert kubespec.__version__ == "0.1.0"


class TestConfigureLogging:
    """configure_logging sets the kubespec logger level."""

    def test_sets_level(self, reset_kubespec_logger: logging.Logger) -> None:
        configure_logging("debug")
        assert reset_kubespec_logger.level == logging.DEBUG

    def test_rejects_unknown_level(self, reset_kubespec_logger: logging.Logger) -> None:
        with pytest.raises(ValueError, match="Unknown log level"):
            configure_logging("LOUD")
