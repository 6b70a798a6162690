#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Tests for the override chain and package name resolution."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from tests.conftest import FakeManifestReader, library
from variantkit.config.defaults import DEFAULT_TEST_RUNNER
from variantkit.exceptions import UnresolvedPackageNameError
from variantkit.model import BuildTypeConfig, FlavorConfig, SourceSet, VariantType
from variantkit.resolution import compose_package_name, merge_flavors
from variantkit.variant import VariantConfiguration

MakeVariant = Callable[..., VariantConfiguration]


class TestMergeFlavors:
    """Test folding flavors over the default config."""

    @pytest.mark.unit
    def test_no_flavors_returns_default(self) -> None:
        default = FlavorConfig(name="main", package_name="com.example")
        assert merge_flavors([], default) is default

    @pytest.mark.unit
    def test_last_flavor_wins(self) -> None:
        default = FlavorConfig(name="main", version_name="1.0")
        f1 = FlavorConfig(name="f1", package_name="com.f1", min_sdk_version=14)
        f2 = FlavorConfig(name="f2", package_name="com.f2")

        merged = merge_flavors([f1, f2], default)

        assert merged.package_name == "com.f2"
        assert merged.min_sdk_version == 14
        assert merged.version_name == "1.0"

    @pytest.mark.unit
    def test_unset_everywhere_stays_unset(self) -> None:
        merged = merge_flavors([FlavorConfig(name="f1")], FlavorConfig(name="main"))
        assert merged.test_instrumentation_runner is None


class TestComposePackageName:
    """Test package suffix composition."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        ("base", "suffix", "expected"),
        [
            ("com.example", ".debug", "com.example.debug"),
            ("com.example", "debug", "com.example.debug"),
            ("com.example", "", "com.example"),
            ("com.example", None, "com.example"),
        ],
    )
    def test_compose(self, base: str, suffix: str | None, expected: str) -> None:
        assert compose_package_name(base, suffix) == expected


class TestPackageName:
    """Test package name resolution of non-test variants."""

    @pytest.mark.unit
    def test_from_manifest(self, make_variant: MakeVariant) -> None:
        config = make_variant()
        assert config.package_override is None
        assert config.package_name == "com.example"

    @pytest.mark.unit
    def test_flavor_override(self, make_variant: MakeVariant) -> None:
        config = make_variant()
        config.add_product_flavor(
            FlavorConfig(name="free", package_name="com.example.free"),
            SourceSet(name="free", manifest=Path("/src/free/AndroidManifest.xml")),
        )
        assert config.package_name == "com.example.free"

    @pytest.mark.unit
    def test_build_type_suffix_on_manifest_package(self, make_variant: MakeVariant) -> None:
        config = make_variant(build_type=BuildTypeConfig(name="debug", package_name_suffix="debug"))
        assert config.package_override == "com.example.debug"
        assert config.package_name == "com.example.debug"

    @pytest.mark.unit
    def test_build_type_suffix_on_override(self, make_variant: MakeVariant) -> None:
        config = make_variant(
            default=FlavorConfig(name="main", package_name="com.other"),
            build_type=BuildTypeConfig(name="debug", package_name_suffix=".debug"),
        )
        assert config.package_name == "com.other.debug"

    @pytest.mark.unit
    def test_manifest_without_package(self, make_variant: MakeVariant, manifest_reader: FakeManifestReader) -> None:
        manifest_reader.packages.clear()
        config = make_variant()

        with pytest.raises(UnresolvedPackageNameError):
            _ = config.package_name

    @pytest.mark.unit
    def test_manifest_not_read_when_overridden(
        self, make_variant: MakeVariant, manifest_reader: FakeManifestReader
    ) -> None:
        config = make_variant(default=FlavorConfig(name="main", package_name="com.other"))

        assert config.package_name == "com.other"
        assert manifest_reader.calls == []


class TestTestPackageName:
    """Test package name resolution of test variants."""

    @pytest.mark.unit
    def test_test_of_app_appends_test(self, make_variant: MakeVariant) -> None:
        app = make_variant()
        test = make_variant(variant_type=VariantType.TEST, tested=app)

        assert test.package_name == "com.example.test"
        assert test.tested_package_name == "com.example"

    @pytest.mark.unit
    def test_test_of_suffixed_app(self, make_variant: MakeVariant) -> None:
        app = make_variant(build_type=BuildTypeConfig(name="debug", package_name_suffix=".debug"))
        test = make_variant(variant_type=VariantType.TEST, tested=app)

        assert test.package_name == "com.example.debug.test"
        assert test.tested_package_name == "com.example.debug"

    @pytest.mark.unit
    def test_explicit_test_package_name(self, make_variant: MakeVariant) -> None:
        app = make_variant()
        test = make_variant(
            default=FlavorConfig(name="test", test_package_name="com.example.tests"),
            variant_type=VariantType.TEST,
            tested=app,
        )
        assert test.package_name == "com.example.tests"

    @pytest.mark.unit
    def test_test_of_library_tests_its_own_package(self, make_variant: MakeVariant) -> None:
        lib = make_variant(variant_type=VariantType.LIBRARY)
        lib.set_output(library("lib-output"))
        test = make_variant(variant_type=VariantType.TEST, tested=lib)

        assert test.package_name == "com.example.test"
        assert test.tested_package_name == test.package_name

    @pytest.mark.unit
    def test_test_of_library_with_explicit_test_package(self, make_variant: MakeVariant) -> None:
        lib = make_variant(variant_type=VariantType.LIBRARY)
        lib.set_output(library("lib-output"))
        test = make_variant(
            default=FlavorConfig(name="test", test_package_name="com.example"),
            variant_type=VariantType.TEST,
            tested=lib,
        )

        assert test.package_name == "com.example"
        assert test.tested_package_name == "com.example"

    @pytest.mark.unit
    def test_non_test_variant_has_no_tested_package(self, make_variant: MakeVariant) -> None:
        assert make_variant().tested_package_name is None


class TestInstrumentationRunner:
    """Test instrumentation runner resolution."""

    @pytest.mark.unit
    def test_default_runner(self, make_variant: MakeVariant) -> None:
        assert make_variant().instrumentation_runner == DEFAULT_TEST_RUNNER

    @pytest.mark.unit
    def test_flavor_runner_wins(self, make_variant: MakeVariant) -> None:
        config = make_variant(default=FlavorConfig(name="main", test_instrumentation_runner="com.Runner"))
        config.add_product_flavor(
            FlavorConfig(name="paid", test_instrumentation_runner="com.PaidRunner"),
            SourceSet(name="paid", manifest=Path("/src/paid/AndroidManifest.xml")),
        )
        assert config.instrumentation_runner == "com.PaidRunner"


class TestLibraryPackages:
    """Test the aapt library package list."""

    @pytest.mark.unit
    def test_none_without_libraries(self, make_variant: MakeVariant) -> None:
        assert make_variant().library_packages is None

    @pytest.mark.unit
    def test_joined_in_flattened_order(self, make_variant: MakeVariant, manifest_reader: FakeManifestReader) -> None:
        util = library("util")
        core = library("core", util)
        manifest_reader.packages[core.manifest] = "com.core"
        manifest_reader.packages[util.manifest] = "com.util"
        config = make_variant()

        config.set_android_dependencies([core])

        assert config.library_packages == "com.core:com.util"

    @pytest.mark.unit
    def test_library_without_package(self, make_variant: MakeVariant) -> None:
        config = make_variant()
        config.set_android_dependencies([library("core")])

        with pytest.raises(UnresolvedPackageNameError, match="core"):
            _ = config.library_packages


# 🌶️📦🔚
