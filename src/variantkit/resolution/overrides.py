#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Override chain and package name resolution."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from provide.foundation import logger

from variantkit.config.defaults import (
    DEFAULT_TEST_RUNNER,
    LIBRARY_PACKAGES_SEPARATOR,
    PACKAGE_SEPARATOR,
    TEST_PACKAGE_SUFFIX,
)
from variantkit.exceptions import UnresolvedPackageNameError
from variantkit.model import FlavorConfig, VariantType, is_set

if TYPE_CHECKING:
    from variantkit.variant import VariantConfiguration


def merge_flavors(flavors: Iterable[FlavorConfig], default: FlavorConfig) -> FlavorConfig:
    """Fold flavors over the default config; the last declared flavor wins."""
    merged = default
    for flavor in flavors:
        merged = flavor.merge_over(merged)
    return merged


def compose_package_name(base: str, suffix: str | None) -> str:
    """Append a package suffix, inserting a separator unless it has one."""
    if not suffix:
        return base
    if suffix.startswith(PACKAGE_SEPARATOR):
        return base + suffix
    return base + PACKAGE_SEPARATOR + suffix


def package_from_manifest(config: VariantConfiguration) -> str:
    """Read the package name from the default source set's manifest."""
    manifest = config.default_source_set.manifest
    package = config.manifest_reader.get_package(manifest)
    if not package:
        raise UnresolvedPackageNameError(f"No package name declared in manifest {manifest}")
    return package


def package_override(config: VariantConfiguration) -> str | None:
    """Return the package name coming from flavors and the build type suffix.

    Returns None when the package is not overridden at all. A build type suffix
    without a flavor package name is applied to the manifest's package.
    """
    package_name = config.merged_flavor.package_name
    suffix = config.build_type.package_name_suffix

    if is_set(suffix):
        if not is_set(package_name):
            package_name = package_from_manifest(config)
        return compose_package_name(package_name, suffix)

    return package_name if is_set(package_name) else None


def resolve_package_name(config: VariantConfiguration) -> str:
    """Return the package name of a variant.

    Test variants use the merged test package override, else the tested
    variant's package plus ``.test``. Other variants use the override chain,
    falling back to the manifest.
    """
    if config.variant_type is VariantType.TEST:
        package_name = config.merged_flavor.test_package_name
        if not is_set(package_name):
            package_name = resolve_package_name(config.tested_config) + TEST_PACKAGE_SUFFIX
    else:
        package_name = package_override(config)
        if package_name is None:
            package_name = package_from_manifest(config)

    logger.debug("Resolved package name", variant=config.name, package=package_name)
    return package_name


def resolve_tested_package_name(config: VariantConfiguration) -> str | None:
    """Return the package under test, or None for non-test variants.

    A test of a library is packaged together with the library, so it tests
    its own package.
    """
    if config.variant_type is not VariantType.TEST:
        return None

    tested = config.tested_config
    if tested.variant_type is VariantType.LIBRARY:
        return resolve_package_name(config)
    return resolve_package_name(tested)


def resolve_instrumentation_runner(config: VariantConfiguration) -> str:
    runner = config.merged_flavor.test_instrumentation_runner
    return runner if is_set(runner) else DEFAULT_TEST_RUNNER


def library_packages(config: VariantConfiguration) -> str | None:
    """Return the flattened libraries' packages joined for aapt, or None without libraries."""
    libraries = config.flat_libraries
    if not libraries:
        return None

    packages = []
    for library in libraries:
        package = config.manifest_reader.get_package(library.manifest)
        if not package:
            raise UnresolvedPackageNameError(
                f"No package name declared in manifest {library.manifest} of library '{library.name}'"
            )
        packages.append(package)
    return LIBRARY_PACKAGES_SEPARATOR.join(packages)


# 🌶️📦🔚
