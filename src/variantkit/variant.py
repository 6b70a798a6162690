#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""The variant configuration aggregate."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from provide.foundation import logger

from variantkit.exceptions import StructuralInvariantViolation
from variantkit.manifest import ManifestReader, XmlManifestReader
from variantkit.model import (
    BuildTypeConfig,
    FlavorConfig,
    JarDependency,
    LibraryDependency,
    SourceSet,
    VariantType,
)
from variantkit.resolution.dependencies import flatten_dependencies, full_direct_dependencies
from variantkit.resolution.inputs import compile_classpath, resource_inputs
from variantkit.resolution.overrides import (
    library_packages,
    package_from_manifest,
    package_override,
    resolve_instrumentation_runner,
    resolve_package_name,
    resolve_tested_package_name,
)
from variantkit.validation import FileCheck, check_tested_config, validate_variant


class VariantConfiguration:
    """One build variant: default config, build type, flavors and libraries.

    The variant is built once from its default and build type layers, then
    configured through ``add_product_flavor``, ``set_android_dependencies``,
    ``set_jar_dependencies`` and ``set_output``. Derived state (the merged
    flavor and the flattened library list) is recomputed eagerly on each of
    those calls. After configuration the variant is only read.

    Not thread-safe; separate variants may be resolved on separate threads.
    """

    def __init__(
        self,
        default_config: FlavorConfig,
        default_source_set: SourceSet,
        build_type: BuildTypeConfig,
        build_type_source_set: SourceSet,
        variant_type: VariantType = VariantType.DEFAULT,
        tested_config: VariantConfiguration | None = None,
        *,
        manifest_reader: ManifestReader | None = None,
        is_file: FileCheck = Path.is_file,
    ) -> None:
        """Create the configuration with its base layers.

        Args:
            default_config: Default flavor, lowest override priority
            default_source_set: Main source set, holds the main manifest
            build_type: Build type layer
            build_type_source_set: Source set of the build type
            variant_type: Kind of variant
            tested_config: Variant under test, required iff ``variant_type`` is TEST
            manifest_reader: Reader used for manifest package lookups
            is_file: Predicate used to check the main manifest exists

        Raises:
            StructuralInvariantViolation: If type and tested config disagree
            MissingManifestError: If a non-test variant has no main manifest
        """
        check_tested_config(variant_type, tested_config)

        self._default_config = default_config
        self._default_source_set = default_source_set
        self._build_type = build_type
        self._build_type_source_set = build_type_source_set
        self._variant_type = variant_type
        self._tested_config = tested_config
        self._manifest_reader: ManifestReader = manifest_reader or XmlManifestReader()

        self._flavor_configs: list[FlavorConfig] = []
        self._flavor_source_sets: list[SourceSet] = []
        self._merged_flavor = default_config

        self._output: LibraryDependency | None = None
        self._direct_libraries: list[LibraryDependency] = []
        self._flat_libraries: list[LibraryDependency] = []
        self._jars: list[JarDependency] = []

        validate_variant(self, is_file=is_file)

    # Configuration phase

    def add_product_flavor(self, flavor: FlavorConfig, source_set: SourceSet) -> None:
        """Add a configured flavor.

        For overrides the most recently added flavor wins. For resource
        overlays, earlier added flavors supersede later ones.
        """
        self._flavor_configs.append(flavor)
        self._flavor_source_sets.append(source_set)
        self._merged_flavor = flavor.merge_over(self._merged_flavor)
        logger.debug("Flavor added", variant=self.name, flavor=flavor.name)

    def set_android_dependencies(self, direct_libraries: Iterable[LibraryDependency]) -> None:
        """Set the direct library dependencies and flatten them.

        Each library carries its own dependencies.
        """
        self._direct_libraries = list(direct_libraries)
        self._flat_libraries = flatten_dependencies(full_direct_dependencies(self))
        logger.debug(
            "Library dependencies resolved",
            variant=self.name,
            direct=len(self._direct_libraries),
            flat=len(self._flat_libraries),
        )

    def set_jar_dependencies(self, jars: Iterable[JarDependency]) -> None:
        self._jars = list(jars)

    def set_output(self, output: LibraryDependency) -> None:
        """Set the library produced by this variant, so its tests can depend on it."""
        if self._variant_type is not VariantType.LIBRARY:
            raise StructuralInvariantViolation(
                f"Only library variants have an output, got {self._variant_type.value}"
            )
        self._output = output

    # Inputs

    @property
    def name(self) -> str:
        """Variant name: flavor names followed by the build type name."""
        parts = [flavor.name for flavor in self._flavor_configs]
        parts.append(self._build_type.name)
        if self._variant_type is VariantType.TEST:
            parts.append("test")
        return "-".join(parts)

    @property
    def default_config(self) -> FlavorConfig:
        return self._default_config

    @property
    def default_source_set(self) -> SourceSet:
        return self._default_source_set

    @property
    def build_type(self) -> BuildTypeConfig:
        return self._build_type

    @property
    def build_type_source_set(self) -> SourceSet:
        return self._build_type_source_set

    @property
    def flavor_configs(self) -> tuple[FlavorConfig, ...]:
        return tuple(self._flavor_configs)

    @property
    def flavor_source_sets(self) -> tuple[SourceSet, ...]:
        return tuple(self._flavor_source_sets)

    @property
    def has_flavors(self) -> bool:
        return bool(self._flavor_configs)

    @property
    def variant_type(self) -> VariantType:
        return self._variant_type

    @property
    def tested_config(self) -> VariantConfiguration | None:
        return self._tested_config

    @property
    def output(self) -> LibraryDependency | None:
        return self._output

    @property
    def manifest_reader(self) -> ManifestReader:
        return self._manifest_reader

    @property
    def direct_libraries(self) -> tuple[LibraryDependency, ...]:
        return tuple(self._direct_libraries)

    @property
    def has_libraries(self) -> bool:
        return bool(self._direct_libraries)

    @property
    def jar_dependencies(self) -> tuple[JarDependency, ...]:
        return tuple(self._jars)

    # Derived values

    @property
    def merged_flavor(self) -> FlavorConfig:
        return self._merged_flavor

    @property
    def flat_libraries(self) -> tuple[LibraryDependency, ...]:
        """All direct and indirect libraries, highest aapt priority first."""
        return tuple(self._flat_libraries)

    @property
    def full_direct_dependencies(self) -> list[LibraryDependency]:
        return full_direct_dependencies(self)

    @property
    def package_name(self) -> str:
        return resolve_package_name(self)

    @property
    def package_override(self) -> str | None:
        return package_override(self)

    @property
    def package_from_manifest(self) -> str:
        return package_from_manifest(self)

    @property
    def tested_package_name(self) -> str | None:
        return resolve_tested_package_name(self)

    @property
    def instrumentation_runner(self) -> str:
        return resolve_instrumentation_runner(self)

    @property
    def library_packages(self) -> str | None:
        return library_packages(self)

    @property
    def resource_inputs(self) -> list[Path]:
        return resource_inputs(self)

    @property
    def compile_classpath(self) -> set[Path]:
        return compile_classpath(self)

    def __repr__(self) -> str:
        return f"VariantConfiguration(name={self.name!r}, type={self._variant_type.value})"


# 🌶️📦🔚
