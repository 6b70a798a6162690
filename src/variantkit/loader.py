#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Building variant configurations from a project description file.

A description is a TOML or JSON document shaped like::

    variant_type = "default"            # or "library"
    dependencies = ["core"]             # direct libraries
    jars = ["libs/guava.jar"]

    [default]
    package_name = "com.example"
    source_set = { manifest = "src/main/AndroidManifest.xml", resources = "src/main/res" }

    [build_types.debug]
    package_name_suffix = ".debug"

    [flavors.free]
    version_name = "1.0-free"

    [libraries.core]
    folder = "libs/core"
    dependencies = ["util"]

    [test]                              # optional, for instrumentation tests
    source_set = { manifest = "src/test/AndroidManifest.xml" }

    [output]                            # library variants only
    folder = "build/bundles/release"

Relative paths are resolved against the description's directory.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
import tomllib
from typing import Any

from attrs import define, field
from provide.foundation import logger
from provide.foundation.errors import FoundationError
from provide.foundation.file.formats import read_json

from variantkit.config.defaults import MANIFEST_FILE
from variantkit.exceptions import DescriptionError
from variantkit.manifest import ManifestReader
from variantkit.model import (
    BuildTypeConfig,
    FlavorConfig,
    JarDependency,
    LibraryDependency,
    SourceSet,
    VariantType,
)
from variantkit.model.flavor import OVERRIDE_FIELDS
from variantkit.variant import VariantConfiguration

_BUILD_TYPE_FIELDS = ("debuggable", "jni_debug_build", "package_name_suffix", "zip_align")
_INT_FIELDS = frozenset({"version_code", "min_sdk_version", "target_sdk_version"})
_BOOL_FIELDS = frozenset({"debuggable", "jni_debug_build", "zip_align"})


@define
class VariantDescription:
    """A parsed project description and the directory its paths are relative to."""

    data: dict[str, Any]
    base_dir: Path
    _library_cache: dict[str, LibraryDependency] | None = field(default=None, init=False, repr=False)

    @property
    def variant_type(self) -> VariantType:
        raw = self.data.get("variant_type", VariantType.DEFAULT.value)
        try:
            variant_type = VariantType(raw)
        except ValueError as e:
            raise DescriptionError(f"Unknown variant_type '{raw}'") from e
        if variant_type is VariantType.TEST:
            raise DescriptionError("variant_type 'test' is not allowed; describe tests in a [test] table")
        return variant_type

    @property
    def build_type_names(self) -> list[str]:
        return list(self.data.get("build_types", {}))

    @property
    def flavor_names(self) -> list[str]:
        return list(self.data.get("flavors", {}))

    @property
    def has_test(self) -> bool:
        return "test" in self.data

    def build_variant(
        self,
        build_type: str,
        flavors: Sequence[str] = (),
        manifest_reader: ManifestReader | None = None,
    ) -> VariantConfiguration:
        """Build and fully configure the variant for a build type and flavors.

        Flavors are added in the given order, so the last one has the highest
        override priority.
        """
        default_table = self._table("default", self.data)
        build_type_table = self._table(build_type, self.data.get("build_types", {}), "build type")

        config = VariantConfiguration(
            _flavor(default_table, "main"),
            self._source_set(default_table, "main"),
            _build_type(build_type_table, build_type),
            self._source_set(build_type_table, build_type),
            self.variant_type,
            manifest_reader=manifest_reader,
        )
        for name in flavors:
            table = self._table(name, self.data.get("flavors", {}), "flavor")
            config.add_product_flavor(_flavor(table, name), self._source_set(table, name))

        libraries = self._libraries()
        config.set_jar_dependencies(JarDependency(self._path(jar)) for jar in self.data.get("jars", []))
        if config.variant_type is VariantType.LIBRARY and "output" in self.data:
            config.set_output(self._library("output", self._table("output", self.data), libraries))
        config.set_android_dependencies(self._lookup(self.data.get("dependencies", []), libraries))

        logger.debug("Variant built from description", variant=config.name, base_dir=str(self.base_dir))
        return config

    def build_test_variant(
        self,
        tested: VariantConfiguration,
        manifest_reader: ManifestReader | None = None,
    ) -> VariantConfiguration:
        """Build the instrumentation test variant of ``tested``.

        The [test] table overrides the project defaults, so values such as
        the instrumentation runner may live in either.
        """
        test_table = self._table("test", self.data)
        project_defaults = _flavor(self._table("default", self.data), "main")
        default_config = _flavor(test_table, "test").merge_over(project_defaults)
        config = VariantConfiguration(
            default_config,
            self._source_set(test_table, "test"),
            tested.build_type,
            tested.build_type_source_set,
            VariantType.TEST,
            tested,
            manifest_reader=manifest_reader,
        )
        for flavor, source_set in zip(tested.flavor_configs, tested.flavor_source_sets, strict=True):
            config.add_product_flavor(flavor, source_set)
        config.set_android_dependencies(
            self._lookup(test_table.get("dependencies", []), self._libraries())
        )
        return config

    def _table(self, name: str, parent: dict[str, Any], kind: str = "table") -> dict[str, Any]:
        table = parent.get(name)
        if not isinstance(table, dict):
            raise DescriptionError(f"Missing {kind} '{name}' in variant description")
        return table

    def _path(self, value: str) -> Path:
        return self.base_dir / value

    def _source_set(self, table: dict[str, Any], name: str) -> SourceSet:
        raw = table.get("source_set", {})
        manifest = raw.get("manifest", f"src/{name}/{MANIFEST_FILE}")
        resources = raw.get("resources")
        return SourceSet(
            name=name,
            manifest=self._path(manifest),
            resources=self._path(resources) if resources else None,
            compile_classpath=[self._path(entry) for entry in raw.get("compile_classpath", [])],
        )

    def _libraries(self) -> dict[str, LibraryDependency]:
        """Instantiate every declared library once, dependencies first.

        Libraries are compared by identity, so every variant built from this
        description shares the same instances.
        """
        if self._library_cache is not None:
            return self._library_cache

        tables = self.data.get("libraries", {})
        built: dict[str, LibraryDependency] = {}
        building: set[str] = set()

        def build(name: str) -> LibraryDependency:
            if name in built:
                return built[name]
            if name in building:
                raise DescriptionError(f"Library dependency cycle through '{name}'")
            building.add(name)
            table = self._table(name, tables, "library")
            for dependency in table.get("dependencies", []):
                build(dependency)
            built[name] = self._library(name, table, built)
            building.discard(name)
            return built[name]

        for name in tables:
            build(name)
        self._library_cache = built
        return built

    def _library(
        self, name: str, table: dict[str, Any], libraries: dict[str, LibraryDependency]
    ) -> LibraryDependency:
        dependencies = self._lookup(table.get("dependencies", []), libraries)
        if "folder" in table:
            return LibraryDependency.from_folder(name, self._path(table["folder"]), dependencies)

        try:
            manifest = self._path(table["manifest"])
            jar_file = self._path(table["jar_file"])
        except KeyError as e:
            raise DescriptionError(f"Library '{name}' needs 'folder' or {e.args[0]!r}") from e
        res_folder = table.get("res_folder")
        return LibraryDependency(
            name=name,
            manifest=manifest,
            jar_file=jar_file,
            res_folder=self._path(res_folder) if res_folder else None,
            dependencies=dependencies,
        )

    def _lookup(self, names: Sequence[str], libraries: dict[str, LibraryDependency]) -> list[LibraryDependency]:
        missing = [name for name in names if name not in libraries]
        if missing:
            raise DescriptionError(f"Unknown libraries: {', '.join(missing)}")
        return [libraries[name] for name in names]


def load_description(path: Path) -> VariantDescription:
    """Load a TOML or JSON variant description."""
    try:
        if path.suffix == ".json":
            data = read_json(path)
        else:
            with path.open("rb") as f:
                data = tomllib.load(f)
    except (OSError, ValueError, FoundationError) as e:
        raise DescriptionError(f"Cannot read variant description {path}: {e}") from e

    if not isinstance(data, dict):
        raise DescriptionError(f"Variant description {path} must be a table")
    return VariantDescription(data=data, base_dir=path.parent.absolute())


def _expected_type(key: str) -> type:
    if key in _INT_FIELDS:
        return int
    if key in _BOOL_FIELDS:
        return bool
    return str


def _fields(table: dict[str, Any], name: str, keys: Sequence[str]) -> dict[str, Any]:
    """Pick the known keys of a table, checking each value's type."""
    values = {}
    for key in keys:
        if key not in table:
            continue
        value = table[key]
        expected = _expected_type(key)
        # bool is an int subclass; a flag is never a valid number
        if not isinstance(value, expected) or (expected is int and isinstance(value, bool)):
            raise DescriptionError(
                f"'{key}' of '{name}' must be {expected.__name__}, got {type(value).__name__}"
            )
        values[key] = value
    return values


def _flavor(table: dict[str, Any], name: str) -> FlavorConfig:
    return FlavorConfig(name=name, **_fields(table, name, OVERRIDE_FIELDS))


def _build_type(table: dict[str, Any], name: str) -> BuildTypeConfig:
    return BuildTypeConfig(name=name, **_fields(table, name, _BUILD_TYPE_FIELDS))


# 🌶️📦🔚
