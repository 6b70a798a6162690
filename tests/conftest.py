#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Shared pytest fixtures and helpers for variantkit tests."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from pathlib import Path

import provide.testkit  # noqa: F401 - Installs setproctitle blocker early
from provide.testkit.logger import reset_foundation_setup_for_testing
import pytest

from variantkit.model import BuildTypeConfig, FlavorConfig, LibraryDependency, SourceSet, VariantType
from variantkit.variant import VariantConfiguration


class FakeManifestReader:
    """Manifest reader answering from a dict instead of parsing XML."""

    def __init__(self, packages: dict[Path, str] | None = None) -> None:
        self.packages = dict(packages or {})
        self.calls: list[Path] = []

    def get_package(self, manifest: Path) -> str | None:
        self.calls.append(manifest)
        return self.packages.get(manifest)


def library(name: str, *dependencies: LibraryDependency, res: bool = True) -> LibraryDependency:
    """Create a library rooted under /libs/<name>."""
    root = Path("/libs") / name
    return LibraryDependency(
        name=name,
        manifest=root / "AndroidManifest.xml",
        jar_file=root / "classes.jar",
        res_folder=root / "res" if res else None,
        dependencies=dependencies,
    )


def names(libraries: object) -> list[str]:
    return [lib.name for lib in libraries]  # type: ignore[attr-defined]


@pytest.fixture(autouse=True)
def reset_foundation_logging() -> Iterator[None]:
    """Reset foundation logging state before each test to avoid conflicts."""
    reset_foundation_setup_for_testing()
    yield
    reset_foundation_setup_for_testing()


@pytest.fixture
def main_manifest(tmp_path: Path) -> Path:
    """A real main manifest declaring com.example."""
    manifest = tmp_path / "src" / "main" / "AndroidManifest.xml"
    manifest.parent.mkdir(parents=True)
    manifest.write_text('<manifest package="com.example" />\n')
    return manifest


@pytest.fixture
def manifest_reader(main_manifest: Path) -> FakeManifestReader:
    return FakeManifestReader({main_manifest: "com.example"})


@pytest.fixture
def make_variant(
    main_manifest: Path, manifest_reader: FakeManifestReader
) -> Callable[..., VariantConfiguration]:
    """Factory for variants sharing the main manifest and fake reader."""

    def factory(
        default: FlavorConfig | None = None,
        build_type: BuildTypeConfig | None = None,
        variant_type: VariantType = VariantType.DEFAULT,
        tested: VariantConfiguration | None = None,
        default_source_set: SourceSet | None = None,
        build_type_source_set: SourceSet | None = None,
    ) -> VariantConfiguration:
        return VariantConfiguration(
            default or FlavorConfig(name="main"),
            default_source_set or SourceSet(name="main", manifest=main_manifest),
            build_type or BuildTypeConfig(name="debug"),
            build_type_source_set or SourceSet(name="debug", manifest=Path("/src/debug/AndroidManifest.xml")),
            variant_type,
            tested,
            manifest_reader=manifest_reader,
        )

    return factory


PROJECT_DESCRIPTION = """\
variant_type = "{variant_type}"
dependencies = ["core", "ui"]
jars = ["libs/guava.jar"]

[default]
min_sdk_version = 14
source_set = {{ manifest = "src/main/AndroidManifest.xml", resources = "src/main/res", compile_classpath = ["libs/android.jar"] }}

[build_types.debug]
package_name_suffix = ".debug"
debuggable = true

[build_types.release]

[flavors.free]
version_name = "1.0-free"
source_set = {{ resources = "src/free/res" }}

[flavors.paid]
package_name = "com.example.paid"

[libraries.util]
manifest = "libs/util/AndroidManifest.xml"
jar_file = "libs/util/classes.jar"
res_folder = "libs/util/res"

[libraries.core]
folder = "libs/core"
dependencies = ["util"]

[libraries.ui]
folder = "libs/ui"

[test]
test_instrumentation_runner = "com.example.Runner"
dependencies = ["util"]
source_set = {{ manifest = "src/androidTest/AndroidManifest.xml" }}

[output]
folder = "build/bundle"
"""


@pytest.fixture
def write_project(tmp_path: Path) -> Callable[..., Path]:
    """Factory laying out a small project and returning its description file."""

    def factory(variant_type: str = "default") -> Path:
        project = tmp_path / "project"
        for relative, package in [
            ("src/main", "com.example"),
            ("libs/util", "com.util"),
            ("libs/core", "com.core"),
            ("libs/ui", "com.ui"),
            ("build/bundle", "com.example"),
        ]:
            folder = project / relative
            folder.mkdir(parents=True, exist_ok=True)
            (folder / "AndroidManifest.xml").write_text(f'<manifest package="{package}" />\n')
        (project / "libs" / "core" / "res").mkdir()
        description = project / "variants.toml"
        description.write_text(PROJECT_DESCRIPTION.format(variant_type=variant_type))
        return description

    return factory


# 🌶️📦🔚
