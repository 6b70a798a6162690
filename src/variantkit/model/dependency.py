#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Library and jar dependencies of a variant."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from attrs import define, field

from variantkit.config.defaults import MANIFEST_FILE
from variantkit.model.source_set import optional_path


@define(frozen=True, eq=False)
class LibraryDependency:
    """A library module in the dependency graph.

    Two dependencies are the same only if they are the same object: equality
    and hashing are by identity, never by name.
    """

    name: str
    manifest: Path = field(converter=Path)
    jar_file: Path = field(converter=Path)
    res_folder: Path | None = field(default=None, converter=optional_path)
    dependencies: tuple[LibraryDependency, ...] = field(factory=tuple, converter=tuple)

    @classmethod
    def from_folder(
        cls,
        name: str,
        folder: Path,
        dependencies: Iterable[LibraryDependency] = (),
    ) -> LibraryDependency:
        """Create a dependency from an exploded library folder.

        Uses the conventional layout: ``AndroidManifest.xml``, ``classes.jar``
        and ``res/``. A missing ``res/`` folder is recorded as absent.
        """
        res_folder = folder / "res"
        return cls(
            name=name,
            manifest=folder / MANIFEST_FILE,
            jar_file=folder / "classes.jar",
            res_folder=res_folder if res_folder.is_dir() else None,
            dependencies=dependencies,
        )


@define(frozen=True)
class JarDependency:
    """A plain jar dependency; takes no part in library flattening."""

    jar_file: Path = field(converter=Path)
    compiled: bool = True
    packaged: bool = True


# 🌶️📦🔚
