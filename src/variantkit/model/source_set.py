#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Source sets attached to the default config, build types and flavors."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from attrs import define, field


def optional_path(value: str | Path | None) -> Path | None:
    return Path(value) if value is not None else None


def _path_set(values: Iterable[str | Path]) -> frozenset[Path]:
    return frozenset(Path(value) for value in values)


@define(frozen=True)
class SourceSet:
    """Read-only view of one source set: manifest, resources and classpath."""

    name: str
    manifest: Path = field(converter=Path)
    resources: Path | None = field(default=None, converter=optional_path)
    compile_classpath: frozenset[Path] = field(factory=frozenset, converter=_path_set)


# 🌶️📦🔚
