#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Immutable inputs of a variant: flavors, build types, source sets and dependencies."""

from __future__ import annotations

from enum import Enum

from variantkit.model.build_type import BuildTypeConfig
from variantkit.model.dependency import JarDependency, LibraryDependency
from variantkit.model.flavor import FlavorConfig, is_set
from variantkit.model.source_set import SourceSet


class VariantType(Enum):
    """Kind of variant being resolved."""

    DEFAULT = "default"
    LIBRARY = "library"
    TEST = "test"


__all__ = [
    "BuildTypeConfig",
    "FlavorConfig",
    "JarDependency",
    "LibraryDependency",
    "SourceSet",
    "VariantType",
    "is_set",
]

# 🌶️📦🔚
