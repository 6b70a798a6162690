#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""variantkit core package exports."""

from __future__ import annotations

from provide.foundation.utils import get_version

from variantkit.exceptions import (
    DescriptionError,
    MissingManifestError,
    StructuralInvariantViolation,
    UnresolvedPackageNameError,
    VariantError,
)
from variantkit.loader import VariantDescription, load_description
from variantkit.manifest import ManifestReader, XmlManifestReader
from variantkit.model import (
    BuildTypeConfig,
    FlavorConfig,
    JarDependency,
    LibraryDependency,
    SourceSet,
    VariantType,
)
from variantkit.resolution import flatten_dependencies, merge_flavors
from variantkit.variant import VariantConfiguration

__version__ = get_version("variantkit", caller_file=__file__)

__all__ = [
    "BuildTypeConfig",
    "DescriptionError",
    "FlavorConfig",
    "JarDependency",
    "LibraryDependency",
    "ManifestReader",
    "MissingManifestError",
    "SourceSet",
    "StructuralInvariantViolation",
    "UnresolvedPackageNameError",
    "VariantConfiguration",
    "VariantDescription",
    "VariantError",
    "VariantType",
    "XmlManifestReader",
    "__version__",
    "flatten_dependencies",
    "load_description",
    "merge_flavors",
]

# 🌶️📦🔚
