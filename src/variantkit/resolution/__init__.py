#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Resolution logic behind VariantConfiguration's derived values."""

from __future__ import annotations

from variantkit.resolution.dependencies import flatten_dependencies, full_direct_dependencies
from variantkit.resolution.inputs import compile_classpath, resource_inputs
from variantkit.resolution.overrides import (
    compose_package_name,
    library_packages,
    merge_flavors,
    package_from_manifest,
    package_override,
    resolve_instrumentation_runner,
    resolve_package_name,
    resolve_tested_package_name,
)

__all__ = [
    "compile_classpath",
    "compose_package_name",
    "flatten_dependencies",
    "full_direct_dependencies",
    "library_packages",
    "merge_flavors",
    "package_from_manifest",
    "package_override",
    "resolve_instrumentation_runner",
    "resolve_package_name",
    "resolve_tested_package_name",
    "resource_inputs",
]

# 🌶️📦🔚
