#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Resource folder and compile classpath aggregation."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from variantkit.exceptions import StructuralInvariantViolation
from variantkit.model import VariantType

if TYPE_CHECKING:
    from variantkit.variant import VariantConfiguration


def resource_inputs(config: VariantConfiguration) -> list[Path]:
    """Return the resource folders of a variant, highest overlay priority first.

    Order: build type, flavors in the order they were added, the default
    source set, then every flattened library. Absent folders are skipped.
    """
    candidates: list[Path | None] = [config.build_type_source_set.resources]
    candidates.extend(source_set.resources for source_set in config.flavor_source_sets)
    candidates.append(config.default_source_set.resources)
    candidates.extend(library.res_folder for library in config.flat_libraries)

    return [folder for folder in candidates if folder is not None]


def compile_classpath(config: VariantConfiguration) -> set[Path]:
    """Return the compile classpath of a variant.

    A test of a library also compiles against the library itself, so the
    tested output jar and the tested classpath are included.
    """
    classpath: set[Path] = set(config.default_source_set.compile_classpath)
    classpath.update(config.build_type_source_set.compile_classpath)
    for source_set in config.flavor_source_sets:
        classpath.update(source_set.compile_classpath)

    tested = config.tested_config
    if config.variant_type is VariantType.TEST and tested.variant_type is VariantType.LIBRARY:
        if tested.output is None:
            raise StructuralInvariantViolation(
                "Tested library variant has no output artifact; call set_output() on it first"
            )
        classpath.add(tested.output.jar_file)
        classpath.update(compile_classpath(tested))

    return classpath


# 🌶️📦🔚
