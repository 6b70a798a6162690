#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Construction-time checks for variant configurations."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import TYPE_CHECKING

from variantkit.exceptions import MissingManifestError, StructuralInvariantViolation
from variantkit.model import VariantType

if TYPE_CHECKING:
    from variantkit.variant import VariantConfiguration

FileCheck = Callable[[Path], bool]


def check_tested_config(variant_type: VariantType, tested_config: VariantConfiguration | None) -> None:
    """Ensure a tested config is given for test variants and only for them."""
    if variant_type is VariantType.TEST and tested_config is None:
        raise StructuralInvariantViolation("Test variant requires a tested configuration")
    if variant_type is not VariantType.TEST and tested_config is not None:
        raise StructuralInvariantViolation(
            f"Only test variants can have a tested configuration, got {variant_type.value}"
        )


def validate_variant(config: VariantConfiguration, is_file: FileCheck = Path.is_file) -> None:
    """Validate a freshly constructed variant.

    Args:
        config: Variant to check
        is_file: Predicate telling whether a path is an existing regular file

    Raises:
        MissingManifestError: If a non-test variant has no main manifest
    """
    if config.variant_type is VariantType.TEST:
        return

    manifest = config.default_source_set.manifest
    if not is_file(manifest):
        raise MissingManifestError(f"Main manifest missing from {manifest.absolute()}")


# 🌶️📦🔚
