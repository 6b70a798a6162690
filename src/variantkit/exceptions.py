#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Custom exceptions for variantkit."""

from __future__ import annotations

from provide.foundation.errors import FoundationError


class VariantError(FoundationError):
    """Base exception for all variant resolution errors."""

    pass


class StructuralInvariantViolation(VariantError):
    """Raised when a variant is assembled or resolved in an illegal shape."""

    pass


class MissingManifestError(VariantError):
    """Raised when a non-test variant has no main manifest file."""

    pass


class UnresolvedPackageNameError(VariantError):
    """Raised when neither overrides nor the manifest provide a package name."""

    pass


class DescriptionError(VariantError):
    """Raised for malformed variant description files."""

    pass


# 🌶️📦🔚
