#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""variantkit configuration: resolution defaults and the environment-driven runtime config."""

from __future__ import annotations

from variantkit.config.defaults import (
    DEFAULT_TEST_RUNNER,
    LIBRARY_PACKAGES_SEPARATOR,
    PACKAGE_SEPARATOR,
    TEST_PACKAGE_SUFFIX,
)
from variantkit.config.runtime import VariantRuntimeConfig, parse_log_level

__all__ = [
    "DEFAULT_TEST_RUNNER",
    "LIBRARY_PACKAGES_SEPARATOR",
    "PACKAGE_SEPARATOR",
    "TEST_PACKAGE_SUFFIX",
    "VariantRuntimeConfig",
    "parse_log_level",
]

# 🌶️📦🔚
