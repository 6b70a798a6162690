#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Centralized default values for variant resolution."""

from __future__ import annotations

# =================================
# Package naming
# =================================
PACKAGE_SEPARATOR = "."
TEST_PACKAGE_SUFFIX = ".test"
LIBRARY_PACKAGES_SEPARATOR = ":"  # Joins library packages handed to aapt

# =================================
# Instrumentation defaults
# =================================
DEFAULT_TEST_RUNNER = "android.test.InstrumentationTestRunner"

# =================================
# Manifest defaults
# =================================
MANIFEST_FILE = "AndroidManifest.xml"
MANIFEST_PACKAGE_ATTRIBUTE = "package"

# =================================
# Logging defaults
# =================================
DEFAULT_LOG_LEVEL = "WARNING"

# 🌶️📦🔚
