#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Build type overrides (debug, release, ...)."""

from __future__ import annotations

from attrs import define


@define(frozen=True)
class BuildTypeConfig:
    """A single always-present override layer applied on top of flavors."""

    name: str
    debuggable: bool = False
    jni_debug_build: bool = False
    package_name_suffix: str | None = None
    zip_align: bool = True


# 🌶️📦🔚
