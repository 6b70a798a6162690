#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Product flavor overrides and their merge rule."""

from __future__ import annotations

from typing import Any

from attrs import define, evolve


def is_set(value: Any) -> bool:
    """Return True when an override value counts as set.

    ``None`` and the empty string are unset; everything else, including ``0``,
    is a real override.
    """
    return value is not None and value != ""


@define(frozen=True)
class FlavorConfig:
    """A named bag of scalar overrides.

    The default configuration of a project is itself a FlavorConfig; every
    field left as ``None`` is inherited from whatever it is merged over.
    """

    name: str
    package_name: str | None = None
    package_name_suffix: str | None = None
    version_code: int | None = None
    version_name: str | None = None
    min_sdk_version: int | None = None
    target_sdk_version: int | None = None
    test_package_name: str | None = None
    test_instrumentation_runner: str | None = None

    def merge_over(self, base: FlavorConfig) -> FlavorConfig:
        """Return a new flavor using this flavor's set values over ``base``.

        The result keeps this flavor's name.
        """
        values = {
            name: getattr(self, name) if is_set(getattr(self, name)) else getattr(base, name)
            for name in OVERRIDE_FIELDS
        }
        return evolve(self, **values)


OVERRIDE_FIELDS = (
    "package_name",
    "package_name_suffix",
    "version_code",
    "version_name",
    "min_sdk_version",
    "target_sdk_version",
    "test_package_name",
    "test_instrumentation_runner",
)

# 🌶️📦🔚
