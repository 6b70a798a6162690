#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Command modules for the variantkit CLI."""

from __future__ import annotations

from variantkit.commands.resolve import resolve_command

__all__ = [
    "resolve_command",
]

# 🌶️📦🔚
