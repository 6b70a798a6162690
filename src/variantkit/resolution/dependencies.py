#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Flattening of the library dependency graph into aapt priority order."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from attrs import define
from provide.foundation import logger

from variantkit.exceptions import StructuralInvariantViolation
from variantkit.model import LibraryDependency, VariantType

if TYPE_CHECKING:
    from variantkit.variant import VariantConfiguration


@define
class _Frame:
    """One pending level of the traversal: ``children`` walked from the back."""

    owner: LibraryDependency | None
    children: tuple[LibraryDependency, ...]
    index: int


def flatten_dependencies(direct: Sequence[LibraryDependency]) -> list[LibraryDependency]:
    """Resolve direct libraries into a flat list of direct and indirect libraries.

    The first entry has the highest priority when calling aapt: earlier
    libraries override the resources of later ones.

    Libraries are visited in reverse declaration order. Each library first
    folds in its own dependencies, then goes in front of everything collected
    so far unless it is already there. The net effect is that top-level
    declaration order dominates and every library's dependencies sit right
    behind it. A library reached through several paths keeps the rank of its
    first insertion, which is not always its shallowest occurrence.

    Args:
        direct: Directly declared libraries, in declaration order.

    Returns:
        Every reachable library exactly once, highest priority first.

    Raises:
        StructuralInvariantViolation: If the graph contains a cycle.
    """
    # Front insertion is modelled as an append followed by a single reverse.
    collected: list[LibraryDependency] = []
    seen: set[LibraryDependency] = set()
    expanding: set[LibraryDependency] = set()

    roots = tuple(direct)
    stack = [_Frame(owner=None, children=roots, index=len(roots))]
    while stack:
        frame = stack[-1]
        if frame.index == 0:
            stack.pop()
            owner = frame.owner
            if owner is not None:
                expanding.discard(owner)
                seen.add(owner)
                collected.append(owner)
                logger.trace("Library placed", library=owner.name, rank_from_back=len(collected))
            continue

        frame.index -= 1
        library = frame.children[frame.index]
        if library in seen:
            # Everything below an already placed library was placed before it.
            continue
        if library in expanding:
            raise StructuralInvariantViolation(f"Library dependency cycle through '{library.name}'")

        expanding.add(library)
        children = library.dependencies
        stack.append(_Frame(owner=library, children=children, index=len(children)))

    collected.reverse()
    return collected


def full_direct_dependencies(config: VariantConfiguration) -> list[LibraryDependency]:
    """Return all direct dependencies, including the tested library if any.

    For a test of a library the tested library's output and its own direct
    dependencies are merged in: own dependencies, then the tested output,
    then the tested library's direct dependencies.
    """
    tested = config.tested_config
    if tested is None or tested.variant_type is not VariantType.LIBRARY:
        return list(config.direct_libraries)

    if tested.output is None:
        raise StructuralInvariantViolation(
            "Tested library variant has no output artifact; call set_output() on it first"
        )

    return [*config.direct_libraries, tested.output, *tested.direct_libraries]


# 🌶️📦🔚
