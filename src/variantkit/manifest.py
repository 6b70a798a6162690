#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Reading the package name out of a manifest file."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol
from xml.etree import ElementTree

from provide.foundation import logger

from variantkit.config.defaults import MANIFEST_PACKAGE_ATTRIBUTE
from variantkit.exceptions import UnresolvedPackageNameError


class ManifestReader(Protocol):
    """Capability for looking up the package declared by a manifest."""

    def get_package(self, manifest: Path) -> str | None:
        """Return the package declared in ``manifest``, or None if it has none."""
        ...


class XmlManifestReader:
    """Reads the ``package`` attribute of a manifest's root element.

    Stateless, so one instance can be shared by variants resolved on
    different threads.
    """

    def get_package(self, manifest: Path) -> str | None:
        """Return the manifest's package.

        Raises:
            UnresolvedPackageNameError: If the manifest is missing or not valid XML
        """
        try:
            tree = ElementTree.parse(manifest)
        except (OSError, ElementTree.ParseError) as e:
            raise UnresolvedPackageNameError(f"Cannot read manifest {manifest}: {e}") from e
        package = tree.getroot().get(MANIFEST_PACKAGE_ATTRIBUTE)
        logger.trace("Read manifest package", manifest=str(manifest), package=package)
        return package or None


# 🌶️📦🔚
