#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Resolve command for the variantkit CLI."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import click
from provide.foundation import logger
from provide.foundation.console import perr, pout
from provide.foundation.serialization import json_dumps

from variantkit.exceptions import VariantError
from variantkit.loader import load_description
from variantkit.model import VariantType
from variantkit.variant import VariantConfiguration


@click.command("resolve")
@click.argument(
    "description_file",
    type=click.Path(exists=True, dir_okay=False, resolve_path=True),
    required=True,
)
@click.option("--build-type", "-b", required=True, help="Build type to resolve (e.g. debug)")
@click.option(
    "--flavor",
    "-f",
    "flavors",
    multiple=True,
    help="Flavor to apply; repeat in priority order, the last one wins",
)
@click.option("--test", "resolve_test", is_flag=True, help="Resolve the instrumentation test variant")
@click.option("--json", "output_json", is_flag=True, help="Output as JSON")
def resolve_command(
    description_file: str,
    build_type: str,
    flavors: tuple[str, ...],
    resolve_test: bool,
    output_json: bool,
) -> None:
    """Resolves the effective configuration of one build variant."""
    path = Path(description_file)
    logger.debug("Resolving variant", description=str(path), build_type=build_type, flavors=list(flavors))

    try:
        description = load_description(path)
        config = description.build_variant(build_type, flavors)
        if resolve_test:
            config = description.build_test_variant(config)
        report = describe_variant(config)
    except VariantError as e:
        logger.error("Variant resolution failed", error=str(e), description=str(path))
        perr(f"❌ {e}")
        raise SystemExit(1) from e

    if output_json:
        pout(json_dumps(report, indent=2, default=str))
        return

    _display_report(report)


def describe_variant(config: VariantConfiguration) -> dict[str, Any]:
    """Collect every derived value of a variant into a plain dict."""
    report: dict[str, Any] = {
        "variant": config.name,
        "type": config.variant_type.value,
        "package_name": config.package_name,
        "libraries": [library.name for library in config.flat_libraries],
        "library_packages": config.library_packages,
        "resource_inputs": [str(folder) for folder in config.resource_inputs],
        "compile_classpath": sorted(str(entry) for entry in config.compile_classpath),
        "jars": [str(jar.jar_file) for jar in config.jar_dependencies],
    }
    if config.variant_type is VariantType.TEST:
        report["tested_package_name"] = config.tested_package_name
        report["instrumentation_runner"] = config.instrumentation_runner
    return report


def _display_report(report: dict[str, Any]) -> None:
    pout(f"Variant: {report['variant']} ({report['type']})")
    pout(f"Package: {report['package_name']}")
    if "tested_package_name" in report:
        pout(f"Tested Package: {report['tested_package_name']}")
        pout(f"Instrumentation Runner: {report['instrumentation_runner']}")

    for label, key in (
        ("Libraries", "libraries"),
        ("Resource Inputs", "resource_inputs"),
        ("Compile Classpath", "compile_classpath"),
        ("Jars", "jars"),
    ):
        if report[key]:
            pout(f"\n{label}:")
            for index, entry in enumerate(report[key]):
                pout(f"  [{index}] {entry}")


# 🌶️📦🔚
