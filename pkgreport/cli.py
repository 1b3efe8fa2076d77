"""CLI entry point: pkg-report.

With no arguments, reads ./package.json and writes ./packages.md:

    pkg-report
    pkg-report --manifest web/package.json --output web/packages.md
    pkg-report --npm pnpm --concurrency 4 -v
"""

from __future__ import annotations

import asyncio

import click

from pkgreport.config import (
    DEFAULT_CONCURRENCY,
    DEFAULT_MANIFEST,
    DEFAULT_NPM,
    DEFAULT_OUTPUT,
    ReportConfig,
)
from pkgreport.core.logging import setup_logging
from pkgreport.pipeline import generate_report


@click.command()
@click.option(
    "--manifest",
    "manifest_path",
    default=DEFAULT_MANIFEST,
    type=click.Path(dir_okay=False),
    help="Manifest to read",
)
@click.option(
    "-o",
    "--output",
    "output_path",
    default=DEFAULT_OUTPUT,
    type=click.Path(dir_okay=False),
    help="Report file to write",
)
@click.option("--npm", default=DEFAULT_NPM, help="Package manager executable")
@click.option(
    "--concurrency",
    default=DEFAULT_CONCURRENCY,
    type=click.IntRange(min=1),
    help="Max packages inspected at once",
)
@click.option("-v", "--verbose", is_flag=True, help="Verbose logging")
def main(manifest_path: str, output_path: str, npm: str, concurrency: int, verbose: bool) -> None:
    """Write a markdown report of a project's npm dependencies."""
    setup_logging(verbose)
    config = ReportConfig(
        manifest_path=manifest_path,
        output_path=output_path,
        npm=npm,
        concurrency=concurrency,
    )

    result = asyncio.run(generate_report(config))

    click.echo(
        f"Found {result.dependency_count} dependencies and "
        f"{result.dev_dependency_count} dev dependencies."
    )
    if result.failed:
        click.echo(f"Installed version lookup failed for: {', '.join(result.failed)}")
    click.echo(f"Done! See {config.output_path}")


if __name__ == "__main__":
    main()
