"""CLI entry point: maven-version-checker."""

from __future__ import annotations

import asyncio
import sys

import click

from maven_version_checker import __version__
from maven_version_checker.action import run_action
from maven_version_checker.core.logging import setup_logging


@click.command()
@click.option(
    "--location",
    default=None,
    help="Path to the root pom.xml (default: the INPUT_LOCATION action input)",
)
@click.option("-v", "--verbose", is_flag=True, help="Verbose logging")
@click.version_option(__version__, prog_name="maven-version-checker")
def main(location: str | None, verbose: bool) -> None:
    """Check a Maven project's parent, dependencies and plugins for newer versions."""
    setup_logging(level="DEBUG" if verbose else None)
    click.echo(f"Maven Version Checker {__version__}\n")
    exit_code = asyncio.run(run_action(location=location))
    sys.exit(int(exit_code))
