#!/usr/bin/env python3
"""Standalone version checker: no GitHub Actions environment required.

Usage:
    python check_pom.py path/to/pom.xml
    python check_pom.py .                       # uses ./pom.xml
    python check_pom.py path/to/pom.xml --json  # print update_json only
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from pathlib import Path

from maven_version_checker.core.logging import setup_stderr_logging
from maven_version_checker.engines.version_checker.models import CheckResult
from maven_version_checker.engines.version_checker.walker import ProjectWalker
from maven_version_checker.exceptions import CheckerError
from maven_version_checker.registry.client import DEFAULT_BASE_URL, MavenCentralClient


def _print_result(result: CheckResult, as_json: bool) -> None:
    if as_json:
        print(json.dumps(result.report.as_dict(), indent=2, ensure_ascii=False))
        return

    for section in result.sections:
        if not section.rows:
            continue
        if section.title is not None:
            print(f"\n### {section.title} ###\n")
        print(f"{'Type':<15} {'Version':<15} {'Update':<15} Artifact")
        print("-" * 100)
        for row in section.rows:
            print(f"{row.kind:<15} {row.declared_version:<15} {row.status:<15} {row.coordinate}")

    print(f"\n{result.report.count} update(s) available.")


async def _check(location: Path, registry_url: str) -> CheckResult:
    async with MavenCentralClient(registry_url) as client:
        return await ProjectWalker().run(location, client)


def main() -> None:
    parser = argparse.ArgumentParser(description="Check a Maven project for outdated artifacts")
    parser.add_argument("target", help="Path to a pom.xml or a directory containing one")
    parser.add_argument("--registry-url", default=DEFAULT_BASE_URL, help="Maven search API base URL")
    parser.add_argument("--json", action="store_true", dest="as_json", help="Output update JSON")
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose logging")
    args = parser.parse_args()
    setup_stderr_logging(level="DEBUG" if args.verbose else None)

    location = Path(args.target).resolve()
    if location.is_dir():
        location = location / "pom.xml"
    if not location.is_file():
        print(f"Error: {location} does not exist", file=sys.stderr)
        sys.exit(1)

    try:
        result = asyncio.run(_check(location, args.registry_url))
    except CheckerError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)
    _print_result(result, args.as_json)


if __name__ == "__main__":
    main()
