"""CLI entry point: python -m maven_version_checker"""

from maven_version_checker.cli import main

main()
