"""Markdown step summary builder."""

from __future__ import annotations

from collections.abc import Sequence

from maven_version_checker.engines.version_checker.models import CheckResult
from maven_version_checker.exceptions import ValidationError

SUMMARY_TITLE = "Maven Version Checker Action"
SUMMARY_INTRO = "Below is a list of all the checked artifacts and their update status."
TABLE_COLUMNS = ("Type", "Artifact", "Version", "Update")


class Summary:
    """Append-only markdown document, in the spirit of the Actions toolkit summary."""

    def __init__(self) -> None:
        self._parts: list[str] = []

    def append_header(self, text: str, level: int = 1) -> None:
        if not 1 <= level <= 6:
            raise ValidationError("Valid range for header level is from 1 to 6.")
        self._parts.append(f"{'#' * level} {text.strip()}\n\n")

    def append_paragraph(self, text: str) -> None:
        self._parts.append(f"{text.strip()}\n\n")

    def append_table(
        self,
        columns: Sequence[str] | None,
        rows: Sequence[Sequence[str]] | None,
    ) -> None:
        if not columns:
            raise ValidationError("At least one column is required.")
        if not rows:
            raise ValidationError("At least one row is required.")
        if any(len(row) != len(columns) for row in rows):
            raise ValidationError("Number of row cells does not match number of columns.")

        lines = [_table_line(columns), _table_line(["---"] * len(columns))]
        lines.extend(_table_line(row) for row in rows)
        self._parts.append("\n".join(lines) + "\n\n")

    def __str__(self) -> str:
        return "".join(self._parts)


def _table_line(cells: Sequence[str]) -> str:
    return "|" + "".join(f" {cell} |" for cell in cells)


def render_summary(result: CheckResult) -> Summary:
    """Build the step summary for a finished walk.

    A section gets a table only when at least one of its artifacts is known
    to the registry; module headers are used for multi-module projects only.
    """
    summary = Summary()
    summary.append_header(SUMMARY_TITLE, 2)
    summary.append_paragraph(SUMMARY_INTRO)

    for section in result.sections:
        if not any(row.found for row in section.rows):
            continue
        if section.title is not None:
            summary.append_header(section.title, 3)
        summary.append_table(TABLE_COLUMNS, [row.cells() for row in section.rows])

    return summary
