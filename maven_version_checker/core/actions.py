"""GitHub Actions file commands: step outputs and the job summary."""

from __future__ import annotations

from pathlib import Path


class FileCommands:
    """Appends to the files the runner exposes via ``GITHUB_OUTPUT`` and
    ``GITHUB_STEP_SUMMARY``."""

    def __init__(self, output_file: Path, summary_file: Path) -> None:
        self._output_file = output_file
        self._summary_file = summary_file

    def set_output(self, name: str, value: str) -> tuple[str, str]:
        """Write a ``name=value`` step output; both sides are trimmed."""
        name, value = name.strip(), value.strip()
        self._issue(self._output_file, f"{name}={value}")
        return name, value

    def set_step_summary(self, markdown: str) -> None:
        self._issue(self._summary_file, markdown.strip())

    @staticmethod
    def _issue(path: Path, content: str) -> None:
        with path.open("a", encoding="utf-8") as f:
            f.write(content + "\n")
