"""Data models for the version checker engine."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

# Status tokens shown in the "Update" column.
UP_TO_DATE = "✔️"
NOT_FOUND = "🔴"


class ArtifactKind(str, Enum):
    """Kind of artifact declaration inside a POM."""

    PARENT = "Parent"
    DEPENDENCY = "Dependency"
    PLUGIN = "Plugin"

    @property
    def tag(self) -> str:
        """XML element name holding this kind of artifact."""
        return self.value.lower()

    @property
    def plural(self) -> str:
        """Key used for this kind in the update report."""
        return _PLURALS[self]


_PLURALS: dict[ArtifactKind, str] = {
    ArtifactKind.PARENT: "parents",
    ArtifactKind.DEPENDENCY: "dependencies",
    ArtifactKind.PLUGIN: "plugins",
}


@dataclass(frozen=True)
class Artifact:
    """A single ``groupId:artifactId:version`` declaration parsed from a POM."""

    group_id: str
    artifact_id: str
    version: str

    @property
    def coordinate(self) -> str:
        return f"{self.group_id}:{self.artifact_id}"


@dataclass
class SummaryRow:
    """One line of the per-module summary table."""

    kind: str
    coordinate: str
    declared_version: str
    status: str
    found: bool = True

    def cells(self) -> list[str]:
        return [self.kind, self.coordinate, self.declared_version, self.status]


@dataclass
class ModuleSection:
    """Rows produced for one POM, optionally titled by its module name."""

    title: str | None
    rows: list[SummaryRow] = field(default_factory=list)


class UpdateReport:
    """Outdated artifacts grouped by kind, in first-use order.

    Serialized once at the end of a run as the ``update_json`` output.
    """

    def __init__(self) -> None:
        self._updates: dict[str, list[str]] = {}

    def add(self, kind: ArtifactKind, artifact: Artifact, latest_version: str) -> None:
        self._updates.setdefault(kind.plural, []).append(
            f"{artifact.coordinate}:{latest_version}"
        )

    @property
    def count(self) -> int:
        return sum(len(entries) for entries in self._updates.values())

    def as_dict(self) -> dict[str, list[str]]:
        return {key: list(entries) for key, entries in self._updates.items()}

    def to_json(self) -> str:
        return json.dumps(self._updates, separators=(",", ":"), ensure_ascii=False)


@dataclass
class CheckResult:
    """Outcome of walking one Maven project."""

    location: Path
    report: UpdateReport
    sections: list[ModuleSection] = field(default_factory=list)
    multi_module: bool = False

    @property
    def rows(self) -> list[SummaryRow]:
        return [row for section in self.sections for row in section.rows]
