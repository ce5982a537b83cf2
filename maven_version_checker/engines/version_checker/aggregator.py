"""UpdateAggregator: classify artifacts against the registry and collect updates."""

from __future__ import annotations

import structlog

from maven_version_checker.engines.version_checker.models import (
    NOT_FOUND,
    UP_TO_DATE,
    Artifact,
    ArtifactKind,
    SummaryRow,
    UpdateReport,
)
from maven_version_checker.registry.base import RegistryClient
from maven_version_checker.registry.models import Found, NotFound

log = structlog.get_logger("maven_version_checker.engine")


class UpdateAggregator:
    """Accumulates the update report for one run.

    Not shared between runs; every artifact is classified exactly once.
    """

    def __init__(self, registry: RegistryClient, report: UpdateReport | None = None) -> None:
        self._registry = registry
        self.report = report if report is not None else UpdateReport()

    async def classify(self, kind: ArtifactKind, artifact: Artifact) -> tuple[SummaryRow, bool]:
        """Query the registry for *artifact* and build its summary row.

        Returns ``(row, outdated)``. Outdated means the registry knows the
        artifact and its latest version differs (plain string inequality)
        from the declared one; such artifacts are added to the report.
        """
        result = await self._registry.query_latest_version(artifact.group_id, artifact.artifact_id)

        found = True
        outdated = False
        match result.lookup():
            case Found(version=latest) if latest != artifact.version:
                status = latest
                outdated = True
            case Found():
                status = UP_TO_DATE
            case NotFound():
                status = NOT_FOUND
                found = False

        if outdated:
            self.report.add(kind, artifact, status)

        row = SummaryRow(
            kind=kind.value,
            coordinate=artifact.coordinate,
            declared_version=artifact.version,
            status=status,
            found=found,
        )
        return row, outdated

    async def aggregate(self, kind: ArtifactKind, artifacts: list[Artifact]) -> list[SummaryRow]:
        """Classify *artifacts* one after another, in declaration order."""
        rows: list[SummaryRow] = []
        for artifact in artifacts:
            row, _ = await self.classify(kind, artifact)
            log.info(
                "artifact.checked",
                kind=row.kind,
                version=row.declared_version,
                update=row.status,
                artifact=row.coordinate,
            )
            rows.append(row)
        return rows
