"""ProjectWalker: drive a single- or multi-module Maven project through the aggregator."""

from __future__ import annotations

from pathlib import Path

import structlog

from maven_version_checker.engines.version_checker.aggregator import UpdateAggregator
from maven_version_checker.engines.version_checker.models import (
    ArtifactKind,
    CheckResult,
    ModuleSection,
    SummaryRow,
)
from maven_version_checker.engines.version_checker.pom import PomDocument
from maven_version_checker.registry.base import RegistryClient

log = structlog.get_logger("maven_version_checker.engine")

PARENT_SECTION = "parent-pom"


class ProjectWalker:
    """Walks the root POM and, for aggregators, every declared module."""

    async def run(self, location: str | Path, registry: RegistryClient) -> CheckResult:
        """Check every artifact of the project rooted at *location*.

        Modules are processed one after another with the root's properties
        inherited. Any error aborts the walk.
        """
        pom = PomDocument(location)
        module_lookup = pom.module_lookup()
        aggregator = UpdateAggregator(registry)
        result = CheckResult(
            location=pom.location,
            report=aggregator.report,
            multi_module=bool(module_lookup),
        )

        if not module_lookup:
            rows = await self._process(pom, aggregator, is_parent=True)
            result.sections.append(ModuleSection(title=None, rows=rows))
            return result

        log.info(
            "walker.multi_module_detected",
            notice=True,
            message="Multi-Module project detected.",
            modules=list(module_lookup),
        )
        rows = await self._process(pom, aggregator, is_parent=True, section=PARENT_SECTION)
        result.sections.append(ModuleSection(title=PARENT_SECTION, rows=rows))

        parent_properties = pom.properties()
        for name, module_location in module_lookup.items():
            module_pom = PomDocument(module_location, parent_properties)
            rows = await self._process(module_pom, aggregator, is_parent=False, section=name)
            result.sections.append(ModuleSection(title=name, rows=rows))

        return result

    @staticmethod
    async def _process(
        pom: PomDocument,
        aggregator: UpdateAggregator,
        *,
        is_parent: bool,
        section: str | None = None,
    ) -> list[SummaryRow]:
        """Rows for one POM in the fixed order Parent, Dependency, Plugin."""
        parent = pom.parent_artifact() if is_parent else None
        dependencies = pom.dependencies()
        plugins = pom.plugins()

        if dependencies or plugins:
            log.debug(
                "walker.module_started",
                section=section,
                location=str(pom.location),
                dependencies=len(dependencies),
                plugins=len(plugins),
            )

        rows: list[SummaryRow] = []
        if parent is not None:
            rows.extend(await aggregator.aggregate(ArtifactKind.PARENT, [parent]))
        rows.extend(await aggregator.aggregate(ArtifactKind.DEPENDENCY, dependencies))
        rows.extend(await aggregator.aggregate(ArtifactKind.PLUGIN, plugins))
        return rows
