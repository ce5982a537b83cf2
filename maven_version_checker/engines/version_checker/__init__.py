"""Version checker engine: POM walking, registry classification, summaries."""

from maven_version_checker.engines.version_checker.aggregator import UpdateAggregator
from maven_version_checker.engines.version_checker.models import (
    Artifact,
    ArtifactKind,
    CheckResult,
    ModuleSection,
    SummaryRow,
    UpdateReport,
)
from maven_version_checker.engines.version_checker.pom import PomDocument
from maven_version_checker.engines.version_checker.summary import Summary, render_summary
from maven_version_checker.engines.version_checker.walker import ProjectWalker

__all__ = [
    "Artifact",
    "ArtifactKind",
    "CheckResult",
    "ModuleSection",
    "PomDocument",
    "ProjectWalker",
    "Summary",
    "SummaryRow",
    "UpdateAggregator",
    "UpdateReport",
    "render_summary",
]
