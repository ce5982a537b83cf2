"""Maven Version Checker: report outdated Maven artifacts in CI."""

__version__ = "1.0.0"

from maven_version_checker.action import ExitCode, build_outputs, run_action
from maven_version_checker.engines.version_checker import (
    Artifact,
    ArtifactKind,
    CheckResult,
    PomDocument,
    ProjectWalker,
    Summary,
    UpdateAggregator,
    UpdateReport,
)
from maven_version_checker.registry import MavenCentralClient, QueryResult, RegistryClient

__all__ = [
    "Artifact",
    "ArtifactKind",
    "CheckResult",
    "ExitCode",
    "MavenCentralClient",
    "PomDocument",
    "ProjectWalker",
    "QueryResult",
    "RegistryClient",
    "Summary",
    "UpdateAggregator",
    "UpdateReport",
    "build_outputs",
    "run_action",
]
