"""Artifact registry: latest-version lookups against Maven Central."""

from maven_version_checker.registry.base import RegistryClient
from maven_version_checker.registry.chaos import ChaosFaultError, ChaosManager
from maven_version_checker.registry.client import MavenCentralClient
from maven_version_checker.registry.models import Found, Lookup, NotFound, QueryResult

__all__ = [
    "ChaosFaultError",
    "ChaosManager",
    "Found",
    "Lookup",
    "MavenCentralClient",
    "NotFound",
    "QueryResult",
    "RegistryClient",
]
