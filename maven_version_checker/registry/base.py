"""Registry interface: anything that can report an artifact's latest version."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from maven_version_checker.registry.models import QueryResult


@runtime_checkable
class RegistryClient(Protocol):
    """Interface the version checker queries, one artifact at a time.

    Cancellation is cooperative: cancelling the awaiting task aborts the
    in-flight query.
    """

    async def query_latest_version(self, group_id: str, artifact_id: str) -> QueryResult: ...
