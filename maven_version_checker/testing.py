"""Test doubles for maven_version_checker: use in unit and E2E tests.

Usage::

    from maven_version_checker.testing import FakeRegistry

    registry = FakeRegistry()                                   # nothing is found
    registry = FakeRegistry(default="999.9.9")                  # everything has a newer version
    registry = FakeRegistry(versions={"org.mongodb:bson": "5.0.0"})
    registry = FakeRegistry(error=RegistryError("boom"), fail_after=2)
"""

from __future__ import annotations

from maven_version_checker.registry.models import QueryResult


class FakeRegistry:
    """Drop-in replacement for MavenCentralClient that never touches the network.

    Parameters
    ----------
    default:
        Latest version reported for artifacts missing from *versions*.
        ``None`` (default) reports them as not found.
    versions:
        ``"groupId:artifactId"`` -> latest version. A ``None`` value means
        the artifact is unknown to the registry.
    error:
        Raised instead of answering once *fail_after* queries succeeded.
    """

    def __init__(
        self,
        *,
        default: str | None = None,
        versions: dict[str, str | None] | None = None,
        error: BaseException | None = None,
        fail_after: int = 0,
    ) -> None:
        self._default = default
        self._versions = dict(versions or {})
        self._error = error
        self._fail_after = fail_after
        self._calls: list[tuple[str, str]] = []

    @property
    def calls(self) -> list[tuple[str, str]]:
        """``(group_id, artifact_id)`` pairs queried, in order."""
        return self._calls

    async def query_latest_version(self, group_id: str, artifact_id: str) -> QueryResult:
        if self._error is not None and len(self._calls) >= self._fail_after:
            self._calls.append((group_id, artifact_id))
            raise self._error
        self._calls.append((group_id, artifact_id))

        latest = self._versions.get(f"{group_id}:{artifact_id}", self._default)
        if latest is None:
            return QueryResult.not_found()
        return QueryResult(number_found=1, latest_version=latest)
