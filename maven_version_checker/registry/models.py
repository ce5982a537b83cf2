"""Data models for registry lookups."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True)
class Found:
    """The registry knows the artifact and reports its latest version."""

    version: str


@dataclass(frozen=True)
class NotFound:
    """The registry has no usable entry for the artifact."""


Lookup = Union[Found, NotFound]


@dataclass(frozen=True)
class QueryResult:
    """Result of asking the registry about one ``groupId:artifactId`` pair.

    Mirrors the ``response`` block of the Maven Central Solr search API:
    ``numFound`` and the ``latestVersion`` of the first document.
    """

    number_found: int
    latest_version: str | None = None

    @classmethod
    def from_json(cls, payload: Any) -> QueryResult:
        """Build a result from a ``/solrsearch/select`` JSON body.

        A body that is not the expected object, or has missing or malformed
        fields, degrades to "nothing found".
        """
        response = payload.get("response") if isinstance(payload, dict) else None
        if not isinstance(response, dict):
            return cls.not_found()
        try:
            number_found = int(response.get("numFound") or 0)
        except (TypeError, ValueError):
            number_found = 0
        docs = response.get("docs") or []
        latest = None
        if isinstance(docs, list) and docs and isinstance(docs[0], dict):
            latest = docs[0].get("latestVersion")
        return cls(number_found=number_found, latest_version=latest)

    @classmethod
    def not_found(cls) -> QueryResult:
        return cls(number_found=0)

    def lookup(self) -> Lookup:
        if self.number_found > 0 and self.latest_version:
            return Found(self.latest_version)
        return NotFound()
