"""Async Maven Central search client with retries and a concurrency limit."""

from __future__ import annotations

import asyncio
from typing import Any

import httpx
import structlog

from maven_version_checker.exceptions import RegistryError
from maven_version_checker.registry.chaos import ChaosManager
from maven_version_checker.registry.models import QueryResult

log = structlog.get_logger("maven_version_checker.registry")

DEFAULT_BASE_URL = "https://search.maven.org"
SEARCH_PATH = "/solrsearch/select"

_USER_AGENT = "Mozilla/5.0 (Windows NT 10.0; rv:132.0) Gecko/20100101 Firefox/132.0"
_TIMEOUT = 30.0
_MAX_RETRIES = 3
_RETRY_BASE_DELAY = 1.0  # seconds
_MAX_CONCURRENCY = 10
_RETRYABLE_STATUS = frozenset({408, 429})


class MavenCentralClient:
    """Thin async wrapper around the Maven Central Solr search API."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        *,
        chaos: ChaosManager | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._client = httpx.AsyncClient(
            base_url=base_url,
            headers={"User-Agent": _USER_AGENT, "Accept": "application/json"},
            timeout=_TIMEOUT,
            transport=transport,
        )
        self._chaos = chaos or ChaosManager()
        self._limiter = asyncio.Semaphore(_MAX_CONCURRENCY)

    # ── lifecycle ──────────────────────────────────────────────────────────

    async def close(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> MavenCentralClient:
        return self

    async def __aexit__(self, *exc: object) -> None:
        await self.close()

    # ── public ─────────────────────────────────────────────────────────────

    async def query_latest_version(self, group_id: str, artifact_id: str) -> QueryResult:
        """Ask Maven Central for the latest version of ``group_id:artifact_id``."""
        params = {"q": f"g:{group_id} AND a:{artifact_id}", "rows": 1, "wt": "json"}
        async with self._limiter:
            response = await self._request_with_retry(SEARCH_PATH, params)
        try:
            payload = response.json()
        except ValueError as exc:
            raise RegistryError(
                f"Invalid JSON returned for {group_id}:{artifact_id}: {exc}"
            ) from exc
        return QueryResult.from_json(payload)

    # ── internal ───────────────────────────────────────────────────────────

    async def _send(self, url: str, params: dict[str, Any] | None) -> httpx.Response:
        await self._chaos.inject_latency()
        self._chaos.inject_fault()
        request = self._client.build_request("GET", url, params=params)
        injected = self._chaos.inject_outcome(request)
        if injected is not None:
            return injected
        return await self._client.send(request)

    async def _request_with_retry(
        self,
        url: str,
        params: dict[str, Any] | None = None,
    ) -> httpx.Response:
        """GET with exponential backoff on 5xx, 408, 429 and transport errors."""
        last_error: str | None = None
        for attempt in range(_MAX_RETRIES):
            try:
                resp = await self._send(url, params)
            except httpx.TransportError as exc:
                log.warning(
                    "registry.transport_error",
                    url=url,
                    error=str(exc) or type(exc).__name__,
                    attempt=attempt + 1,
                    max_retries=_MAX_RETRIES,
                )
                last_error = str(exc) or type(exc).__name__
            else:
                if resp.is_success:
                    return resp
                if not self._is_retryable(resp.status_code):
                    raise RegistryError(self._status_message(resp))
                log.warning(
                    "registry.server_error",
                    url=url,
                    status=resp.status_code,
                    attempt=attempt + 1,
                    max_retries=_MAX_RETRIES,
                )
                last_error = self._status_message(resp)

            if attempt < _MAX_RETRIES - 1:
                await asyncio.sleep(_RETRY_BASE_DELAY * (2**attempt))

        raise RegistryError(last_error or f"request to {url} failed")

    @staticmethod
    def _is_retryable(status_code: int) -> bool:
        return status_code >= 500 or status_code in _RETRYABLE_STATUS

    @staticmethod
    def _status_message(response: httpx.Response) -> str:
        return (
            "Response status code does not indicate success: "
            f"{response.status_code} ({response.reason_phrase})."
        )
