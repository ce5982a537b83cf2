"""Chaos strategies for exercising the registry client's resilience paths.

Enabled with ``MVC_ENVIRONMENT=Chaos``. Each strategy fires independently
with the configured injection rate on every outgoing request.
"""

from __future__ import annotations

import asyncio
import random

import httpx
import structlog

log = structlog.get_logger("maven_version_checker.registry")

_DEFAULT_INJECTION_RATE = 0.1
_DEFAULT_LATENCY = 5.0  # seconds


class ChaosFaultError(RuntimeError):
    """Raised by the fault strategy in place of a real request."""


class ChaosManager:
    """Decides whether latency, faults or failed outcomes are injected."""

    def __init__(
        self,
        enabled: bool = False,
        *,
        injection_rate: float = _DEFAULT_INJECTION_RATE,
        latency: float = _DEFAULT_LATENCY,
        rng: random.Random | None = None,
    ) -> None:
        self.enabled = enabled
        self._injection_rate = injection_rate
        self._latency = latency
        self._rng = rng or random.Random()
        if enabled:
            log.warning("chaos.enabled", injection_rate=injection_rate)

    @property
    def injection_rate(self) -> float:
        return self._injection_rate if self.enabled else 0.0

    def _should_inject(self) -> bool:
        return self.enabled and self._rng.random() < self.injection_rate

    async def inject_latency(self) -> None:
        if self._should_inject():
            log.debug("chaos.latency", seconds=self._latency)
            await asyncio.sleep(self._latency)

    def inject_fault(self) -> None:
        if self._should_inject():
            raise ChaosFaultError("Injected by chaos fault strategy!")

    def inject_outcome(self, request: httpx.Request) -> httpx.Response | None:
        """Return a synthetic 500 response, or ``None`` to send the real request."""
        if self._should_inject():
            log.debug("chaos.outcome", url=str(request.url))
            return httpx.Response(500, request=request)
        return None
