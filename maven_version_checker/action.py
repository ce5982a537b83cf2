"""Action entry: walk the project, then publish outputs and the step summary.

This is the only place errors are caught: any failure during a run is logged
once and turned into :attr:`ExitCode.FAILURE` with nothing written.
"""

from __future__ import annotations

import asyncio
import contextlib
from collections.abc import Mapping
from contextlib import AbstractAsyncContextManager
from enum import IntEnum

import structlog

from maven_version_checker.core.actions import FileCommands
from maven_version_checker.core.config import ActionInputs
from maven_version_checker.engines.version_checker.models import UpdateReport
from maven_version_checker.engines.version_checker.summary import render_summary
from maven_version_checker.engines.version_checker.walker import ProjectWalker
from maven_version_checker.registry.base import RegistryClient
from maven_version_checker.registry.chaos import ChaosManager
from maven_version_checker.registry.client import MavenCentralClient

log = structlog.get_logger("maven_version_checker.action")


class ExitCode(IntEnum):
    """Process exit status of an action run."""

    SUCCESS = 0
    FAILURE = 1


def build_outputs(report: UpdateReport) -> dict[str, str]:
    """The three step outputs, in the order they are written."""
    count = report.count
    return {
        "has_updates": "true" if count > 0 else "false",
        "number_of_updates": str(count),
        "update_json": report.to_json(),
    }


def _open_registry(
    inputs: ActionInputs, registry: RegistryClient | None
) -> AbstractAsyncContextManager[RegistryClient]:
    if registry is not None:
        return contextlib.nullcontext(registry)
    return MavenCentralClient(inputs.registry_url, chaos=ChaosManager(inputs.chaos))


async def run_action(
    environ: Mapping[str, str] | None = None,
    *,
    location: str | None = None,
    registry: RegistryClient | None = None,
) -> ExitCode:
    """Run the version check for the project named by the ``location`` input.

    *registry* replaces the Maven Central client, mainly for tests.
    """
    try:
        inputs = ActionInputs.from_env(environ, location=location)
        async with _open_registry(inputs, registry) as client:
            result = await ProjectWalker().run(inputs.location, client)

        summary = render_summary(result)
        outputs = build_outputs(result.report)

        # Nothing is published until every module has been checked.
        commands = FileCommands(inputs.output_file, inputs.summary_file)
        commands.set_step_summary(str(summary).rstrip())
        for name, value in outputs.items():
            commands.set_output(name, value)
    except asyncio.CancelledError:
        log.error("checker.failed", message="Run cancelled before completion.")
        return ExitCode.FAILURE
    except Exception as exc:
        log.error("checker.failed", message=str(exc), error_type=type(exc).__name__)
        return ExitCode.FAILURE

    log.debug(
        "checker.completed",
        location=str(inputs.location),
        number_of_updates=outputs["number_of_updates"],
    )
    return ExitCode.SUCCESS
