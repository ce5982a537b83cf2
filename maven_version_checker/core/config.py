"""Action inputs: assembled once from the environment and passed down."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from maven_version_checker.exceptions import ConfigurationError
from maven_version_checker.registry.client import DEFAULT_BASE_URL

CHAOS_ENVIRONMENT = "Chaos"


def get_input(
    environ: Mapping[str, str],
    name: str,
    *,
    required: bool = False,
    trim_whitespace: bool = True,
) -> str:
    """Read an action input the way the Actions toolkit does.

    ``location`` is read from ``INPUT_LOCATION``; spaces in *name* become
    underscores. Returns an empty string for an undefined optional input.
    """
    value = environ.get(f"INPUT_{name.replace(' ', '_').upper()}")
    if required and (value is None or not value.strip()):
        raise ConfigurationError(f"Required input not supplied: {name}")
    if value is None:
        return ""
    return value.strip() if trim_whitespace else value


def file_command_path(environ: Mapping[str, str], command: str) -> Path:
    """Resolve the file behind a ``GITHUB_{command}`` file command.

    The runner creates these files before the step starts, so a missing
    variable or file means the step is not running where it should.
    """
    variable = f"GITHUB_{command}"
    raw = environ.get(variable)
    if raw is None or not raw.strip():
        raise ConfigurationError(
            f"Unable to find environment variable for file command {command} ({variable})."
        )
    path = Path(raw.strip())
    if not path.is_file():
        raise ConfigurationError(
            f"Missing file at path: '{path}' for file command {command} ({variable})."
        )
    return path


@dataclass(frozen=True)
class ActionInputs:
    """Everything a run needs from its environment."""

    location: Path
    output_file: Path
    summary_file: Path
    registry_url: str = DEFAULT_BASE_URL
    chaos: bool = False

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        *,
        location: str | None = None,
    ) -> ActionInputs:
        """Build inputs from *environ* (defaults to ``os.environ``).

        An explicit *location* takes precedence over ``INPUT_LOCATION``.
        """
        env = os.environ if environ is None else environ
        if location is None or not location.strip():
            location = get_input(env, "location", required=True)
        return cls(
            location=Path(location.strip()),
            output_file=file_command_path(env, "OUTPUT"),
            summary_file=file_command_path(env, "STEP_SUMMARY"),
            registry_url=env.get("MVC_REGISTRY_URL") or DEFAULT_BASE_URL,
            chaos=env.get("MVC_ENVIRONMENT") == CHAOS_ENVIRONMENT,
        )
