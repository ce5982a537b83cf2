"""Structured logging configuration: structlog over stdlib logging."""

from __future__ import annotations

import logging
import logging.config
import os
import sys
from collections.abc import MutableMapping
from typing import Any

import structlog

# structlog level -> GitHub workflow command prefix.
_GITHUB_PREFIXES: dict[str, str] = {
    "debug": "::debug::",
    "info": "",
    "warning": "::warning::",
    "error": "::error::",
    "critical": "::error::Critical: ",
}

# Keys added by the shared processors that add noise to workflow commands.
_GITHUB_DROPPED_KEYS = ("timestamp", "logger", "logger_name", "level", "log_level")


class GitHubActionsRenderer:
    """Render events as GitHub workflow commands (``::warning::...``).

    Info events tagged ``notice=True`` become ``::notice::`` annotations. A
    ``message`` key, when present, replaces the event name as the text.
    """

    def __call__(
        self, logger: Any, method_name: str, event_dict: MutableMapping[str, Any]
    ) -> str:
        level = str(event_dict.get("level") or event_dict.get("log_level") or method_name)
        level = "warning" if level == "warn" else level.lower()
        notice = bool(event_dict.pop("notice", False))
        prefix = _GITHUB_PREFIXES.get(level, "")
        if level == "info" and notice:
            prefix = "::notice::"

        event = str(event_dict.pop("event", ""))
        message = event_dict.pop("message", None)
        text = str(message) if message is not None else event
        exception = event_dict.pop("exception", None)
        for key in _GITHUB_DROPPED_KEYS:
            event_dict.pop(key, None)

        fields = " ".join(f"{key}={value!r}" for key, value in event_dict.items())
        line = f"{prefix}{text}"
        if fields:
            line = f"{line} {fields}"
        if exception:
            line = f"{line}\n{exception}"
        return line


def _default_format() -> str:
    if os.environ.get("GITHUB_ACTIONS", "").lower() == "true":
        return "github"
    return "console"


def setup_logging(level: str | None = None, log_format: str | None = None) -> None:
    """Configure structlog and stdlib logging.

    Reads from environment variables when arguments are omitted:
        MVC_LOG_LEVEL   log level (default: INFO)
        MVC_LOG_FORMAT  github | console | json (default: github on Actions
                          runners, console elsewhere)
    """
    log_level = (level or os.environ.get("MVC_LOG_LEVEL", "INFO")).upper()
    fmt = (log_format or os.environ.get("MVC_LOG_FORMAT") or _default_format()).lower()

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if fmt == "json":
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    elif fmt == "github":
        renderer = GitHubActionsRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    # --- structlog configure ---
    structlog.configure(
        processors=shared_processors
        + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    # --- stdlib logging configure ---
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "structlog": {
                    "()": structlog.stdlib.ProcessorFormatter,
                    "foreign_pre_chain": shared_processors,
                    "processors": [
                        structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                        renderer,
                    ],
                },
            },
            "handlers": {
                "default": {
                    "class": "logging.StreamHandler",
                    "stream": "ext://sys.stdout",
                    "formatter": "structlog",
                },
            },
            "root": {
                "handlers": ["default"],
                "level": log_level,
            },
            "loggers": {
                "maven_version_checker": {"level": log_level},
                "httpx": {"level": "WARNING"},
                "httpcore": {"level": "WARNING"},
            },
        }
    )


def setup_stderr_logging(level: str | None = None) -> None:
    """Console logging on stderr for local scripts whose stdout carries results.

    Loggers are not cached, so a later ``structlog.configure`` still applies.
    """
    log_level = (level or os.environ.get("MVC_LOG_LEVEL", "INFO")).upper()
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.format_exc_info,
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelNamesMapping().get(log_level, logging.INFO)
        ),
        logger_factory=structlog.PrintLoggerFactory(sys.stderr),
        cache_logger_on_first_use=False,
    )
