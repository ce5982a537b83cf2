"""Custom exceptions for Maven Version Checker."""


class CheckerError(Exception):
    """Base exception for all checker errors."""


class ConfigurationError(CheckerError):
    """Raised when a required input or GitHub file command is not available."""


class DocumentError(CheckerError):
    """Raised when a POM file is missing, unreadable or malformed."""

    def __init__(self, location: str, reason: str):
        self.location = location
        self.reason = reason
        super().__init__(f"Unable to load POM '{location}': {reason}")


class RegistryError(CheckerError):
    """Raised when the artifact registry request does not succeed."""


class ValidationError(CheckerError, ValueError):
    """Raised when the step summary is built with malformed arguments."""
