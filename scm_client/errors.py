"""Custom exception hierarchy for the scm_client package."""


class SCMClientError(Exception):
    """Base exception for source-control client errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class NotFoundError(SCMClientError):
    """Requested file or branch does not exist."""


class NotSupportedError(SCMClientError):
    """Operation is not supported by the backend."""


class ConfigurationError(SCMClientError):
    """Configuration loading or validation error."""
