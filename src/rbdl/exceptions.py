"""Custom exception hierarchy for rbdl.

All exceptions that cross layer boundaries must inherit from
:class:`RbdlError`.  Raw third-party exceptions (e.g. from requests)
must NEVER propagate beyond the infrastructure layer — they must be
caught and re-raised as a typed subclass defined here.

Hierarchy
---------
RbdlError
├── ConfigurationError
├── RequestFailedError
├── RateLimitError
├── ApiResponseError
├── InvalidResponseError
├── NoResultsError
├── OutputWriteError
└── EnvironmentError
"""

from __future__ import annotations


class RbdlError(Exception):
    """Base exception for all rbdl errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Configuration ---------------------------------------------------------

class ConfigurationError(RbdlError):
    """Raised when command-line options or environment are invalid."""


# --- HTTP / API ------------------------------------------------------------

class RequestFailedError(RbdlError):
    """Raised when the HTTP request could not be completed."""


class RateLimitError(RbdlError):
    """Raised when the API answers ``429 Too Many Requests``."""


class ApiResponseError(RbdlError):
    """Raised when the API answers with any other non-200 status."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.status_code: int = status_code


class InvalidResponseError(RbdlError):
    """Raised when the response body is not the JSON we expect."""


class NoResultsError(RbdlError):
    """Raised when there are no records to save."""


# --- Output ----------------------------------------------------------------

class OutputWriteError(RbdlError):
    """Raised when the output file cannot be written."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(RbdlError):
    """Raised when a required runtime dependency is not available."""
