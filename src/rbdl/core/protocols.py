"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols — never on concrete
implementations — preserving the dependency inversion principle.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any, Protocol


class RepeaterProvider(Protocol):
    """Contract for repeater directory backends.

    Any object that implements :meth:`fetch` with the correct signature
    satisfies this protocol structurally (no explicit inheritance
    required).
    """

    def fetch(self, params: Mapping[str, str], *, email: str) -> Any:
        """Run one search and return the decoded JSON payload.

        Parameters
        ----------
        params:
            API query parameters, already stripped of empty values.
        email:
            Contact address used to identify the caller.

        Raises
        ------
        RateLimitError
            When the API answers ``429``.
        ApiResponseError
            When the API answers any other non-200 status.
        RequestFailedError
            When the request cannot be completed.
        InvalidResponseError
            When the body is not valid JSON.
        """
        ...  # pragma: no cover


class OutputWriter(Protocol):
    """Contract for persisting rendered output."""

    def write_text(self, path: Path, content: str) -> None:
        """Write *content* to *path*, replacing any existing file.

        Raises
        ------
        OutputWriteError
            When the file cannot be written.
        """
        ...  # pragma: no cover
