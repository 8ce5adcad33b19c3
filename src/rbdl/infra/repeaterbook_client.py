"""requests-backed implementation of :class:`~rbdl.core.protocols.RepeaterProvider`.

This module is the **only** place in the codebase that imports
``requests``.  All requests exceptions are caught here and re-raised as
typed :class:`~rbdl.exceptions.RbdlError` subclasses — nothing raw
escapes the infrastructure boundary.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

import requests

from rbdl.core.query import build_user_agent
from rbdl.exceptions import (
    ApiResponseError,
    InvalidResponseError,
    RateLimitError,
    RequestFailedError,
)

logger = logging.getLogger(__name__)

API_ENDPOINT: str = "https://www.repeaterbook.com/api/export.php"

DEFAULT_TIMEOUT: float = 30.0
"""Seconds before the request is abandoned."""


def _reject_constant(name: str) -> Any:
    """Refuse the non-standard ``NaN`` and ``Infinity`` literals."""
    raise ValueError(f"non-standard JSON constant {name!r}")


class RepeaterBookClient:
    """Concrete :class:`RepeaterProvider` backed by ``requests``.

    Usage::

        client = RepeaterBookClient()
        payload = client.fetch({"country": "Canada"}, email="me@example.com")

    A single GET is issued per call; there is no retry, including on
    ``429`` responses.
    """

    def __init__(
        self,
        session: requests.Session | None = None,
        *,
        endpoint: str = API_ENDPOINT,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._session: requests.Session = (
            session if session is not None else requests.Session()
        )
        self._endpoint: str = endpoint
        self._timeout: float = timeout

    # ------------------------------------------------------------------
    # Protocol method
    # ------------------------------------------------------------------

    def fetch(self, params: Mapping[str, str], *, email: str) -> Any:
        """Query the export API and return the decoded JSON payload.

        Raises
        ------
        RateLimitError
            When the API answers ``429 Too Many Requests``.
        ApiResponseError
            When the API answers any other non-200 status.
        RequestFailedError
            On connection errors, timeouts, or other transport failures.
        InvalidResponseError
            When the body is not valid JSON.
        """
        headers = {"User-Agent": build_user_agent(email)}
        logger.debug("GET %s params=%s", self._endpoint, dict(params))

        try:
            response = self._session.get(
                self._endpoint,
                params=dict(params),
                headers=headers,
                timeout=self._timeout,
            )
        except requests.Timeout as exc:
            raise RequestFailedError(
                f"making request: timed out after {self._timeout:g}s",
                hint="The API may be busy. Try again shortly.",
            ) from exc
        except requests.RequestException as exc:
            raise RequestFailedError(
                f"making request: {exc}",
                hint="Check your network connection.",
            ) from exc

        logger.debug("HTTP %s, %d bytes", response.status_code, len(response.content))
        self._raise_for_status(response)

        try:
            return response.json(parse_constant=_reject_constant)
        except ValueError as exc:
            raise InvalidResponseError(f"invalid JSON response: {exc}") from exc

    # ------------------------------------------------------------------
    # Status mapping
    # ------------------------------------------------------------------

    @staticmethod
    def _raise_for_status(response: requests.Response) -> None:
        """Translate a non-200 response into a domain exception."""
        code = response.status_code
        if code == requests.codes.ok:
            return
        # Rate limits are unpublished and fairly strict.
        if code == requests.codes.too_many_requests:
            raise RateLimitError(
                "rate limit exceeded (429): too many requests. "
                "Wait 10-60 seconds before retrying",
            )
        raise ApiResponseError(
            f"API returned status {code}: {response.text}",
            status_code=code,
        )
