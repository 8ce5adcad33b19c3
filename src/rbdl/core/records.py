"""Pure record normalization and filtering.

Every function in this module is a **pure** transformation — no I/O,
no side effects, fully deterministic.

The export API answers with ``{"count": N, "results": [...]}``; each
result is a flat JSON object describing one repeater.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from rbdl.core.models import Record
from rbdl.exceptions import InvalidResponseError, NoResultsError

STATUS_FIELD: str = "Operational Status"
"""Result key holding the repeater's operational status."""

ON_AIR_STATUS: str = "On-air"
"""Status value marking a repeater as currently on the air."""


def parse_records(payload: Any) -> list[Record]:
    """Pull the list of repeater records out of an API payload.

    Entries of ``results`` that are not JSON objects are skipped.

    Raises
    ------
    InvalidResponseError
        If *payload* is not a JSON object.
    NoResultsError
        If ``results`` is missing, null, or empty.
    """
    if not isinstance(payload, dict):
        raise InvalidResponseError(
            "unable to parse API response: expected a JSON object, "
            f"got {type(payload).__name__}",
        )

    raw = payload.get("results")
    if raw is not None and not isinstance(raw, list):
        raise InvalidResponseError(
            "unable to parse API response: 'results' is not a list",
        )

    records = [entry for entry in raw or [] if isinstance(entry, dict)]
    if not records:
        raise NoResultsError(
            "no results in API response",
            hint="Broaden the search filters or check the spelling of values.",
        )
    return records


def is_on_air(record: Record) -> bool:
    """Return ``True`` when *record* reports an on-air status."""
    status = record.get(STATUS_FIELD)
    return isinstance(status, str) and status == ON_AIR_STATUS


def filter_on_air(records: Sequence[Record]) -> list[Record]:
    """Keep only on-air repeaters, preserving API order."""
    return [record for record in records if is_on_air(record)]


def collect_headers(records: Sequence[Record]) -> list[str]:
    """Return the union of all record keys, sorted for stable output."""
    headers: set[str] = set()
    for record in records:
        headers.update(record)
    return sorted(headers)
