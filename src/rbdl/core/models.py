"""Domain models for rbdl.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access.  They carry zero I/O and zero dependencies
on external packages.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

Record = dict[str, Any]
"""One repeater entry exactly as decoded from the API's ``results`` list."""


# ---------------------------------------------------------------------------
# Output format
# ---------------------------------------------------------------------------

class OutputFormat(str, enum.Enum):
    """Serialization formats supported for the saved file."""

    JSON = "json"
    CSV = "csv"

    @property
    def extension(self) -> str:
        """File extension including the leading dot."""
        return f".{self.value}"


# ---------------------------------------------------------------------------
# Search filters
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class SearchFilters:
    """Query filters forwarded to the export API.

    Values containing ``%`` are wildcard patterns; they are passed
    through untouched and matched by the API itself.
    """

    callsign: str | None = None
    city: str | None = None
    country: str | None = None
    frequency: str | None = None

    mode: str | None = None
    """Operating mode (analog, DMR, NXDN, P25, tetra)."""

    landmark: str | None = None

    state_id: str | None = None
    """State/Province FIPS code."""

    region: str | None = None
    """Region, for international repeaters."""

    stype: str | None = None
    """Service type (e.g. ``GMRS``)."""


# ---------------------------------------------------------------------------
# Resolved run configuration
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class DownloadConfig:
    """Fully resolved and validated settings for a single download."""

    email: str
    """Contact address embedded in the ``User-Agent`` header."""

    output_format: OutputFormat

    output: Path | None = None
    """Destination file, or ``None`` to generate a name."""

    on_air: bool = False
    """Keep only repeaters whose operational status is on-air."""

    filters: SearchFilters = field(default_factory=SearchFilters)


# ---------------------------------------------------------------------------
# Run outcome
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class DownloadResult:
    """What was written by :meth:`DownloadService.run`."""

    path: Path
    output_format: OutputFormat

    record_count: int | None
    """Records written, or ``None`` when the payload was saved as-is."""
