"""Core / service layer — pure business logic and data transformations.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli`` or ``infra``.
"""

from rbdl.core.config import build_config, resolve_email, resolve_format
from rbdl.core.download_service import DownloadService
from rbdl.core.models import (
    DownloadConfig,
    DownloadResult,
    OutputFormat,
    Record,
    SearchFilters,
)
from rbdl.core.protocols import OutputWriter, RepeaterProvider

__all__: list[str] = [
    "DownloadConfig",
    "DownloadResult",
    "DownloadService",
    "OutputFormat",
    "OutputWriter",
    "Record",
    "RepeaterProvider",
    "SearchFilters",
    "build_config",
    "resolve_email",
    "resolve_format",
]
