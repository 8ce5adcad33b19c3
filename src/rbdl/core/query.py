"""Pure query-building helpers.

Every function in this module is a **pure** transformation — no I/O,
no clock reads (callers pass ``now``), fully deterministic.
"""

from __future__ import annotations

from datetime import datetime

from rbdl.core.models import DownloadConfig, SearchFilters

USER_AGENT_TEMPLATE: str = "RepeaterbookDL CLI (beta), {email}"

FILENAME_PREFIX: str = "repeaterbook"

TIMESTAMP_FORMAT: str = "%Y%m%d_%H%M%S"

_PATH_SEPARATORS: tuple[str, ...] = ("/", "\\")

# (SearchFilters attribute, API parameter name)
_PARAM_NAMES: tuple[tuple[str, str], ...] = (
    ("callsign", "callsign"),
    ("city", "city"),
    ("country", "country"),
    ("frequency", "frequency"),
    ("mode", "mode"),
    ("landmark", "landmark"),
    ("state_id", "state_id"),
    ("region", "region"),
    ("stype", "stype"),
)

# (SearchFilters attribute, filename label), in filename order
_FILENAME_PARTS: tuple[tuple[str, str], ...] = (
    ("state_id", "state"),
    ("country", "country"),
    ("mode", "mode"),
    ("frequency", "freq"),
)


def build_query_params(filters: SearchFilters) -> dict[str, str]:
    """Return API query parameters for every filter that is set.

    Wildcard patterns (``%``) are passed through verbatim.
    """
    params: dict[str, str] = {}
    for attr, name in _PARAM_NAMES:
        value = getattr(filters, attr)
        if value:
            params[name] = value
    return params


def build_user_agent(email: str) -> str:
    """Return the ``User-Agent`` value the API uses to identify callers."""
    return USER_AGENT_TEMPLATE.format(email=email)


def _filename_part(value: str) -> str:
    """Replace path separators so a filter value stays inside one filename."""
    for separator in _PATH_SEPARATORS:
        value = value.replace(separator, "-")
    return value


def generate_filename(config: DownloadConfig, now: datetime) -> str:
    """Build a descriptive, timestamped filename for *config*.

    Example: ``repeaterbook_country_Canada_mode_DMR_20240131_154500.csv``

    Path separators in filter values become ``-``.
    """
    parts = [FILENAME_PREFIX]
    for attr, label in _FILENAME_PARTS:
        value = getattr(config.filters, attr)
        if value:
            parts.append(f"{label}_{_filename_part(value)}")
    parts.append(now.strftime(TIMESTAMP_FORMAT))
    return "_".join(parts) + config.output_format.extension
