"""Run configuration resolution and validation.

Turns raw option values (as collected by the CLI) into a validated
:class:`~rbdl.core.models.DownloadConfig`.  The process environment is
passed in explicitly so every function here stays pure.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

from rbdl.core.models import DownloadConfig, OutputFormat, SearchFilters
from rbdl.exceptions import ConfigurationError

EMAIL_ENV_VAR: str = "RBDL_EMAIL"

_EXTENSION_FORMATS: dict[str, OutputFormat] = {
    ".csv": OutputFormat.CSV,
    ".json": OutputFormat.JSON,
}


def resolve_email(explicit: str | None, environ: Mapping[str, str]) -> str | None:
    """Return the ``--email`` value, falling back to ``RBDL_EMAIL``."""
    if explicit:
        return explicit
    return environ.get(EMAIL_ENV_VAR) or None


def resolve_format(explicit: str | None, output: Path | None) -> OutputFormat:
    """Pick the output format.

    An explicit format always wins.  Otherwise the output file's
    extension decides, and anything unrecognised (or no output path at
    all) means JSON.

    Raises
    ------
    ConfigurationError
        If *explicit* is neither ``json`` nor ``csv``.
    """
    if explicit:
        try:
            return OutputFormat(explicit.lower())
        except ValueError:
            raise ConfigurationError(
                "format must be either 'json' or 'csv'",
                hint=f"Got {explicit!r}.",
            ) from None

    if output is None:
        return OutputFormat.JSON
    return _EXTENSION_FORMATS.get(output.suffix.lower(), OutputFormat.JSON)


def build_config(
    *,
    email: str | None,
    output: str | None,
    output_format: str | None,
    on_air: bool,
    filters: SearchFilters,
    environ: Mapping[str, str],
) -> DownloadConfig:
    """Combine raw option values into a validated :class:`DownloadConfig`.

    Raises
    ------
    ConfigurationError
        If no email is available or the format is unsupported.
    """
    resolved_email = resolve_email(email, environ)
    if resolved_email is None:
        raise ConfigurationError(
            "email is required (use --email flag or set a "
            f"{EMAIL_ENV_VAR} environment variable)",
        )

    output_path = Path(output) if output else None
    return DownloadConfig(
        email=resolved_email,
        output=output_path,
        output_format=resolve_format(output_format, output_path),
        on_air=on_air,
        filters=filters,
    )
