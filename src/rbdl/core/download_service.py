"""Core download service — orchestrates fetch, render, and save.

This service delegates network access to a
:class:`~rbdl.core.protocols.RepeaterProvider` and file output to an
:class:`~rbdl.core.protocols.OutputWriter`, both injected at
construction time.  It is responsible for:

* Building the API query from the configured filters.
* Rendering the payload in the configured format.
* Choosing the output path (explicit or generated).
* Ensuring only :class:`~rbdl.exceptions.RbdlError` subclasses escape.

Guarantees
----------
* No ``print()``, no direct filesystem or network access.
* No requests import.
"""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Any

from rbdl.core.models import DownloadConfig, DownloadResult
from rbdl.core.protocols import OutputWriter, RepeaterProvider
from rbdl.core.query import build_query_params, generate_filename
from rbdl.core.serializers import render
from rbdl.exceptions import OutputWriteError, RbdlError, RequestFailedError

logger = logging.getLogger(__name__)


class DownloadService:
    """Stateless service that drives a single download.

    Parameters
    ----------
    provider:
        Any object satisfying the :class:`RepeaterProvider` protocol.
    writer:
        Any object satisfying the :class:`OutputWriter` protocol.
    """

    def __init__(self, provider: RepeaterProvider, writer: OutputWriter) -> None:
        self._provider: RepeaterProvider = provider
        self._writer: OutputWriter = writer

    # ------------------------------------------------------------------
    # Output path (pure)
    # ------------------------------------------------------------------

    @staticmethod
    def output_path(config: DownloadConfig, now: datetime) -> Path:
        """Return the explicit ``--output`` path or a generated one."""
        if config.output is not None:
            return config.output
        return Path(generate_filename(config, now))

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def run(
        self,
        config: DownloadConfig,
        *,
        now: datetime | None = None,
    ) -> DownloadResult:
        """Fetch, render, and save repeater data for *config*.

        Parameters
        ----------
        config:
            Validated run configuration.
        now:
            Timestamp used for generated filenames.  Defaults to the
            current local time.

        Raises
        ------
        RbdlError
            Any subclass, depending on which step failed.
        """
        payload = self._fetch(config)

        content, count = render(payload, config.output_format, on_air=config.on_air)
        if count is not None:
            logger.debug("Rendered %d record(s) as %s", count, config.output_format.value)

        path = self.output_path(config, now or datetime.now())
        self._write(path, content)

        return DownloadResult(
            path=path,
            output_format=config.output_format,
            record_count=count,
        )

    # ------------------------------------------------------------------
    # Collaborator delegation (safe boundary)
    # ------------------------------------------------------------------

    def _fetch(self, config: DownloadConfig) -> Any:
        params = build_query_params(config.filters)
        logger.debug("Query parameters: %s", params)
        try:
            return self._provider.fetch(params, email=config.email)
        except RbdlError:
            # Already one of ours — let it propagate unchanged.
            raise
        except Exception as exc:
            raise RequestFailedError(
                f"Unexpected provider error: {exc}",
            ) from exc

    def _write(self, path: Path, content: str) -> None:
        try:
            self._writer.write_text(path, content)
        except RbdlError:
            raise
        except Exception as exc:
            raise OutputWriteError(
                f"Unexpected writer error: {exc}",
            ) from exc
