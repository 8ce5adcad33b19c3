"""Infrastructure: atomic text file output.

Writes go to a temporary file in the destination directory which is
then renamed over the target, so a failed run never leaves a partially
written file behind.

Rules
-----
* No ``print()`` — callers handle user-facing output.
* Every ``OSError`` is re-raised as :class:`OutputWriteError`.
"""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path

from rbdl.exceptions import OutputWriteError

logger = logging.getLogger(__name__)

DEFAULT_MODE: int = 0o644


class AtomicFileWriter:
    """Concrete :class:`~rbdl.core.protocols.OutputWriter`.

    Parameters
    ----------
    mode:
        Permission bits applied to the written file.
    """

    def __init__(self, *, mode: int = DEFAULT_MODE, encoding: str = "utf-8") -> None:
        self._mode: int = mode
        self._encoding: str = encoding

    def write_text(self, path: Path, content: str) -> None:
        """Atomically replace *path* with *content*.

        Missing parent directories are created.  Newlines are written
        exactly as given.

        Raises
        ------
        OutputWriteError
            If the directory, temp file, or rename fails.
        """
        parent = path.parent
        try:
            parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=parent,
                prefix=f".{path.name}.",
                suffix=".tmp",
            )
        except OSError as exc:
            raise OutputWriteError(f"writing file: {exc}") from exc

        tmp_path = Path(tmp_name)
        try:
            with os.fdopen(fd, "w", encoding=self._encoding, newline="") as handle:
                handle.write(content)
            tmp_path.chmod(self._mode)
            tmp_path.replace(path)
        except OSError as exc:
            tmp_path.unlink(missing_ok=True)
            raise OutputWriteError(
                f"writing file: {exc}",
                hint=f"Check that {parent} is writable.",
            ) from exc

        logger.debug("Wrote %d characters to %s", len(content), path)
