"""Infrastructure layer — external system integration.

This layer wraps all interaction with the RepeaterBook API and the
filesystem.  Every raw third-party exception must be caught here and
re-raised as a :class:`~rbdl.exceptions.RbdlError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
"""

from rbdl.infra.file_writer import AtomicFileWriter
from rbdl.infra.repeaterbook_client import API_ENDPOINT, RepeaterBookClient

__all__: list[str] = [
    "API_ENDPOINT",
    "AtomicFileWriter",
    "RepeaterBookClient",
]
