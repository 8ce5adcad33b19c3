"""Allow ``python -m rbdl`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m rbdl`` behaves identically to the ``rbdl`` console script.
"""

from __future__ import annotations

from rbdl.cli.app import cli

if __name__ == "__main__":
    cli()
