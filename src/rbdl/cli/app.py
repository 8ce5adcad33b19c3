"""CLI application entry point for rbdl.

This module is the **sole error boundary** for the entire application.
It catches :class:`~rbdl.exceptions.RbdlError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering user-friendly messages via
Rich and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — all work is delegated to the core and
  infrastructure layers.
* This module is the only place that reads ``os.environ`` and the only
  place that translates between the domain world and the OS process
  exit code.
"""

from __future__ import annotations

import argparse
import os
import sys
from collections.abc import Mapping

from rbdl.cli import exit_codes
from rbdl.cli.console import console, escape
from rbdl.cli.log import configure_logging
from rbdl.core.config import EMAIL_ENV_VAR, build_config
from rbdl.core.models import DownloadConfig, SearchFilters
from rbdl.exceptions import RbdlError
from rbdl.version import __version__

_EPILOG = f"""\
Examples:
  rbdl --email user@example.com --country "United States" --mode DMR
  rbdl --email user@example.com --country Canada --mode DMR --format csv
  rbdl --email user@example.com --country "United States" --on-air
  rbdl --email user@example.com --output repeaters.csv
  rbdl --email user@example.com --country Mexico --frequency 146.52
  rbdl --email user@example.com --callsign W%

Note: Use % as wildcard for pattern matching.
The email may also be supplied through the {EMAIL_ENV_VAR} environment variable.
"""


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the argument parser.

    All options are optional at the parser level; required-ness of the
    email and validity of the format are checked in the core so that
    every failure flows through the same error boundary.
    """
    parser = argparse.ArgumentParser(
        prog="rbdl",
        description="RepeaterbookDL - Download repeater data from RepeaterBook API.",
        epilog=_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show debug logging.",
    )

    output = parser.add_argument_group("output")
    output.add_argument(
        "--email",
        help=f"Email address (required, or set {EMAIL_ENV_VAR}).",
    )
    output.add_argument(
        "--output",
        help="Output file path (auto-generated if not specified).",
    )
    output.add_argument(
        "--format",
        dest="output_format",
        help="Output format: json or csv (auto-detected from output filename if not specified).",
    )
    output.add_argument(
        "--on-air",
        action="store_true",
        help="Only include on-air repeaters.",
    )

    search = parser.add_argument_group("search filters")
    search.add_argument("--callsign", help="Repeater callsign (supports %% wildcard).")
    search.add_argument("--city", help="Repeater city (supports %% wildcard).")
    search.add_argument("--country", help="Repeater country (supports %% wildcard).")
    search.add_argument("--frequency", help="Repeater frequency.")
    search.add_argument("--mode", help="Operating mode (analog, DMR, NXDN, P25, tetra).")
    search.add_argument("--landmark", help="Landmark (supports %% wildcard).")
    search.add_argument("--state", dest="state_id", help="State/Province FIPS code.")
    search.add_argument("--region", help="Region (for international repeaters).")
    search.add_argument("--stype", help="Service type (e.g., GMRS).")
    return parser


def _config_from_args(
    args: argparse.Namespace,
    environ: Mapping[str, str],
) -> DownloadConfig:
    filters = SearchFilters(
        callsign=args.callsign,
        city=args.city,
        country=args.country,
        frequency=args.frequency,
        mode=args.mode,
        landmark=args.landmark,
        state_id=args.state_id,
        region=args.region,
        stype=args.stype,
    )
    return build_config(
        email=args.email,
        output=args.output,
        output_format=args.output_format,
        on_air=args.on_air,
        filters=filters,
        environ=environ,
    )


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_download(config: DownloadConfig) -> int:
    """Fetch, render, and save repeater data for *config*."""
    from rbdl.core.download_service import DownloadService
    from rbdl.infra.file_writer import AtomicFileWriter
    from rbdl.infra.repeaterbook_client import RepeaterBookClient

    service = DownloadService(RepeaterBookClient(), AtomicFileWriter())
    result = service.run(config)

    if result.record_count is not None:
        console.print(f"[dim]{result.record_count} repeater(s) written.[/dim]")
    console.print(
        f"[bold green]Successfully saved data to:[/bold green] {escape(str(result.path))}",
        soft_wrap=True,
        highlight=False,
    )
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(
    argv: list[str] | None = None,
    environ: Mapping[str, str] | None = None,
) -> int:
    """Run the rbdl CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.
    environ:
        Environment mapping consulted for ``RBDL_EMAIL``.  Defaults to
        ``os.environ``.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    config = _config_from_args(args, os.environ if environ is None else environ)
    return _handle_download(config)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except RbdlError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape(str(exc))}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
