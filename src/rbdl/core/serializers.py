"""Pure JSON and CSV rendering.

Rendering returns text; writing it to disk is the infrastructure
layer's job.  Each renderer also reports how many records it emitted
(``None`` when the payload was passed through untouched).
"""

from __future__ import annotations

import csv
import io
import json
import math
from collections.abc import Sequence
from decimal import Decimal
from typing import Any

from rbdl.core.models import OutputFormat, Record
from rbdl.core.records import collect_headers, filter_on_air, parse_records
from rbdl.exceptions import NoResultsError

JSON_INDENT: str = "\t"

CSV_LINE_TERMINATOR: str = "\n"


# ---------------------------------------------------------------------------
# JSON
# ---------------------------------------------------------------------------

def _dump_json(data: Any) -> str:
    return json.dumps(data, indent=JSON_INDENT, sort_keys=True, ensure_ascii=False) + "\n"


def render_json(payload: Any, *, on_air: bool = False) -> tuple[str, int | None]:
    """Render *payload* as pretty-printed JSON.

    Without filtering the whole payload is re-emitted as received.  With
    *on_air* the response is rebuilt around the surviving records so
    that ``count`` matches ``results``; zero survivors is still written.
    """
    if not on_air:
        return _dump_json(payload), None

    records = filter_on_air(parse_records(payload))
    return _dump_json({"count": len(records), "results": records}), len(records)


# ---------------------------------------------------------------------------
# CSV
# ---------------------------------------------------------------------------

def format_float(value: float) -> str:
    """Render *value* with the fewest digits that round-trip.

    Integral values drop the trailing ``.0``.  Exponent notation is used
    below 1e-4 and from 1e6 upward, e.g. ``1e+16``.
    """
    if not math.isfinite(value):
        return str(value)
    _, digits, exponent = Decimal(repr(value)).normalize().as_tuple()
    point = len(digits) + int(exponent)
    if -4 <= point - 1 < 6:
        return format(value, f".{max(len(digits) - point, 0)}f")
    return format(value, f".{len(digits) - 1}e")


def format_cell(value: Any) -> str:
    """Render one record value as CSV cell text.

    ``None`` becomes an empty cell, booleans use JSON spelling, floats
    use their shortest form, and nested arrays or objects are embedded
    as compact JSON.
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (dict, list)):
        return json.dumps(value, separators=(",", ":"), ensure_ascii=False)
    if isinstance(value, float):
        return format_float(value)
    return str(value)


def records_to_csv(records: Sequence[Record]) -> str:
    """Render *records* as CSV with a sorted union-of-keys header row."""
    headers = collect_headers(records)
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator=CSV_LINE_TERMINATOR)
    writer.writerow(headers)
    for record in records:
        writer.writerow([format_cell(record.get(header)) for header in headers])
    return buffer.getvalue()


def render_csv(payload: Any, *, on_air: bool = False) -> tuple[str, int]:
    """Render the payload's records as CSV.

    Raises
    ------
    NoResultsError
        If the payload has no results, or none survive the on-air filter.
    """
    records = parse_records(payload)
    if on_air:
        records = filter_on_air(records)
    if not records:
        raise NoResultsError(
            "no data to write",
            hint="No repeaters matched the on-air filter.",
        )
    return records_to_csv(records), len(records)


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------

def render(
    payload: Any,
    output_format: OutputFormat,
    *,
    on_air: bool = False,
) -> tuple[str, int | None]:
    """Render *payload* in *output_format*."""
    if output_format is OutputFormat.CSV:
        return render_csv(payload, on_air=on_air)
    return render_json(payload, on_air=on_air)
