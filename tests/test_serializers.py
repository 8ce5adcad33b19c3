"""Tests for JSON and CSV rendering (core/serializers.py)."""

from __future__ import annotations

import csv
import io
import json
from typing import Any

import pytest

from rbdl.core.models import OutputFormat
from rbdl.core.serializers import format_cell, records_to_csv, render, render_csv, render_json
from rbdl.exceptions import NoResultsError


def _read_csv(text: str) -> list[list[str]]:
    return list(csv.reader(io.StringIO(text)))


# ---------------------------------------------------------------------------
# JSON
# ---------------------------------------------------------------------------

class TestRenderJson:
    def test_unfiltered_payload_round_trips(self, sample_payload: dict[str, Any]) -> None:
        text, count = render_json(sample_payload)
        assert json.loads(text) == sample_payload
        assert count is None

    def test_tab_indented_with_sorted_keys(self) -> None:
        text, _ = render_json({"results": [], "count": 0})
        assert text == '{\n\t"count": 0,\n\t"results": []\n}\n'

    def test_unfiltered_does_not_require_results(self) -> None:
        text, _ = render_json({"status": "error", "message": "bad state"})
        assert json.loads(text)["status"] == "error"

    def test_non_ascii_kept(self) -> None:
        text, _ = render_json({"results": [{"Nearest City": "Montréal"}]})
        assert "Montréal" in text

    def test_on_air_rebuilds_count(self, sample_payload: dict[str, Any]) -> None:
        text, count = render_json(sample_payload, on_air=True)
        data = json.loads(text)
        assert count == 2
        assert data["count"] == 2
        assert [r["Callsign"] for r in data["results"]] == ["VE3RPT", "VA3DMR"]
        assert set(data) == {"count", "results"}

    def test_on_air_with_no_survivors_writes_zero(self) -> None:
        payload = {"count": 1, "results": [{"Operational Status": "Off-air"}]}
        text, count = render_json(payload, on_air=True)
        assert count == 0
        assert json.loads(text) == {"count": 0, "results": []}

    def test_on_air_without_results_raises(self) -> None:
        with pytest.raises(NoResultsError):
            render_json({"count": 0, "results": []}, on_air=True)


# ---------------------------------------------------------------------------
# CSV cells
# ---------------------------------------------------------------------------

class TestFormatCell:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (None, ""),
            ("Yes", "Yes"),
            (True, "true"),
            (False, "false"),
            (5, "5"),
            (146.52, "146.52"),
            (1.0, "1"),
            (100.0, "100"),
            (-2.5, "-2.5"),
            (0.0001, "0.0001"),
            (0.00001, "1e-05"),
            (1234567.0, "1.234567e+06"),
            (1e16, "1e+16"),
            (12345678901, "12345678901"),
            ([1, 2], "[1,2]"),
            ({"a": "b"}, '{"a":"b"}'),
        ],
    )
    def test_rendering(self, value: Any, expected: str) -> None:
        assert format_cell(value) == expected


# ---------------------------------------------------------------------------
# CSV
# ---------------------------------------------------------------------------

class TestRecordsToCsv:
    def test_header_is_sorted_union(self) -> None:
        rows = _read_csv(records_to_csv([{"b": "1"}, {"a": "2", "c": "3"}]))
        assert rows[0] == ["a", "b", "c"]

    def test_missing_and_null_values_are_empty(self) -> None:
        rows = _read_csv(records_to_csv([{"a": "1", "b": None}, {"b": "2"}]))
        assert rows[1:] == [["1", ""], ["", "2"]]

    def test_rows_keep_api_order(self) -> None:
        rows = _read_csv(records_to_csv([{"k": "z"}, {"k": "a"}, {"k": "m"}]))
        assert [row[0] for row in rows[1:]] == ["z", "a", "m"]

    def test_values_with_commas_and_quotes_are_quoted(self) -> None:
        text = records_to_csv([{"Notes": 'Linked, "EchoLink"'}])
        assert _read_csv(text)[1] == ['Linked, "EchoLink"']

    def test_unix_line_endings(self) -> None:
        text = records_to_csv([{"a": "1"}])
        assert text == "a\n1\n"


class TestRenderCsv:
    def test_all_records(self, sample_payload: dict[str, Any]) -> None:
        text, count = render_csv(sample_payload)
        rows = _read_csv(text)
        assert count == 3
        assert len(rows) == 4
        assert "DMR ID" in rows[0]

    def test_on_air_only(self, sample_payload: dict[str, Any]) -> None:
        text, count = render_csv(sample_payload, on_air=True)
        rows = _read_csv(text)
        callsign_col = rows[0].index("Callsign")
        assert count == 2
        assert [row[callsign_col] for row in rows[1:]] == ["VE3RPT", "VA3DMR"]

    def test_no_results_raises(self) -> None:
        with pytest.raises(NoResultsError, match="no results in API response"):
            render_csv({"count": 0, "results": []})

    def test_no_on_air_survivors_raises(self) -> None:
        payload = {"results": [{"Operational Status": "Off-air"}]}
        with pytest.raises(NoResultsError, match="no data to write"):
            render_csv(payload, on_air=True)


class TestRenderDispatch:
    def test_json(self, sample_payload: dict[str, Any]) -> None:
        text, _ = render(sample_payload, OutputFormat.JSON)
        assert text.startswith("{")

    def test_csv(self, sample_payload: dict[str, Any]) -> None:
        text, count = render(sample_payload, OutputFormat.CSV, on_air=True)
        assert text.splitlines()[0].startswith("Callsign,")
        assert count == 2
