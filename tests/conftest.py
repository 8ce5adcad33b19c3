"""Shared pytest fixtures and configuration for the rbdl test suite.

Guidelines
----------
* No internet access in any test.
* requests must be mocked at the infra boundary.
* Core tests must be pure — no side effects.
* Filesystem tests write under ``tmp_path`` only.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Any

import pytest


def _make_record(**overrides: Any) -> dict[str, Any]:
    """Factory for one repeater record shaped like the export API's."""
    record: dict[str, Any] = {
        "Callsign": "VE3RPT",
        "Frequency": "146.94000",
        "Input Freq": "146.34000",
        "Nearest City": "Toronto",
        "Country": "Canada",
        "Operational Status": "On-air",
        "FM Analog": "Yes",
        "DMR": "No",
    }
    record.update(overrides)
    return record


@pytest.fixture
def sample_payload() -> dict[str, Any]:
    """A three-result payload with one off-air repeater."""
    results = [
        _make_record(),
        _make_record(Callsign="VE3OFF", **{"Operational Status": "Off-air"}),
        _make_record(Callsign="VA3DMR", DMR="Yes", **{"DMR ID": "302123"}),
    ]
    return {"count": len(results), "results": results}


@pytest.fixture(autouse=True)
def _reset_rbdl_logger() -> Iterator[None]:
    """Undo handler changes made by ``configure_logging`` during a test."""
    logger = logging.getLogger("rbdl")
    saved = (list(logger.handlers), logger.level, logger.propagate)
    yield
    logger.handlers[:] = saved[0]
    logger.setLevel(saved[1])
    logger.propagate = saved[2]
