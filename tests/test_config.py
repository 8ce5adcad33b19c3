"""Tests for configuration resolution (core/config.py).

The environment is always passed explicitly — no test reads or
mutates ``os.environ``.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from rbdl.core.config import EMAIL_ENV_VAR, build_config, resolve_email, resolve_format
from rbdl.core.models import OutputFormat, SearchFilters
from rbdl.exceptions import ConfigurationError


def _build(**overrides: object):
    kwargs: dict[str, object] = {
        "email": "user@example.com",
        "output": None,
        "output_format": None,
        "on_air": False,
        "filters": SearchFilters(),
        "environ": {},
    }
    kwargs.update(overrides)
    return build_config(**kwargs)  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# resolve_format
# ---------------------------------------------------------------------------

class TestResolveFormat:
    def test_defaults_to_json_without_output(self) -> None:
        assert resolve_format(None, None) is OutputFormat.JSON

    @pytest.mark.parametrize(
        ("filename", "expected"),
        [
            ("repeaters.csv", OutputFormat.CSV),
            ("REPEATERS.CSV", OutputFormat.CSV),
            ("repeaters.json", OutputFormat.JSON),
            ("repeaters.txt", OutputFormat.JSON),
            ("repeaters", OutputFormat.JSON),
        ],
    )
    def test_detected_from_extension(self, filename: str, expected: OutputFormat) -> None:
        assert resolve_format(None, Path(filename)) is expected

    def test_explicit_format_wins_over_extension(self) -> None:
        assert resolve_format("json", Path("repeaters.csv")) is OutputFormat.JSON

    def test_explicit_format_is_case_insensitive(self) -> None:
        assert resolve_format("CSV", None) is OutputFormat.CSV

    def test_unknown_explicit_format_raises(self) -> None:
        with pytest.raises(ConfigurationError, match="format must be either 'json' or 'csv'"):
            resolve_format("xml", None)


# ---------------------------------------------------------------------------
# resolve_email
# ---------------------------------------------------------------------------

class TestResolveEmail:
    def test_explicit_wins(self) -> None:
        env = {EMAIL_ENV_VAR: "env@example.com"}
        assert resolve_email("flag@example.com", env) == "flag@example.com"

    def test_falls_back_to_environment(self) -> None:
        env = {EMAIL_ENV_VAR: "env@example.com"}
        assert resolve_email(None, env) == "env@example.com"

    def test_empty_values_are_missing(self) -> None:
        assert resolve_email("", {EMAIL_ENV_VAR: ""}) is None

    def test_missing_everywhere(self) -> None:
        assert resolve_email(None, {}) is None


# ---------------------------------------------------------------------------
# build_config
# ---------------------------------------------------------------------------

class TestBuildConfig:
    def test_minimal(self) -> None:
        config = _build()
        assert config.email == "user@example.com"
        assert config.output is None
        assert config.output_format is OutputFormat.JSON
        assert config.on_air is False

    def test_missing_email_raises(self) -> None:
        with pytest.raises(ConfigurationError, match="email is required"):
            _build(email=None)

    def test_email_from_environment(self) -> None:
        config = _build(email=None, environ={EMAIL_ENV_VAR: "env@example.com"})
        assert config.email == "env@example.com"

    def test_output_becomes_path_and_drives_format(self) -> None:
        config = _build(output="out/repeaters.csv")
        assert config.output == Path("out/repeaters.csv")
        assert config.output_format is OutputFormat.CSV

    def test_invalid_format_raises(self) -> None:
        with pytest.raises(ConfigurationError):
            _build(output_format="yaml")

    def test_email_checked_before_format(self) -> None:
        with pytest.raises(ConfigurationError, match="email is required"):
            _build(email=None, output_format="yaml")

    def test_filters_and_flag_carried_through(self) -> None:
        filters = SearchFilters(country="Canada", mode="DMR")
        config = _build(filters=filters, on_air=True)
        assert config.filters is filters
        assert config.on_air is True
