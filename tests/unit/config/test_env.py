"""Tests for EnvReader class."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from snapraid_web.config.env import EnvReader


class TestEnvReaderGetStr:
    """Tests for EnvReader.get_str method."""

    def test_returns_value_when_set(self) -> None:
        reader = EnvReader(env={"MY_VAR": "hello"})
        assert reader.get_str("MY_VAR") == "hello"

    def test_returns_default_when_not_set(self) -> None:
        reader = EnvReader(env={})
        assert reader.get_str("MY_VAR", "default") == "default"

    def test_returns_empty_string_when_set_to_empty(self) -> None:
        reader = EnvReader(env={"MY_VAR": ""})
        assert reader.get_str("MY_VAR", "default") == ""


class TestEnvReaderGetInt:
    """Tests for EnvReader.get_int method."""

    def test_returns_value_when_set(self) -> None:
        reader = EnvReader(env={"MY_VAR": "42"})
        assert reader.get_int("MY_VAR") == 42

    def test_returns_none_when_not_set(self) -> None:
        assert EnvReader(env={}).get_int("MY_VAR") is None

    def test_returns_default_and_warns_for_invalid(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Should return default and log warning for invalid integer."""
        reader = EnvReader(env={"MY_VAR": "not_a_number"})
        with caplog.at_level(logging.WARNING):
            result = reader.get_int("MY_VAR", 100)
        assert result == 100
        assert "Invalid integer value for MY_VAR: not_a_number" in caplog.text


class TestEnvReaderGetFloat:
    """Tests for EnvReader.get_float method."""

    def test_returns_value_when_set(self) -> None:
        assert EnvReader(env={"MY_VAR": "2.5"}).get_float("MY_VAR") == 2.5

    def test_returns_default_for_invalid(self) -> None:
        assert EnvReader(env={"MY_VAR": "soon"}).get_float("MY_VAR", 1.0) == 1.0


class TestEnvReaderGetBool:
    """Tests for EnvReader.get_bool method."""

    @pytest.mark.parametrize("value", ["true", "TRUE", "1", "yes", "on"])
    def test_truthy(self, value: str) -> None:
        assert EnvReader(env={"MY_VAR": value}).get_bool("MY_VAR") is True

    @pytest.mark.parametrize("value", ["false", "0", "no", "anything"])
    def test_falsy(self, value: str) -> None:
        assert EnvReader(env={"MY_VAR": value}).get_bool("MY_VAR") is False

    def test_default_when_not_set(self) -> None:
        assert EnvReader(env={}).get_bool("MY_VAR", True) is True


class TestEnvReaderGetPath:
    """Tests for EnvReader.get_path method."""

    def test_returns_path(self) -> None:
        reader = EnvReader(env={"MY_VAR": "/srv/output"})
        assert reader.get_path("MY_VAR") == Path("/srv/output")

    def test_expands_tilde(self) -> None:
        reader = EnvReader(env={"MY_VAR": "~/output"})
        assert reader.get_path("MY_VAR") == Path.home() / "output"

    def test_blank_is_default(self) -> None:
        reader = EnvReader(env={"MY_VAR": "   "})
        assert reader.get_path("MY_VAR", Path("/x")) == Path("/x")
