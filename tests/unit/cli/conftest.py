"""CLI test fixtures."""

from unittest.mock import patch

import pytest


@pytest.fixture(autouse=True)
def mock_configure_logging(monkeypatch: pytest.MonkeyPatch):
    """Keep CLI invocations from reconfiguring the root logger."""
    monkeypatch.setattr("snapraid_web.cli._logging_configured", False)
    with patch("snapraid_web.logging.configure_logging") as mock:
        yield mock


@pytest.fixture(autouse=True)
def _isolated_config(tmp_path, monkeypatch: pytest.MonkeyPatch):
    """Point the default config file at an empty location."""
    for name in (
        "SNAPRAID_WEB_OUTPUT_DIR",
        "SNAPRAID_WEB_BIND",
        "SNAPRAID_WEB_PORT",
        "SNAPRAID_WEB_LOG_LEVEL",
        "SNAPRAID_WEB_LOG_FORMAT",
        "SNAPRAID_WEB_LOG_FILE",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("SNAPRAID_WEB_CONFIG_PATH", str(tmp_path / "absent.toml"))
