"""Tests for structured logging configuration."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from core.config import LoggingSettings, Settings
from core.logging import (
    bound_context,
    configure_from_settings,
    configure_logging,
    get_logger,
)

if TYPE_CHECKING:
    import pytest


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_console_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Console format should include the event and key/values."""
        configure_logging(log_level="INFO")

        get_logger("test").info("breakdown computed", rate="18")

        out = capsys.readouterr().out
        assert "breakdown computed" in out
        assert "rate=18" in out

    def test_json_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        """JSON format should emit one parseable object per line."""
        configure_logging(json_format=True, log_level="DEBUG")

        get_logger("test").debug("breakdown computed", mode="inclusive")

        line = capsys.readouterr().out.strip().splitlines()[-1]
        payload = json.loads(line)
        assert payload["event"] == "breakdown computed"
        assert payload["mode"] == "inclusive"
        assert payload["level"] == "debug"

    def test_level_filters(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Messages below the level should be dropped."""
        configure_logging(log_level="WARNING")

        get_logger("test").info("hidden")

        assert "hidden" not in capsys.readouterr().out


class TestConfigureFromSettings:
    """Tests for configure_from_settings."""

    def test_uses_logging_section(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Settings should select JSON output and level."""
        settings = Settings(logging=LoggingSettings(level="ERROR", json_format=True))

        configure_from_settings(settings)
        logger = get_logger("test")
        logger.warning("dropped")
        logger.error("kept")

        out = capsys.readouterr().out
        assert "dropped" not in out
        assert json.loads(out.strip())["event"] == "kept"


class TestBoundContext:
    """Tests for bound_context."""

    def test_context_only_inside_block(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Bound variables should appear inside the block and be dropped after it."""
        configure_logging(json_format=True)

        with bound_context(invoice_id="MNT-42"):
            get_logger("test").info("priced")
        get_logger("test").info("after")

        lines = [json.loads(line) for line in capsys.readouterr().out.strip().splitlines()]
        assert lines[0]["invoice_id"] == "MNT-42"
        assert "invoice_id" not in lines[1]

    def test_outer_context_restored(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Variables bound outside the block should survive it."""
        configure_logging(json_format=True)

        with bound_context(vehicle="KA-01-1234"):
            with bound_context(invoice_id="MNT-42"):
                pass
            get_logger("test").info("still bound")

        payload = json.loads(capsys.readouterr().out.strip())
        assert payload["vehicle"] == "KA-01-1234"
        assert "invoice_id" not in payload
