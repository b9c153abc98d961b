"""Unit tests for structured logging setup."""
import json

from stockscore.core.config import get_settings
from stockscore.utils.structured_logging import (
    configure_from_settings,
    configure_structured_logging,
    get_logger,
)


class TestStructuredLogging:
    """Tests for configure_structured_logging and get_logger."""

    def teardown_method(self) -> None:
        configure_structured_logging("WARNING")

    def test_json_output(self, capsys) -> None:
        configure_structured_logging("DEBUG", json_format=True)

        get_logger("tests").info("score_computed", score=12.5)

        record = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
        assert record["event"] == "score_computed"
        assert record["score"] == 12.5
        assert record["level"] == "info"
        assert "timestamp" in record

    def test_level_filtering(self, capsys) -> None:
        configure_structured_logging("WARNING")

        get_logger("tests").debug("hidden")

        assert "hidden" not in capsys.readouterr().out

    def test_console_renderer(self, capsys) -> None:
        configure_structured_logging("INFO", json_format=False)

        get_logger("tests").info("console_event")

        assert "console_event" in capsys.readouterr().out

    def test_configure_from_settings(self, monkeypatch, capsys) -> None:
        monkeypatch.setenv("STOCKSCORE_LOG_LEVEL", "ERROR")
        get_settings.cache_clear()
        try:
            configure_from_settings()
            get_logger("tests").warning("below_threshold")
            get_logger("tests").error("above_threshold")
        finally:
            get_settings.cache_clear()

        out = capsys.readouterr().out
        assert "below_threshold" not in out
        assert "above_threshold" in out
