"""Unit tests for session logging setup."""

import pytest
from loguru import logger

from akafo import __version__
from akafo.contexts.parsing.logger import _log_debug, setup_parsing_logger
from akafo.utils.logger import session_header, setup_session_logger


@pytest.mark.unit
class TestSessionHeader:
    """Tests for session_header function."""

    def test_standard_fields(self):
        header = session_header("https://example.org/feed")

        assert header["Feed source"] == "https://example.org/feed"
        assert header["akafo"] == __version__
        assert "feedparser" in header
        assert "beautifulsoup4" in header

    def test_missing_source(self):
        assert session_header()["Feed source"] == "(unknown)"

    def test_extra_fields_appended(self):
        header = session_header("feed.xml", extra={"Canteen": "rub"})
        assert list(header)[-1] == "Canteen"


@pytest.mark.unit
class TestSetupSessionLogger:
    """Tests for setup_session_logger function."""

    def test_file_gets_debug_and_header(self, tmp_path):
        log_file = setup_session_logger(tmp_path / "session", "parse", source="feed.xml")
        _log_debug("Read atom10 feed with 2 entries")
        logger.remove()

        assert log_file == tmp_path / "session" / "parse.log"
        text = log_file.read_text(encoding="utf-8")
        assert "Feed source: feed.xml" in text
        assert f"akafo: {__version__}" in text
        assert "[parse] Read atom10 feed with 2 entries" in text

    def test_console_is_stderr_at_info(self, tmp_path, capsys):
        setup_session_logger(tmp_path, "parse")
        logger.debug("only in the file")
        logger.info("on the console")
        logger.remove()

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "on the console" in captured.err
        assert "only in the file" not in captured.err

    def test_replaces_previous_sinks(self, tmp_path):
        first = setup_session_logger(tmp_path / "first", "parse")
        second = setup_parsing_logger(tmp_path / "second", source="feed.xml")
        logger.info("second session")
        logger.remove()

        assert "second session" not in first.read_text(encoding="utf-8")
        assert "second session" in second.read_text(encoding="utf-8")
