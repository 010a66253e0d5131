# -*- coding: utf-8 -*-
"""
Tests for logging configuration.
"""
import io
import json
import logging

import pytest

from hig_content.logging_config import get_section_id, section_context, setup_logging


@pytest.fixture
def restore_root_logger():
    """Put pytest's handlers back after setup_logging replaced them."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers[:]:
        root.removeHandler(handler)
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


class TestSectionContext:
    """Tests for the section id context."""

    def test_sets_and_resets(self):
        """Should expose the section id only inside the block."""
        assert get_section_id() is None

        with section_context("buttons"):
            assert get_section_id() == "buttons"
            with section_context("menus"):
                assert get_section_id() == "menus"
            assert get_section_id() == "buttons"

        assert get_section_id() is None


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_json_records_carry_section_id(self, restore_root_logger, monkeypatch):
        """Should emit one JSON object per record with level, logger and section id."""
        monkeypatch.setattr("hig_content.logging_config.settings.LOG_FORMAT", "json")
        stream = io.StringIO()
        setup_logging(level="INFO", stream=stream)

        with section_context("buttons"):
            logging.getLogger("hig_content.test").info("Processed page")

        record = json.loads(stream.getvalue().strip().splitlines()[-1])
        assert record["message"] == "Processed page"
        assert record["level"] == "INFO"
        assert record["logger"] == "hig_content.test"
        assert record["section_id"] == "buttons"

    def test_level_filters_records(self, restore_root_logger):
        """Should drop records below the configured level."""
        stream = io.StringIO()
        setup_logging(level="WARNING", stream=stream)

        logging.getLogger("hig_content.test").info("Not shown")

        assert stream.getvalue() == ""

    def test_text_format(self, restore_root_logger, monkeypatch):
        """Should fall back to plain text records."""
        monkeypatch.setattr("hig_content.logging_config.settings.LOG_FORMAT", "text")
        stream = io.StringIO()
        setup_logging(level="INFO", stream=stream)

        logging.getLogger("hig_content.test").warning("Plain record")

        line = stream.getvalue().strip()
        assert "WARNING hig_content.test [-] Plain record" in line
