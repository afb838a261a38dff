"""
Tests for the package logger setup.
"""

import logging

from vectorlab.logging_config import setup_logging


class TestSetupLogging:

    def test_string_level(self):
        logger = setup_logging("debug")
        assert logger.name == "vectorlab"
        assert logger.level == logging.DEBUG

    def test_unknown_level_falls_back_to_info(self):
        assert setup_logging("chatty").level == logging.INFO

    def test_repeated_setup_does_not_stack_handlers(self):
        setup_logging(logging.WARNING)
        logger = setup_logging(logging.WARNING)
        assert len(logger.handlers) == 1

    def test_log_file(self, tmp_path):
        path = tmp_path / "vectorlab.log"
        logger = setup_logging(logging.INFO, log_file=str(path))
        logging.getLogger("vectorlab.sync").info("hello")
        for handler in logger.handlers:
            handler.flush()
        assert "vectorlab.sync - INFO - hello" in path.read_text(encoding="utf-8")
        for handler in list(logger.handlers):
            handler.close()
        logger.handlers.clear()
