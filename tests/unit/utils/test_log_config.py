"""Tests for logging configuration."""

import logging
from logging.handlers import RotatingFileHandler

from activity_line.utils.log_config import configure_logging


class TestConfigureLogging:
    """Tests for configure_logging()."""

    def test_stderr_handler_by_default(self):
        logger = configure_logging("INFO")

        assert logger.name == "activity_line"
        assert logger.level == logging.INFO
        assert logger.propagate is False
        assert len(logger.handlers) == 1
        handler = logger.handlers[0]
        assert isinstance(handler, logging.StreamHandler)
        assert not isinstance(handler, logging.FileHandler)

    def test_rotating_file_handler(self, tmp_path):
        log_file = tmp_path / "logs" / "activity-line.log"

        logger = configure_logging("DEBUG", log_file=log_file, max_size_mb=2, backup_count=4)
        logging.getLogger("activity_line.activity.transcript").debug("parsed transcript")
        for handler in logger.handlers:
            handler.flush()

        handler = logger.handlers[0]
        assert isinstance(handler, RotatingFileHandler)
        assert handler.maxBytes == 2 * 1024 * 1024
        assert handler.backupCount == 4
        content = log_file.read_text(encoding="utf-8")
        assert "parsed transcript" in content
        assert "activity_line.activity.transcript:" in content

    def test_reconfigure_replaces_handlers(self, tmp_path):
        configure_logging("INFO")
        logger = configure_logging("WARNING", log_file=tmp_path / "a.log")
        assert len(logger.handlers) == 1
        assert logger.level == logging.WARNING

    def test_unknown_level_falls_back_to_warning(self):
        assert configure_logging("chatty").level == logging.WARNING

    def test_unusable_log_file_falls_back_to_stderr(self, tmp_path):
        blocker = tmp_path / "file"
        blocker.write_text("", encoding="utf-8")

        logger = configure_logging("INFO", log_file=blocker / "sub" / "x.log")

        assert len(logger.handlers) == 1
        assert not isinstance(logger.handlers[0], logging.FileHandler)
