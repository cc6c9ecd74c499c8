"""Tests for logging setup."""

import gzip

from loguru import logger

import settings.logging as log_settings


class TestSetupLogging:
    def test_file_sink(self, tmp_path, monkeypatch):
        monkeypatch.setattr(log_settings, "LOG_DIR", tmp_path / "logs")

        log_settings.setup_logging(level="INFO", to_file=True)
        logger.info("Analyzed {} reviews", 3)
        logger.remove()

        # Closed sinks are gzip-compressed
        files = list((tmp_path / "logs").glob("review_topics_*.log*"))
        assert len(files) == 1
        opener = gzip.open if files[0].suffix == ".gz" else open
        with opener(files[0], "rt") as f:
            assert "Analyzed 3 reviews" in f.read()

    def test_console_only(self, tmp_path, monkeypatch):
        monkeypatch.setattr(log_settings, "LOG_DIR", tmp_path / "logs")

        log_settings.setup_logging(to_file=False)

        assert not (tmp_path / "logs").exists()
