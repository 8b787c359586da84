"""Unit tests for logging setup."""

import logging

from forumwatch.utils import log


class TestConfigure:
    def test_file_handler_when_enabled(self, monkeypatch, tmp_path):
        monkeypatch.setenv("LOG_TO_FILE", "true")
        monkeypatch.setenv("LOG_DIR", str(tmp_path))
        try:
            log.configure("WARNING")
            log.get_logger("forumwatch").warning("written")
            for h in logging.getLogger().handlers:
                h.flush()
            assert "written" in (tmp_path / "forumwatch.log").read_text(encoding="utf-8")
            assert logging.getLogger().level == logging.WARNING
        finally:
            for h in logging.getLogger().handlers:
                h.close()
            monkeypatch.setenv("LOG_TO_FILE", "false")
            log.configure()

    def test_unknown_level_falls_back_to_info(self):
        assert log._resolve_level("NOPE") == logging.INFO

    def test_set_level_updates_handlers(self):
        try:
            log.set_level("ERROR")
            root = logging.getLogger()
            assert root.level == logging.ERROR
            assert all(h.level == logging.ERROR for h in root.handlers)
        finally:
            log.set_level("DEBUG")
