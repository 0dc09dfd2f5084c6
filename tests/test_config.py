"""Tests for design_system.config — env overrides and logging."""
import logging

from design_system import config


class TestAppearanceMode:

    def test_default(self, monkeypatch):
        monkeypatch.delenv(config.APPEARANCE_ENV, raising=False)
        assert config.get_appearance_mode() == "light"

    def test_override(self, monkeypatch):
        monkeypatch.setenv(config.APPEARANCE_ENV, "Dark")
        assert config.get_appearance_mode() == "dark"

    def test_invalid_falls_back(self, monkeypatch):
        monkeypatch.setenv(config.APPEARANCE_ENV, "neon")
        assert config.get_appearance_mode() == config.DEFAULT_APPEARANCE


class TestLogging:

    def test_log_level_from_env(self, monkeypatch):
        monkeypatch.setenv(config.LOG_LEVEL_ENV, "debug")
        assert config.get_log_level() == logging.DEBUG

    def test_invalid_log_level_falls_back(self, monkeypatch):
        monkeypatch.setenv(config.LOG_LEVEL_ENV, "chatty")
        assert config.get_log_level() == logging.INFO

    def test_logger_namespace(self):
        log = config.get_logger("styles")
        assert log.name == "design_system.styles"

    def test_handler_attached_once(self):
        config.get_logger("a")
        root = logging.getLogger("design_system")
        before = list(root.handlers)
        config.get_logger("b")
        config._configure_root()
        assert root.handlers == before
        own = [
            h for h in root.handlers
            if h.formatter is not None and h.formatter._fmt == config.LOG_FORMAT
        ]
        assert len(own) == 1
