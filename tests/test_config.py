"""Tests for application configuration."""

from pathlib import Path


class TestSettingsProperties:
    """Tests for Settings computed properties."""

    def test_resolved_log_file_path_default(self):
        """Should return default log file path when not set."""
        from polydict.config import Settings

        settings = Settings(data_dir=Path("/tmp/test"))
        assert settings.resolved_log_file_path == Path("/tmp/test/polydict.log")

    def test_resolved_log_file_path_custom(self):
        """Should return custom log file path when set."""
        from polydict.config import Settings

        settings = Settings(
            data_dir=Path("/tmp/test"),
            log_file_path=Path("/custom/path.log"),
        )
        assert settings.resolved_log_file_path == Path("/custom/path.log")


class TestSettingsDefaults:
    """Tests for Settings default values."""

    def test_default_values(self, monkeypatch):
        """Should have sensible defaults when no env vars set."""
        from polydict.config import Settings
        from polydict.models import GroupingType, OrderType

        for name in (
            "LOG_LEVEL",
            "LOG_FILE_ENABLED",
            "GLOSSARY_ENABLED",
            "GLOSSARY_PATH",
            "ENGINE_TIMEOUT_SECONDS",
            "DEFAULT_GROUPING",
            "DEFAULT_ORDER",
        ):
            monkeypatch.delenv(name, raising=False)

        settings = Settings(_env_file=None)  # Ignore .env file
        assert settings.log_level == "INFO"
        assert settings.log_file_enabled is False
        assert settings.glossary_enabled is True
        assert settings.glossary_path is None
        assert settings.engine_timeout_seconds == 10.0
        assert settings.default_grouping is GroupingType.NONE
        assert settings.default_order is OrderType.RELEVANCE

    def test_env_override(self, monkeypatch):
        """Should read values from environment variables."""
        from polydict.config import Settings
        from polydict.models import OrderType

        monkeypatch.setenv("ENGINE_TIMEOUT_SECONDS", "2.5")
        monkeypatch.setenv("DEFAULT_ORDER", "alphabetically")

        settings = Settings(_env_file=None)
        assert settings.engine_timeout_seconds == 2.5
        assert settings.default_order is OrderType.ALPHABETICALLY


class TestLogging:
    """Tests for logging setup."""

    def test_file_handler(self, tmp_path):
        """Should add a rotating file handler when enabled."""
        import logging
        from logging.handlers import RotatingFileHandler

        from polydict.config import Settings
        from polydict.logging_config import setup_logging

        root = logging.getLogger()
        saved = root.handlers[:], root.level
        try:
            setup_logging(
                Settings(
                    _env_file=None,
                    log_level="DEBUG",
                    log_file_enabled=True,
                    log_file_path=tmp_path / "logs" / "polydict.log",
                )
            )
            assert root.level == logging.DEBUG
            assert any(isinstance(h, RotatingFileHandler) for h in root.handlers)
            assert (tmp_path / "logs").is_dir()
        finally:
            for handler in root.handlers[:]:
                root.removeHandler(handler)
                handler.close()
            for handler in saved[0]:
                root.addHandler(handler)
            root.setLevel(saved[1])

    def test_server_loggers_propagate(self):
        """Should route uvicorn loggers through the root handlers."""
        import logging

        from polydict.config import Settings
        from polydict.logging_config import setup_logging

        root = logging.getLogger()
        saved = root.handlers[:], root.level
        uvicorn_logger = logging.getLogger("uvicorn.error")
        uvicorn_logger.addHandler(logging.NullHandler())
        uvicorn_logger.propagate = False
        try:
            setup_logging(Settings(_env_file=None, log_level="WARNING"))
            assert root.level == logging.WARNING
            assert uvicorn_logger.handlers == []
            assert uvicorn_logger.propagate is True
        finally:
            for handler in root.handlers[:]:
                root.removeHandler(handler)
            for handler in saved[0]:
                root.addHandler(handler)
            root.setLevel(saved[1])
