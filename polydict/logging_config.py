"""Logging setup shared by the HTTP server and the CLI."""

import logging
import sys
from logging.handlers import RotatingFileHandler

from polydict.config import Settings, settings as default_settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_FORMAT_DETAILED = (
    "%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s"
)

# Loggers that install their own handlers; routed through the root logger instead
PROPAGATED_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def setup_logging(settings: Settings | None = None) -> None:
    """Configure the root logger from settings.

    Always logs to stdout. With ``log_file_enabled`` a rotating log file is
    added, by default ``<data_dir>/polydict.log``.
    """
    settings = settings or default_settings
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, settings.log_level))
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handlers: list[logging.Handler] = []

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handlers.append(console_handler)

    if settings.log_file_enabled:
        log_path = settings.resolved_log_file_path
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            filename=log_path,
            maxBytes=settings.log_file_max_bytes,
            backupCount=settings.log_file_backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT_DETAILED))
        handlers.append(file_handler)

    for handler in handlers:
        root_logger.addHandler(handler)

    for name in PROPAGATED_LOGGERS:
        server_logger = logging.getLogger(name)
        server_logger.handlers.clear()
        server_logger.propagate = True
