import json
import logging
import socket
from typing import Optional

from cool_id.core.config import get_settings


class ContextFilter(logging.Filter):
    def filter(self, record):
        record.hostname = socket.gethostname()
        return True


class JSONFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "message": record.getMessage(),
            "logger": record.name,
            "hostname": getattr(record, "hostname", ""),
            "pathname": record.pathname,
            "lineno": record.lineno,
        }

        if hasattr(record, "size"):
            log_entry["size"] = record.size

        if hasattr(record, "count"):
            log_entry["count"] = record.count

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_entry)


class AppLogger:
    _instance: Optional["AppLogger"] = None
    _initialized = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if self._initialized:
            return
        self._initialized = True
        self.settings = get_settings()
        self._setup_logging()

    def _setup_logging(self):
        root_logger = logging.getLogger()
        root_logger.setLevel(getattr(logging, self.settings.logging.level.upper()))

        for handler in root_logger.handlers[:]:
            root_logger.removeHandler(handler)

        if self.settings.logging.format == "json":
            formatter = JSONFormatter(datefmt="%Y-%m-%dT%H:%M:%S%z")
        else:
            formatter = logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
            )

        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        console_handler.addFilter(ContextFilter())
        root_logger.addHandler(console_handler)

    @classmethod
    def get_logger(cls, name: str) -> logging.Logger:
        cls()
        return logging.getLogger(name)


def get_logger(name: str) -> logging.Logger:
    return AppLogger.get_logger(name)
