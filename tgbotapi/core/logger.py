"""JSON logging for the ``tgbotapi`` logger hierarchy.

The codec and request modules log through ``tgbotapi.*`` child loggers.  By
default those records only reach whatever the host application configured.
Setting ``TGBOTAPI_LOG_LEVEL`` or ``TGBOTAPI_LOG_FILE`` (or calling
:meth:`BotApiLogger.get_logger`) makes :class:`BotApiLogger` write them as one
JSON object per line to stderr and, optionally, to a rotating file.
"""

import json
import logging
import os
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from typing import Any, Dict, List, Optional

from tgbotapi import config

# Attributes every LogRecord carries; anything else arrived through ``extra=``.
_RECORD_ATTRS = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime"}


class _JsonFormatter(logging.Formatter):
    """Render a record as a single-line JSON object.

    ``timestamp``, ``level``, ``logger``, ``message``, ``module`` and
    ``func_name`` are always present; ``extra=`` keys such as
    ``api_endpoint`` or ``union`` are merged in next to them.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "func_name": record.funcName,
        }
        for key, value in vars(record).items():
            if key not in _RECORD_ATTRS and key not in entry:
                entry[key] = value
        if record.exc_info:
            entry["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False, default=str)


class BotApiLogger:
    """Process-wide owner of the JSON handlers on the ``tgbotapi`` logger.

    Usage::

        from tgbotapi.core.logger import BotApiLogger

        logger = BotApiLogger.get_logger(logging.DEBUG)
    """

    _instance: Optional["BotApiLogger"] = None

    LOGGER_NAME: str = "tgbotapi"
    MAX_BYTES: int = 5 * 1024 * 1024
    BACKUP_COUNT: int = 5

    def __new__(cls, level: Optional[int] = None, log_file: Optional[str] = None) -> "BotApiLogger":
        if cls._instance is None:
            instance = super().__new__(cls)
            instance.logger = logging.getLogger(cls.LOGGER_NAME)
            instance._attach_handlers(
                config.LOG_LEVEL if level is None else level,
                config.LOG_FILE if log_file is None else log_file,
            )
            cls._instance = instance
        return cls._instance

    def _attach_handlers(self, level: int, log_file: Optional[str]) -> None:
        handlers: List[logging.Handler] = [logging.StreamHandler()]
        if log_file:
            log_dir = os.path.dirname(log_file)
            if log_dir:
                os.makedirs(log_dir, exist_ok=True)
            handlers.append(
                RotatingFileHandler(
                    log_file,
                    maxBytes=self.MAX_BYTES,
                    backupCount=self.BACKUP_COUNT,
                    encoding="utf-8",
                )
            )

        formatter = _JsonFormatter()
        self.logger.setLevel(level)
        for handler in handlers:
            handler.setFormatter(formatter)
            self.logger.addHandler(handler)
        # These handlers already emit every record; the root logger would repeat it.
        self.logger.propagate = False

    @staticmethod
    def get_logger(level: Optional[int] = None) -> logging.Logger:
        """Return the ``tgbotapi`` logger, attaching the JSON handlers on first use."""
        return BotApiLogger(level).logger

    def cleanup(self) -> None:
        """Close the JSON handlers and hand records back to the root logger."""
        for handler in list(self.logger.handlers):
            if isinstance(handler, logging.NullHandler):
                continue
            handler.flush()
            handler.close()
            self.logger.removeHandler(handler)
        self.logger.propagate = True
        type(self)._instance = None


def init_library_logging(enabled: Optional[bool] = None) -> logging.Logger:
    """Prepare the ``tgbotapi`` logger when the package is imported.

    A :class:`logging.NullHandler` keeps records away from Python's
    last-resort stderr handler.  The JSON handlers are attached only when
    *enabled* is true (default :data:`tgbotapi.config.LOGGING_ENABLED`).
    """
    logger = logging.getLogger(BotApiLogger.LOGGER_NAME)
    if not any(isinstance(h, logging.NullHandler) for h in logger.handlers):
        logger.addHandler(logging.NullHandler())
    if config.LOGGING_ENABLED if enabled is None else enabled:
        return BotApiLogger.get_logger()
    return logger
