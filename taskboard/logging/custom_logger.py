"""
Custom logger with keyword context and per-level formatting.
Levels: warning, info, request, error, slow, great
"""
import logging
import sys
from typing import Dict, Any

from taskboard.logging.log_levels import LogLevel
from taskboard.logging.formatters import get_formatter_for_level
from taskboard.core.config import settings


_LEVEL_MAP = {
    LogLevel.WARNING: logging.WARNING,
    LogLevel.INFO: logging.INFO,
    LogLevel.REQUEST: logging.INFO,
    LogLevel.ERROR: logging.ERROR,
    LogLevel.SLOW: logging.WARNING,
    LogLevel.GREAT: logging.INFO,
}


class CustomLogger:
    """
    Logger that accepts keyword context instead of pre-formatted strings.

    Usage:
        logger = CustomLogger("my_module")
        logger.info("Team created", team_id=3)
        logger.error("Unexpected failure", exc_info=True)
        logger.slow("Slow request", duration=5.2, path="/api/tasks/")
    """

    def __init__(self, name: str):
        self.name = name
        self.logger = logging.getLogger(name)
        self.logger.setLevel(getattr(logging, settings.LOG_LEVEL.upper()))
        self.logger.propagate = False

        # Remove existing handlers to avoid duplicated lines
        self.logger.handlers.clear()

        self._handlers = {}
        for level in LogLevel:
            handler = logging.StreamHandler(sys.stdout)
            handler.setFormatter(get_formatter_for_level(level))
            self._handlers[level] = handler

    def _log(
        self,
        level: LogLevel,
        message: str,
        exc_info: bool = False,
        **context: Any
    ) -> None:
        """Internal logging entry point"""
        numeric_level = _LEVEL_MAP[level]
        if not self.logger.isEnabledFor(numeric_level):
            return

        record = self.logger.makeRecord(
            self.name,
            numeric_level,
            fn="",
            lno=0,
            msg=message,
            args=(),
            exc_info=sys.exc_info() if exc_info else None,
            extra={"context": context, "custom_level": level.value},
        )
        self._handlers[level].handle(record)

    def warning(self, message: str, **context: Any) -> None:
        """
        Something deserves attention but is not an error.

        Example:
            logger.warning("Duplicate membership rejected", team_id=1, user_name="bob")
        """
        self._log(LogLevel.WARNING, message, **context)

    def info(self, message: str, **context: Any) -> None:
        """
        Regular system event.

        Example:
            logger.info("Task created", task_id=123)
        """
        self._log(LogLevel.INFO, message, **context)

    def request(
        self,
        message: str,
        method: str,
        path: str,
        status_code: int,
        duration: float,
        **context: Any
    ) -> None:
        """HTTP request summary"""
        self._log(
            LogLevel.REQUEST,
            message,
            method=method,
            path=path,
            status_code=status_code,
            duration=duration,
            **context
        )

    def error(
        self,
        message: str,
        exc_info: bool = True,
        **context: Any
    ) -> None:
        """
        Failure that needs attention. Attaches the active exception by default.

        Example:
            try:
                ...
            except Exception:
                logger.error("Failed to process request", path="/api/tasks/")
        """
        self._log(LogLevel.ERROR, message, exc_info=exc_info, **context)

    def slow(
        self,
        message: str,
        duration: float,
        threshold: float = 1.0,
        **context: Any
    ) -> None:
        """Operation that took longer than its threshold"""
        self._log(
            LogLevel.SLOW,
            message,
            duration=duration,
            threshold=threshold,
            **context
        )

    def great(self, message: str, **context: Any) -> None:
        """Notable success"""
        self._log(LogLevel.GREAT, message, **context)


_loggers: Dict[str, CustomLogger] = {}


def get_logger(name: str) -> CustomLogger:
    """
    Return the shared CustomLogger for a module.

    Usage:
        from taskboard.logging import get_logger
        logger = get_logger(__name__)
    """
    if name not in _loggers:
        _loggers[name] = CustomLogger(name)
    return _loggers[name]
