import logging
from taskboard.logging.log_levels import LogLevel

_FORMATS = {
    LogLevel.ERROR: '[ERROR] %(asctime)s - %(name)s - %(message)s%(context)s',
    LogLevel.WARNING: '[WARNING] %(asctime)s - %(name)s - %(message)s%(context)s',
    LogLevel.INFO: '[INFO] %(asctime)s - %(name)s - %(message)s%(context)s',
    LogLevel.REQUEST: '[REQUEST] %(asctime)s - %(message)s%(context)s',
    LogLevel.SLOW: '[SLOW] %(asctime)s - %(name)s - %(message)s%(context)s',
    LogLevel.GREAT: '[GREAT] %(asctime)s - %(name)s - %(message)s%(context)s',
}


class LevelFormatter(logging.Formatter):
    """Formats a record with the layout of its custom level and appends key=value context."""

    def __init__(self, level: LogLevel):
        super().__init__(_FORMATS[level])

    def format(self, record: logging.LogRecord) -> str:
        context = getattr(record, "context", None)
        if isinstance(context, dict):
            record.context = (" | " + " ".join(f"{k}={v}" for k, v in context.items())) if context else ""
        elif context is None:
            record.context = ""
        return super().format(record)


def get_formatter_for_level(level: LogLevel) -> logging.Formatter:
    """Return the formatter for a custom log level"""
    return LevelFormatter(level)
