"""
Service logger with custom levels (info, warning, error, request, slow, great).
"""
from taskboard.logging.custom_logger import CustomLogger, get_logger
from taskboard.logging.log_levels import LogLevel

__all__ = [
    'CustomLogger',
    'LogLevel',
    'get_logger',
]
