"""
Logging module for the vendor refunds engine
"""

from .logger import get_logger, setup_logging, StructuredLogger
from .formatters import JSONFormatter, ConsoleFormatter
from .handlers import FileHandler, ConsoleHandler
from .config import LoggingConfig

__all__ = [
    "get_logger",
    "setup_logging",
    "StructuredLogger",
    "JSONFormatter",
    "ConsoleFormatter",
    "FileHandler",
    "ConsoleHandler",
    "LoggingConfig",
]
