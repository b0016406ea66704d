"""Core modules for chronofilter.

Configuration, error handling and logging shared by the parser.
"""

from .config_manager import AppConfig, ConfigManager, LoggingConfig, ParserConfig
from .error_handler import (
    ChronoFilterError,
    ConfigurationError,
    TemporalParseError,
    ErrorHandler,
    ErrorSeverity
)
from .logging_manager import LoggingManager

__all__ = [
    "AppConfig",
    "ConfigManager",
    "LoggingConfig",
    "ParserConfig",
    "ChronoFilterError",
    "ConfigurationError",
    "TemporalParseError",
    "ErrorHandler",
    "ErrorSeverity",
    "LoggingManager"
]
