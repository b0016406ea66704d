"""Centralized Logging Management for chronofilter

Handles log configuration, formatting, and output management. Nothing is
configured on import: applications call ``LoggingManager().configure(...)``
once, library modules only ask for named loggers.
"""

import logging
import logging.handlers
import re
import sys
from pathlib import Path
from typing import Dict, List, Optional

from .config_manager import LoggingConfig

PACKAGE_LOGGER = "chronofilter"


class ColoredFormatter(logging.Formatter):
    """Custom formatter that adds colors to console output."""

    # ANSI color codes
    COLORS = {
        'DEBUG': '\033[36m',      # Cyan
        'INFO': '\033[32m',       # Green
        'WARNING': '\033[33m',    # Yellow
        'ERROR': '\033[31m',      # Red
        'CRITICAL': '\033[35m',   # Magenta
        'RESET': '\033[0m'        # Reset
    }

    def format(self, record):
        """Format log record with colors for console output."""
        log_message = super().format(record)
        return f"{self.COLORS.get(record.levelname, '')}{log_message}{self.COLORS['RESET']}"


def parse_file_size(size: str) -> int:
    """Convert a size string such as ``10MB`` into bytes."""
    match = re.match(r'^(\d+)([KMG])B$', size.strip().upper())
    if not match:
        raise ValueError(f"Invalid file size: {size}")

    multipliers = {'K': 1024, 'M': 1024 ** 2, 'G': 1024 ** 3}
    return int(match.group(1)) * multipliers[match.group(2)]


class LoggingManager:
    """Centralized logging configuration and management."""

    _instance: Optional['LoggingManager'] = None

    loggers: Dict[str, logging.Logger]
    handlers: List[logging.Handler]
    config: Optional[LoggingConfig]

    def __new__(cls) -> 'LoggingManager':
        """Singleton pattern implementation."""
        if cls._instance is None:
            instance = super().__new__(cls)
            instance.loggers = {}
            instance.handlers = []
            instance.config = None
            cls._instance = instance
        return cls._instance

    def configure(self, config: Optional[LoggingConfig] = None):
        """Install console and file handlers on the package logger.

        Calling it again replaces the handlers installed by the previous call.

        Args:
            config: Logging configuration (defaults are used when omitted)
        """
        config = config or LoggingConfig()
        self.reset()

        package_logger = logging.getLogger(PACKAGE_LOGGER)
        package_logger.setLevel(logging.DEBUG)

        if config.log_to_console:
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setLevel(getattr(logging, config.level))
            console_handler.setFormatter(ColoredFormatter(
                '%(asctime)s | %(name)s | %(levelname)s | %(message)s',
                datefmt='%H:%M:%S'
            ))
            self._add_handler(package_logger, console_handler)

        if config.log_to_file:
            log_file = Path(config.file_path)
            log_file.parent.mkdir(parents=True, exist_ok=True)

            file_handler = logging.handlers.RotatingFileHandler(
                log_file,
                maxBytes=parse_file_size(config.max_file_size),
                backupCount=config.backup_count
            )
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(logging.Formatter(
                '%(asctime)s | %(name)s | %(levelname)s | %(funcName)s:%(lineno)d | %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            ))
            self._add_handler(package_logger, file_handler)

        self.config = config

    def _add_handler(self, logger: logging.Logger, handler: logging.Handler):
        logger.addHandler(handler)
        self.handlers.append(handler)

    @classmethod
    def get_logger(cls, name: str) -> logging.Logger:
        """Get or create a logger with the specified name.

        Args:
            name: Logger name (typically __name__ of the module)

        Returns:
            Logger instance
        """
        manager = cls()
        if name not in manager.loggers:
            manager.loggers[name] = logging.getLogger(name)
        return manager.loggers[name]

    def set_log_level(self, level: str):
        """Set the logging level for the console handler.

        Args:
            level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        """
        numeric_level = getattr(logging, level.upper(), None)
        if not isinstance(numeric_level, int):
            raise ValueError(f'Invalid log level: {level}')

        for handler in self.handlers:
            if not isinstance(handler, logging.FileHandler):
                handler.setLevel(numeric_level)
                break

    def reset(self):
        """Remove every handler installed by ``configure``."""
        package_logger = logging.getLogger(PACKAGE_LOGGER)
        for handler in self.handlers:
            package_logger.removeHandler(handler)
            handler.close()
        self.handlers = []
        self.config = None
