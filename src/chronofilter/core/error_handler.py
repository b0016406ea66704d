"""Error Handling for chronofilter

Exception hierarchy and centralized error logging for the temporal parser.
"""

import logging
from enum import Enum
from typing import Callable, Dict, Optional, Type


class ErrorSeverity(Enum):
    """Error severity levels."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class ChronoFilterError(Exception):
    """Base exception class for chronofilter."""

    def __init__(self, message: str, severity: ErrorSeverity = ErrorSeverity.MEDIUM):
        self.message = message
        self.severity = severity
        super().__init__(self.message)


class ConfigurationError(ChronoFilterError):
    """Error raised when configuration is invalid."""
    pass


class TemporalParseError(ChronoFilterError):
    """Error raised when a matcher produces a range that breaks its invariants."""

    def __init__(self, message: str, matcher: Optional[str] = None,
                 severity: ErrorSeverity = ErrorSeverity.HIGH):
        self.matcher = matcher
        super().__init__(message, severity)


class ErrorHandler:
    """Error handler shared by the parser entry points."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        """Initialize error handler.

        Args:
            logger: Logger to report errors on (defaults to this module's logger)
        """
        self.logger = logger or logging.getLogger(__name__)
        self.error_callbacks: Dict[Type[Exception], Callable[[Exception], None]] = {}

    def register_error_callback(self, exception_type: Type[Exception],
                              callback: Callable[[Exception], None]):
        """Register a callback for specific exception types.

        Args:
            exception_type: The exception type to handle
            callback: Function to call when this exception occurs
        """
        self.error_callbacks[exception_type] = callback

    def handle_error(self, error: Exception, context: Optional[str] = None) -> bool:
        """Handle an error with appropriate logging and callbacks.

        Args:
            error: The exception that occurred
            context: Additional context about where the error occurred

        Returns:
            True if error was handled successfully, False otherwise
        """
        try:
            severity = self._get_error_severity(error)
            error_message = self._format_error_message(error, context)

            self._log_error(error_message, severity)

            for exception_type, callback in self.error_callbacks.items():
                if isinstance(error, exception_type):
                    callback(error)

            return True

        except Exception as handler_error:
            self.logger.critical(f"Error handler failed: {handler_error}")
            return False

    def _get_error_severity(self, error: Exception) -> ErrorSeverity:
        """Determine error severity based on exception type.

        Args:
            error: The exception to analyze

        Returns:
            Appropriate severity level
        """
        if isinstance(error, ChronoFilterError):
            return error.severity

        severity_map = {
            ValueError: ErrorSeverity.MEDIUM,
            OverflowError: ErrorSeverity.MEDIUM,
            TypeError: ErrorSeverity.HIGH,
            KeyError: ErrorSeverity.HIGH,
            RecursionError: ErrorSeverity.CRITICAL,
            MemoryError: ErrorSeverity.CRITICAL,
        }

        return severity_map.get(type(error), ErrorSeverity.MEDIUM)

    def _format_error_message(self, error: Exception, context: Optional[str] = None) -> str:
        message = f"{type(error).__name__}: {error}"
        if context:
            message = f"{context}: {message}"

        return message

    def _log_error(self, message: str, severity: ErrorSeverity):
        """Log error with the level matching its severity."""
        log_methods = {
            ErrorSeverity.LOW: self.logger.info,
            ErrorSeverity.MEDIUM: self.logger.warning,
            ErrorSeverity.HIGH: self.logger.error,
            ErrorSeverity.CRITICAL: self.logger.critical,
        }

        log_methods[severity](message, exc_info=True)
