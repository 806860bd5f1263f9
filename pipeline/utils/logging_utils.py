"""
Logging utilities for preprocessors.
"""

import logging


class ProcessorLogger:
    """Logger for one preprocessor, appending key=value context to messages."""

    def __init__(self, name: str):
        """
        Initialize logger for a preprocessor.

        Args:
            name: Preprocessor name, as given in its definition
        """
        self.name = name
        self.logger = logging.getLogger(f'{_logger_suffix(name)}-preprocessor')

        # Set up basic logging if not already configured
        if not self.logger.handlers:
            self._setup_logging()

    def _setup_logging(self):
        """Set up basic logging configuration."""
        handler = logging.StreamHandler()
        formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
        handler.setFormatter(formatter)
        self.logger.addHandler(handler)
        self.logger.setLevel(logging.INFO)

    def debug(self, message: str, **kwargs):
        """Log debug message with context."""
        if self.logger.isEnabledFor(logging.DEBUG):
            self.logger.debug(f"{message} {self._format_context(**kwargs)}".rstrip())

    def info(self, message: str, **kwargs):
        """Log info message with context."""
        self.logger.info(f"{message} {self._format_context(**kwargs)}".rstrip())

    def warning(self, message: str, **kwargs):
        """Log warning message with context."""
        self.logger.warning(f"{message} {self._format_context(**kwargs)}".rstrip())

    def error(self, message: str, **kwargs):
        """Log error message with context."""
        self.logger.error(f"{message} {self._format_context(**kwargs)}".rstrip())

    def _format_context(self, **kwargs) -> str:
        """Format context information."""
        if not kwargs:
            return ""

        context_parts = []
        for key, value in kwargs.items():
            context_parts.append(f"{key}={value}")

        return f"| {' '.join(context_parts)}"


def _logger_suffix(name: str) -> str:
    """'Status Normalizer' -> 'status-normalizer'"""
    return '-'.join(name.lower().split()) or 'unnamed'
