"""
Error types and simple error tracking for content preprocessing.

Two tiers of problems exist:
- configuration problems, raised as ConfigurationError and fatal to the setup
  of one preprocessor
- data problems found while preprocessing a document, which never escape
  `preprocess` and are recorded as warnings instead
"""
from dataclasses import dataclass, field
from typing import List, Optional
import logging

logger = logging.getLogger("content-preprocessor")


class ConfigurationError(ValueError):
    """Preprocessor settings are missing, blank or of the wrong shape."""

    def __init__(self, message: str, option: Optional[str] = None, preprocessor: Optional[str] = None):
        super().__init__(message)
        self.option = option
        self.preprocessor = preprocessor


class PathConflictError(ValueError):
    """A non-object value sits where a dot-path needs an object."""

    def __init__(self, path: str, segment: str, found: object):
        super().__init__(
            f"Can't put value into '{path}': segment '{segment}' holds {type(found).__name__}, not an object"
        )
        self.path = path
        self.segment = segment


ERROR_MODES = ('stop', 'continue')


def _tagged(message: str, stage: str) -> str:
    return f"[{stage}] {message}" if stage else message


@dataclass
class ErrorTracker:
    """
    Collects problems met while building and running preprocessors.

    Skipped document values (wrong type, bad base element, blocked write) end
    up in `warnings`. Broken preprocessor definitions end up in `errors`, and
    `error_mode` with `max_errors` tells `create_processors` whether to build
    the remaining ones.

    Example:
        tracker = ErrorTracker(error_mode='continue', max_errors=3)
        preprocessors = create_processors(definitions, tracker)
        for preprocessor in preprocessors:
            preprocessor.preprocess(document, tracker=tracker)
        logger.info(tracker.get_summary())  # "Errors: 1, Warnings: 4"
    """

    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    max_errors: int = 10
    error_mode: str = 'continue'

    def __post_init__(self):
        if self.error_mode not in ERROR_MODES:
            raise ConfigurationError(f"Unknown error mode '{self.error_mode}', expected one of {ERROR_MODES}")
        if self.max_errors < 1:
            raise ConfigurationError(f"max_errors must be at least 1, got {self.max_errors}")

    def add_error(self, message: str, stage: str = "") -> bool:
        """
        Record a broken preprocessor definition.

        Args:
            message: What is wrong with it
            stage: Name of the preprocessor, if known

        Returns:
            Whether the caller may go on with the next definition
        """
        self.errors.append(_tagged(message, stage))
        logger.error(self.errors[-1])
        return self.error_mode == 'continue' and len(self.errors) < self.max_errors

    def add_warning(self, message: str, stage: str = "") -> None:
        """Record a skipped document value; never stops anything."""
        self.warnings.append(_tagged(message, stage))
        logger.warning(self.warnings[-1])

    def messages_for(self, stage: str) -> List[str]:
        """Errors and warnings recorded for one preprocessor."""
        prefix = _tagged('', stage)
        return [message for message in self.get_all_messages() if message.startswith(prefix)]

    def has_errors(self) -> bool:
        return bool(self.errors)

    def has_warnings(self) -> bool:
        return bool(self.warnings)

    def get_summary(self) -> str:
        return f"Errors: {len(self.errors)}, Warnings: {len(self.warnings)}"

    def get_all_messages(self) -> List[str]:
        return self.errors + self.warnings

    def clear(self) -> None:
        self.errors.clear()
        self.warnings.clear()
