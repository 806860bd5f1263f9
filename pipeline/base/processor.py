"""
Contract shared by all structured content preprocessors.

A preprocessor is configured once with a flat settings dict and then called
once per document. Each call reads a value at a dot-path, transforms it and
writes the result to another (or the same) dot-path, mutating the document in
place and returning it.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Mapping, Optional

from pipeline.utils.logging_utils import ProcessorLogger
from utils.errors import ErrorTracker

Document = Dict[str, Any]


class StructuredContentPreprocessor(ABC):
    """
    Interface for document preprocessors.

    Implementations keep only immutable settings after `configure`, so one
    instance can serve many threads as long as each works on its own document.
    """

    def __init__(self, name: str):
        """
        Initialize the preprocessor.

        Args:
            name: Human readable name used in logs and error messages
        """
        self.name = name
        self.logger = ProcessorLogger(name)

    @property
    @abstractmethod
    def is_configured(self) -> bool:
        """True once `configure` succeeded."""

    @abstractmethod
    def configure(self, settings: Optional[Mapping[str, Any]]) -> None:
        """
        Validate and store settings.

        Args:
            settings: Flat dict of option name to value

        Raises:
            ConfigurationError: If a required option is missing, blank or malformed
        """

    @abstractmethod
    def preprocess(self, document: Optional[Document], tracker: Optional[ErrorTracker] = None) -> Optional[Document]:
        """
        Transform a document.

        Data problems are reported (to the log and to `tracker` when given)
        and only the affected field is skipped; they never raise.

        Args:
            document: Document to transform in place, may be None
            tracker: Optional collector for warnings about skipped values

        Returns:
            The same document, or None if None was passed
        """

    def report(self, message: str, tracker: Optional[ErrorTracker] = None) -> None:
        """Report a data problem that caused a value to be skipped."""
        if tracker is not None:
            tracker.add_warning(message, stage=self.name)
        else:
            self.logger.warning(message, preprocessor=self.name)

    def _require_configured(self) -> None:
        if not self.is_configured:
            raise RuntimeError(f"Preprocessor '{self.name}' is used before it was configured")

    def __repr__(self):
        return f"{type(self).__name__}(name={self.name!r})"
