"""
Preprocessor trimming a string value to a maximal length.

Example definition:

    {
        "name": "Short description creator",
        "class": "TrimStringValuePreprocessor",
        "settings": {
            "source_field": "fields.summary",
            "target_field": "description",
            "max_size": 300
        }
    }

Options:
    source_field: dot-path of the value to trim
    target_field: dot-path to store the trimmed value into, may equal source_field
    max_size: maximal number of characters kept
    source_bases: optional list of dot-paths of objects (or lists of objects)
        the field paths are resolved against
"""

from functools import partial
from typing import Any, Dict, Mapping, Optional

from pipeline.base.processor import Document, StructuredContentPreprocessor
from utils.bases import iter_field_contexts
from utils.config import TrimSettings
from utils.data_types import MISSING, ValueKind, kind_of_or_none
from utils.errors import ErrorTracker
from utils.structure import get_value, try_put_value


class TrimStringValuePreprocessor(StructuredContentPreprocessor):
    """Strips surrounding whitespace and truncates a string field."""

    def __init__(self, name: str = 'Trim string value'):
        super().__init__(name)
        self.settings: Optional[TrimSettings] = None

    @property
    def is_configured(self) -> bool:
        return self.settings is not None

    def configure(self, settings: Optional[Mapping[str, Any]]) -> None:
        self.settings = TrimSettings.from_dict(settings, self.name)
        self.logger.info(
            "Configured",
            source_field=self.settings.source_field,
            target_field=self.settings.target_field,
            max_size=self.settings.max_size,
            source_bases=self.settings.source_bases,
        )

    def preprocess(self, document: Optional[Document], tracker: Optional[ErrorTracker] = None) -> Optional[Document]:
        self._require_configured()
        if document is None:
            return None

        report = partial(self.report, tracker=tracker)
        contexts = 0
        for data in iter_field_contexts(document, self.settings.source_bases, report):
            self._process_one(data, report)
            contexts += 1
        self.logger.debug("Preprocessed document", source_field=self.settings.source_field, contexts=contexts)
        return document

    def _process_one(self, data: Dict[str, Any], report) -> None:
        value = get_value(data, self.settings.source_field)
        if value is MISSING or value is None:
            return

        if kind_of_or_none(value) is not ValueKind.STRING:
            report(
                f"Value for field '{self.settings.source_field}' is not a string, "
                f"so can't be processed by '{self.name}' preprocessor"
            )
            return

        trimmed = value.strip()[: self.settings.max_size]
        try_put_value(data, self.settings.target_field, trimmed, report)
