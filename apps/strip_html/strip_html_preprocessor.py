"""
Preprocessor converting an HTML value to plain text.

Markup is sanitized and removed, entities are unescaped and text from
separate elements is joined by single spaces.

Example definition:

    {
        "name": "HTML content to text description convertor",
        "class": "StripHtmlPreprocessor",
        "settings": {
            "source_field": "content",
            "target_field": "description"
        }
    }

Options:
    source_field: dot-path of the HTML value
    target_field: dot-path to store the text into, may equal source_field
    source_bases: optional list of dot-paths of objects (or lists of objects)
        the field paths are resolved against
"""

from functools import partial
from typing import Any, Dict, Mapping, Optional

from pipeline.base.processor import Document, StructuredContentPreprocessor
from transforms.html_text import html_to_text
from utils.bases import iter_field_contexts
from utils.config import FieldSettings
from utils.data_types import MISSING, ValueKind, kind_of_or_none
from utils.errors import ErrorTracker
from utils.structure import get_value, try_put_value


class StripHtmlPreprocessor(StructuredContentPreprocessor):
    """Replaces an HTML field with its plain text."""

    def __init__(self, name: str = 'Strip HTML'):
        super().__init__(name)
        self.settings: Optional[FieldSettings] = None

    @property
    def is_configured(self) -> bool:
        return self.settings is not None

    def configure(self, settings: Optional[Mapping[str, Any]]) -> None:
        self.settings = FieldSettings.from_dict(settings, self.name)
        self.logger.info(
            "Configured",
            source_field=self.settings.source_field,
            target_field=self.settings.target_field,
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

        try_put_value(data, self.settings.target_field, html_to_text(value), report)
