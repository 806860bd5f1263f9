"""
Preprocessor mapping a simple value over a lookup table.

Values not found in the table fall back to an optional default, which may
reference other document values with `{dot.path}` placeholders and the
original value with `{__original}`.

Example definition:

    {
        "name": "Status Normalizer",
        "class": "SimpleValueMapMapperPreprocessor",
        "settings": {
            "source_field": "fields.status.name",
            "target_field": "issue_status",
            "value_default": "In Progress",
            "value_mapping": {
                "Open": "Open",
                "Resolved": "Closed",
                "Closed": "Closed"
            }
        }
    }

Options:
    source_field: dot-path of the value to map
    target_field: dot-path to store the mapped value into, may equal source_field
    value_mapping: table of source value to target value
    value_default: optional template used when the table has no entry; without
        it the target is left untouched for unmapped values
    source_bases: optional list of dot-paths of objects (or lists of objects)
        the field paths are resolved against. Default templates are always
        resolved against the whole document.
"""

from functools import partial
from typing import Any, Dict, Mapping, Optional

from pipeline.base.processor import Document, StructuredContentPreprocessor
from utils.bases import iter_field_contexts
from utils.config import CFG_VALUE_MAPPING, ValueMapSettings
from utils.data_types import MISSING, ValueKind, kind_of_or_none, stringify
from utils.errors import ErrorTracker
from utils.patterns import expand_pattern
from utils.structure import get_value, try_put_value


class SimpleValueMapMapperPreprocessor(StructuredContentPreprocessor):
    """Maps categorical values, computing a default for unknown ones."""

    def __init__(self, name: str = 'Value mapper'):
        super().__init__(name)
        self.settings: Optional[ValueMapSettings] = None

    @property
    def is_configured(self) -> bool:
        return self.settings is not None

    def configure(self, settings: Optional[Mapping[str, Any]]) -> None:
        self.settings = ValueMapSettings.from_dict(settings, self.name)
        if not self.settings.value_mapping:
            self.logger.warning(f"'settings/{CFG_VALUE_MAPPING}' is empty, every value gets the default")
        self.logger.info(
            "Configured",
            source_field=self.settings.source_field,
            target_field=self.settings.target_field,
            mappings=len(self.settings.value_mapping),
            value_default=self.settings.value_default,
            source_bases=self.settings.source_bases,
        )

    def preprocess(self, document: Optional[Document], tracker: Optional[ErrorTracker] = None) -> Optional[Document]:
        self._require_configured()
        if document is None:
            return None

        report = partial(self.report, tracker=tracker)
        contexts = 0
        for data in iter_field_contexts(document, self.settings.source_bases, report):
            self._process_one(document, data, report)
            contexts += 1
        self.logger.debug("Preprocessed document", source_field=self.settings.source_field, contexts=contexts)
        return document

    def _process_one(self, document: Document, data: Dict[str, Any], report) -> None:
        value = get_value(data, self.settings.source_field)
        if value is MISSING or value is None:
            self._put_default(document, data, None, report)
            return

        kind = kind_of_or_none(value)
        if kind is None or not kind.is_scalar:
            report(
                f"Value for field '{self.settings.source_field}' is not a simple value "
                f"(but is a list or object), so can't be processed by '{self.name}' preprocessor"
            )
            return

        original = stringify(value)
        mapped = self.settings.value_mapping.get(original) if original else None
        if mapped is not None:
            try_put_value(data, self.settings.target_field, mapped, report)
        else:
            self._put_default(document, data, original, report)

    def _put_default(self, document: Document, data: Dict[str, Any], original: Optional[str], report) -> None:
        if self.settings.value_default is None:
            return
        value = expand_pattern(self.settings.value_default, document, original)
        try_put_value(data, self.settings.target_field, value, report)
