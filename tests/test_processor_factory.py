"""
Tests for the preprocessor factory.
"""

import pytest
from apps import SimpleValueMapMapperPreprocessor, StripHtmlPreprocessor, TrimStringValuePreprocessor
from pipeline.processor_factory import ProcessorFactory, create_processors
from utils.errors import ConfigurationError, ErrorTracker

TRIM_DEFINITION = {
    'name': 'Short description creator',
    'class': 'TrimStringValuePreprocessor',
    'settings': {'source_field': 'fields.summary', 'target_field': 'description', 'max_size': 300},
}

STATUS_DEFINITION = {
    'name': 'Status Normalizer',
    'class': 'SimpleValueMapMapperPreprocessor',
    'settings': {
        'source_field': 'fields.status.name',
        'target_field': 'issue_status',
        'value_default': 'In Progress',
        'value_mapping': {'Open': 'Open', 'Resolved': 'Closed', 'Closed': 'Closed'},
    },
}


class TestProcessorFactory:
    """Test ProcessorFactory."""

    def test_supported_classes(self):
        assert set(ProcessorFactory.get_supported_classes()) >= {
            'TrimStringValuePreprocessor',
            'SimpleValueMapMapperPreprocessor',
            'StripHtmlPreprocessor',
        }
        assert ProcessorFactory.is_supported('StripHtmlPreprocessor')
        assert not ProcessorFactory.is_supported('Unknown')

    def test_create_configured_processor(self):
        processor = ProcessorFactory.create_processor(TRIM_DEFINITION)
        assert isinstance(processor, TrimStringValuePreprocessor)
        assert processor.name == 'Short description creator'
        assert processor.is_configured
        assert processor.settings.max_size == 300

    def test_dotted_class_name(self):
        """Fully qualified class names are imported."""
        definition = dict(STATUS_DEFINITION, **{'class': 'apps.value_mapper.SimpleValueMapMapperPreprocessor'})
        processor = ProcessorFactory.create_processor(definition)
        assert isinstance(processor, SimpleValueMapMapperPreprocessor)

    @pytest.mark.parametrize(
        'class_name', ['NoSuchPreprocessor', 'apps.no_such_module.Preprocessor', 'utils.errors.ErrorTracker']
    )
    def test_unknown_or_invalid_class(self, class_name):
        with pytest.raises(ConfigurationError):
            ProcessorFactory.create_processor(dict(TRIM_DEFINITION, **{'class': class_name}))

    @pytest.mark.parametrize('key', ['name', 'class'])
    def test_missing_definition_keys(self, key):
        definition = dict(TRIM_DEFINITION)
        del definition[key]
        with pytest.raises(ConfigurationError):
            ProcessorFactory.create_processor(definition)

    def test_missing_settings(self):
        definition = {'name': 'x', 'class': 'StripHtmlPreprocessor'}
        with pytest.raises(ConfigurationError) as exc_info:
            ProcessorFactory.create_processor(definition)
        assert "'settings' section is not defined" in str(exc_info.value)

    def test_definition_not_an_object(self):
        with pytest.raises(ConfigurationError):
            ProcessorFactory.create_processor(['not', 'a', 'definition'])

    def test_register_processor(self, monkeypatch):
        """Registered classes become available by their short name."""
        monkeypatch.setattr(ProcessorFactory, '_processors', dict(ProcessorFactory._processors))

        class HtmlCopyPreprocessor(StripHtmlPreprocessor):
            """Copies HTML as text."""

        ProcessorFactory.register_processor('HtmlCopyPreprocessor', HtmlCopyPreprocessor)
        processor = ProcessorFactory.create_processor(
            {'name': 'copy', 'class': 'HtmlCopyPreprocessor', 'settings': {'source_field': 'a', 'target_field': 'b'}}
        )
        assert isinstance(processor, HtmlCopyPreprocessor)
        assert ProcessorFactory.get_processor_info()['HtmlCopyPreprocessor'] == 'Copies HTML as text.'

    def test_created_processor_works(self):
        processor = ProcessorFactory.create_processor(STATUS_DEFINITION)
        document = {'fields': {'status': {'name': 'Resolved'}}}
        processor.preprocess(document)
        assert document['issue_status'] == 'Closed'


class TestCreateProcessors:
    """Test create_processors()."""

    BROKEN = {'name': 'Broken', 'class': 'TrimStringValuePreprocessor', 'settings': {'source_field': 'a'}}

    def test_keeps_definition_order(self):
        processors = create_processors([STATUS_DEFINITION, TRIM_DEFINITION])
        assert [p.name for p in processors] == ['Status Normalizer', 'Short description creator']

    def test_raises_without_tracker(self):
        with pytest.raises(ConfigurationError):
            create_processors([TRIM_DEFINITION, self.BROKEN])

    def test_continue_mode_skips_broken(self):
        """In continue mode a broken definition is recorded and skipped."""
        tracker = ErrorTracker(error_mode='continue')
        processors = create_processors([self.BROKEN, TRIM_DEFINITION], tracker)
        assert [p.name for p in processors] == ['Short description creator']
        assert len(tracker.errors) == 1
        assert '[Broken]' in tracker.errors[0]

    def test_continue_mode_skips_wrong_shape_settings(self):
        """Settings that are not an object are recorded like any other broken definition."""
        tracker = ErrorTracker(error_mode='continue')
        wrong_shape = {'name': 'Wrong shape', 'class': 'StripHtmlPreprocessor', 'settings': 'oops'}
        processors = create_processors([wrong_shape, TRIM_DEFINITION], tracker)
        assert [p.name for p in processors] == ['Short description creator']
        assert tracker.errors[0].startswith('[Wrong shape]')

    def test_stop_mode_raises(self):
        tracker = ErrorTracker(error_mode='stop')
        with pytest.raises(ConfigurationError):
            create_processors([self.BROKEN, TRIM_DEFINITION], tracker)
        assert tracker.has_errors()

    def test_max_errors_reached_raises(self):
        tracker = ErrorTracker(error_mode='continue', max_errors=2)
        with pytest.raises(ConfigurationError):
            create_processors([self.BROKEN, self.BROKEN, TRIM_DEFINITION], tracker)
