"""
Tests for StripHtmlPreprocessor.
"""

import pytest
from apps.strip_html import StripHtmlPreprocessor
from utils.errors import ConfigurationError, ErrorTracker


def _create(**settings) -> StripHtmlPreprocessor:
    options = {'source_field': 'content', 'target_field': 'description'}
    options.update(settings)
    processor = StripHtmlPreprocessor('HTML to text')
    processor.configure(options)
    return processor


class TestStripHtmlConfiguration:
    """Test configure()."""

    def test_missing_settings(self):
        with pytest.raises(ConfigurationError):
            StripHtmlPreprocessor().configure(None)

    def test_settings_not_an_object(self):
        processor = StripHtmlPreprocessor()
        with pytest.raises(ConfigurationError):
            processor.configure(['source_field', 'target_field'])
        assert not processor.is_configured

    def test_invalid_bases(self):
        with pytest.raises(ConfigurationError):
            StripHtmlPreprocessor().configure({'source_field': 'a', 'target_field': 'b', 'source_bases': 'items'})


class TestStripHtmlPreprocess:
    """Test preprocess()."""

    def test_converts_html(self):
        document = {'content': '<p>Hello</p><p><b>big</b> World</p>'}
        _create().preprocess(document)
        assert document['description'] == 'Hello big World'

    def test_in_place(self):
        document = {'content': '<i>x</i>'}
        _create(target_field='content').preprocess(document)
        assert document == {'content': 'x'}

    def test_blank_value_copied_unchanged(self):
        """Whitespace-only values are written as they are."""
        document = {'content': '  '}
        _create().preprocess(document)
        assert document['description'] == '  '

    def test_missing_source_skipped(self):
        document = {'content': None}
        _create().preprocess(document)
        assert 'description' not in document

    def test_non_string_reported(self):
        document = {'content': {'html': '<p>x</p>'}}
        tracker = ErrorTracker()
        _create().preprocess(document, tracker=tracker)
        assert 'description' not in document
        assert "is not a string" in tracker.warnings[0]

    def test_broken_link_url_dropped(self):
        """An unparseable href is dropped, the text survives."""
        document = {'content': '<a href="http://[broken">link</a> text'}
        _create().preprocess(document)
        assert document['description'] == 'link text'

    def test_second_run_is_noop(self):
        """Running twice gives the same result as running once."""
        processor = _create(target_field='content')
        document = {'content': '<div>Some <a href="http://x">link</a>&nbsp;text</div>'}
        processor.preprocess(document)
        once = dict(document)
        processor.preprocess(document)
        assert document == once
        assert document['content'] == 'Some link text'


class TestStripHtmlWithBases:
    """Test preprocess() with source_bases."""

    def test_each_base_object_processed(self):
        document = {
            'comments': [
                {'body': '<p>one</p>'},
                {'body': '<p>two</p>'},
                {'body': '<p>three</p>'},
                ['not', 'an', 'object'],
            ],
            'body': '<p>root is left alone</p>',
        }
        tracker = ErrorTracker()
        _create(source_field='body', target_field='body', source_bases=['comments']).preprocess(
            document, tracker=tracker
        )
        assert [c['body'] for c in document['comments'][:3]] == ['one', 'two', 'three']
        assert document['comments'][3] == ['not', 'an', 'object']
        assert document['body'] == '<p>root is left alone</p>'
        assert len(tracker.warnings) == 1

    def test_multiple_bases(self):
        document = {'meta': {'text': '<b>a</b>'}, 'items': [{'text': '<i>b</i>'}]}
        _create(source_field='text', target_field='plain', source_bases=['meta', 'items', 'absent']).preprocess(
            document
        )
        assert document['meta']['plain'] == 'a'
        assert document['items'][0]['plain'] == 'b'
