"""
Tests for source base resolution.
"""

from utils.bases import iter_field_contexts, resolve_bases


class TestResolveBases:
    """Test resolve_bases()."""

    def test_object_base(self):
        """An object base yields the object itself."""
        author = {"name": "Jane"}
        document = {"meta": {"author": author}}
        assert list(resolve_bases(document, ["meta.author"])) == [author]
        assert list(resolve_bases(document, ["meta.author"]))[0] is author

    def test_list_base_in_order(self):
        """A list base yields its objects in list order."""
        items = [{"n": 1}, {"n": 2}, {"n": 3}]
        document = {"items": items}
        resolved = list(resolve_bases(document, ["items"]))
        assert [item["n"] for item in resolved] == [1, 2, 3]
        assert all(a is b for a, b in zip(resolved, items))

    def test_base_order_then_list_order(self):
        """Bases are resolved in declaration order."""
        document = {"a": [{"id": "a1"}, {"id": "a2"}], "b": {"id": "b"}}
        resolved = list(resolve_bases(document, ["b", "a"]))
        assert [item["id"] for item in resolved] == ["b", "a1", "a2"]

    def test_absent_base_skipped_silently(self):
        """An absent or null base is not reported."""
        messages = []
        document = {"items": None}
        assert list(resolve_bases(document, ["missing", "items"], messages.append)) == []
        assert messages == []

    def test_non_object_element_skipped(self):
        """Only the non-object element of a list is skipped and reported."""
        messages = []
        document = {"items": [{"n": 1}, "bad", {"n": 2}]}
        resolved = list(resolve_bases(document, ["items"], messages.append))
        assert resolved == [{"n": 1}, {"n": 2}]
        assert len(messages) == 1
        assert "non-object element" in messages[0]

    def test_scalar_base_skipped(self):
        """A base holding a scalar is reported and skipped entirely."""
        messages = []
        document = {"items": "text", "other": {"n": 1}}
        resolved = list(resolve_bases(document, ["items", "other"], messages.append))
        assert resolved == [{"n": 1}]
        assert len(messages) == 1
        assert "not an object or collection" in messages[0]

    def test_default_reporter_logs_warning(self, caplog):
        """Without a reporter, problems are logged as warnings."""
        with caplog.at_level("WARNING"):
            list(resolve_bases({"items": 5}, ["items"]))
        assert "Source base 'items'" in caplog.text

    def test_does_not_create_anything(self):
        """Resolution never adds keys to the document."""
        document = {"a": {}}
        list(resolve_bases(document, ["a.b.c", "x"]))
        assert document == {"a": {}}


class TestIterFieldContexts:
    """Test iter_field_contexts()."""

    def test_without_bases_yields_document(self):
        document = {"a": 1}
        assert list(iter_field_contexts(document, None)) == [document]

    def test_with_bases_resolves_them(self):
        document = {"items": [{"a": 1}]}
        assert list(iter_field_contexts(document, ("items",))) == [{"a": 1}]

    def test_empty_bases_yield_nothing(self):
        """An empty base list means no sub-documents, not the whole document."""
        assert list(iter_field_contexts({"a": 1}, ())) == []
