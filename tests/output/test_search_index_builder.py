"""Tests for SearchIndexBuilder."""

import pytest

from vn_static_api.domain.models import FileCounter
from vn_static_api.output.json_writer import JSONWriter
from vn_static_api.output.search_index_builder import SearchIndexBuilder


@pytest.fixture
def builder():
    return SearchIndexBuilder()


class TestTokenize:
    """Tests for word extraction."""

    def test_lowercases_and_strips_punctuation(self, builder):
        assert builder.tokenize('Steins;Gate: The Movie!') == ['steinsgate', 'the', 'movie']

    def test_drops_short_words(self, builder):
        assert builder.tokenize('a to be I') == ['to', 'be']

    def test_non_string_yields_nothing(self, builder):
        assert builder.tokenize(None) == []
        assert builder.tokenize(42) == []
        assert builder.tokenize('') == []


class TestSearchIndexBuilder:
    """Tests for prefix-bucketed index construction."""

    def test_buckets_by_prefix(self, builder):
        records = [
            {'id': 1, 'title': 'Ever17', 'description': 'Infinity series'},
            {'id': 2, 'title': 'Remember11', 'description': 'Infinity again'},
        ]
        index = builder.build(records)

        assert index['in'] == {'infinity': [1, 2]}
        assert index['ev'] == {'ever17': [1]}
        assert index['ag'] == {'again': [2]}
        assert list(index) == sorted(index)

    def test_ids_deduplicated_per_word(self, builder):
        index = builder.build([{'id': 1, 'title': 'Loop loop', 'description': 'loop'}])
        assert index['lo'] == {'loop': [1]}

    def test_skips_records_without_id(self, builder, capsys):
        index = builder.build([{'title': 'Orphan'}, {'id': 3, 'title': 'Kept'}])
        assert 'or' not in index
        assert index['ke'] == {'kept': [3]}
        assert 'Warning' in capsys.readouterr().err

    def test_custom_fields_and_prefix(self):
        builder = SearchIndexBuilder(fields=['aliases_text'], prefix_length=3)
        index = builder.build([{'id': 'v1', 'aliases_text': 'Ever Seventeen', 'title': 'Ignored'}])
        assert index == {'eve': {'ever': ['v1']}, 'sev': {'seventeen': ['v1']}}

    def test_write_all(self, builder, tmp_path, read_json):
        counter = FileCounter()
        writer = JSONWriter(str(tmp_path))
        index = builder.build([{'id': 1, 'title': 'Ever Infinity'}])

        written = builder.write_all(index, writer, counter, 'vn/posts')

        assert written == 2
        assert counter.total == 2
        assert read_json(tmp_path, 'vn/posts/search-index/ev.json') == {'ever': [1]}
        assert read_json(tmp_path, 'vn/posts/search-index/in.json') == {'infinity': [1]}
