"""Builds the prefix-bucketed search index for a record collection."""

import re
import sys
from collections import defaultdict
from typing import Any, Iterable

from vn_static_api.domain.constants import (
    SAMPLE_LOG_LINES,
    SEARCH_FIELDS,
    SEARCH_INDEX_DIRNAME,
    SEARCH_MIN_WORD_LENGTH,
    SEARCH_PREFIX_LENGTH,
)
from vn_static_api.domain.models import FileCounter, Record
from vn_static_api.output.json_writer import JSONWriter
from vn_static_api.relations.entity_extractor import format_entity_id

_NON_WORD_RE = re.compile(r'[^a-z0-9\s]')


class SearchIndexBuilder:
    """Builds a word → record ids lookup, split into one file per word prefix.

    Output structure:
        <base_path>/search-index/<prefix>.json  →  {word: [id, ...], ...}

    A client looks up a query word by fetching the file for its first
    ``prefix_length`` characters.
    """

    def __init__(
        self,
        fields: Iterable[str] = SEARCH_FIELDS,
        id_field: str = 'id',
        min_word_length: int = SEARCH_MIN_WORD_LENGTH,
        prefix_length: int = SEARCH_PREFIX_LENGTH,
    ) -> None:
        self.fields = tuple(fields)
        self.id_field = id_field
        self.min_word_length = max(1, min_word_length)
        self.prefix_length = max(1, prefix_length)

    def tokenize(self, text: Any) -> list[str]:
        if not isinstance(text, str) or not text:
            return []
        cleaned = _NON_WORD_RE.sub('', text.lower())
        return [w for w in cleaned.split() if len(w) >= self.min_word_length]

    def build(self, records: Iterable[Record]) -> dict[str, dict[str, list]]:
        # prefix → word → {formatted id: raw id}
        buckets: dict[str, dict[str, dict[str, Any]]] = defaultdict(lambda: defaultdict(dict))

        for position, record in enumerate(records):
            doc_id = record.get(self.id_field)
            if doc_id is None:
                print(f"Warning: record {position} has no {self.id_field!r}, skipping search index", file=sys.stderr)
                continue

            tokens = set()
            for field_name in self.fields:
                tokens.update(self.tokenize(record.get(field_name)))

            for word in tokens:
                if len(word) < self.prefix_length:
                    continue
                buckets[word[:self.prefix_length]][word][format_entity_id(doc_id)] = doc_id

        return {
            prefix: {
                word: [ids[key] for key in sorted(ids)]
                for word, ids in sorted(words.items())
            }
            for prefix, words in sorted(buckets.items())
        }

    def write_all(
        self,
        index: dict[str, dict[str, list]],
        writer: JSONWriter,
        counter: FileCounter,
        base_path: str,
    ) -> int:
        """Write one file per prefix. Returns the number of files written."""
        written = 0
        for prefix, words in index.items():
            path = writer.write(f"{base_path}/{SEARCH_INDEX_DIRNAME}/{prefix}.json", words)
            counter.increment()
            written += 1
            if written <= SAMPLE_LOG_LINES:
                print(f"Generated search index file: {path}")
        print(f"Generated {written} search index files for {base_path}")
        return written
