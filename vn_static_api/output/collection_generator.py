"""Writes one collection: a detail file per item plus paginated index files."""

from __future__ import annotations

from typing import Any, Callable, Sequence

from vn_static_api.domain.constants import SAMPLE_LOG_LINES
from vn_static_api.domain.models import FileCounter
from vn_static_api.output.json_writer import JSONWriter
from vn_static_api.pagination import paginate, page_path
from vn_static_api.relations.entity_extractor import entity_file_stem

ItemMapper = Callable[[Any], Any]
PageMapper = Callable[[list, int, int], Any]


def item_id(item: Any) -> Any:
    """Return the id of a raw record (dict) or a derived entity (object)."""
    if isinstance(item, dict):
        return item.get('id')
    return getattr(item, 'id', None)


def default_file_name(item: Any) -> str:
    return f"{entity_file_stem(item_id(item))}.json"


class CollectionGenerator:
    """Generates detail and index files for a collection of items.

    Output structure for a base path ``vn/posts``:
        vn/posts/
        ├── <id>.json          (one per item)
        ├── index.json         (page 1)
        └── page/<n>.json      (pages 2..N)

    Every file written increments the shared counter. The first write
    failure propagates; files already written are left in place.

    Args:
        writer: JSON writer bound to the output directory.
        counter: Run-wide file counter shared across collections.
        sample_size: Number of example paths printed per file category.
    """

    def __init__(
        self,
        writer: JSONWriter,
        counter: FileCounter | None = None,
        sample_size: int = SAMPLE_LOG_LINES,
    ) -> None:
        self._writer = writer
        self._counter = counter or FileCounter()
        self._sample_size = sample_size

    @property
    def counter(self) -> FileCounter:
        return self._counter

    def generate(
        self,
        items: Sequence[Any],
        page_size: int,
        base_path: str,
        item_mapper: ItemMapper,
        page_mapper: PageMapper,
        file_name_fn: Callable[[Any], str] = default_file_name,
    ) -> int:
        """Write all detail and page files. Returns the number of files written."""
        written = 0

        for i, item in enumerate(items):
            path = self._writer.write(f"{base_path}/{file_name_fn(item)}", item_mapper(item))
            self._counter.increment()
            written += 1
            if i < self._sample_size:
                print(f"Generated item file: {path}")

        pages = paginate(items, page_size)
        total_pages = len(pages)
        for i, page in enumerate(pages):
            page_number = i + 1
            path = self._writer.write(
                page_path(base_path, page_number),
                page_mapper(page, page_number, total_pages),
            )
            self._counter.increment()
            written += 1
            if i < self._sample_size:
                print(f"Generated paginated file: {path}")

        return written
