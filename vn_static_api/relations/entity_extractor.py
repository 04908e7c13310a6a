"""Builds derived entity collections from references embedded in records.

Each record may carry a list of sub-objects (e.g. ``developers``) that point
at another entity by id. Inverting those references gives one entity per
unique id, each listing the records that mention it.
"""

from __future__ import annotations

import re
from typing import Any, Callable, Iterable

from vn_static_api.domain.models import EntityRef, Record, SubEntity

_PATH_SEPARATOR_RE = re.compile(r'[\\/]')


def format_entity_id(value: Any) -> str:
    """Stringify an id the way it appears in file names and dedup keys.

    JSON numbers decode as float when written with a fraction or exponent;
    integral floats render without the trailing ``.0`` so ``10`` and ``10.0``
    share one identity.
    """
    if value is None:
        return 'null'
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def entity_file_stem(value: Any) -> str:
    """File name (without extension) for an id; path separators become '_'."""
    stem = _PATH_SEPARATOR_RE.sub('_', format_entity_id(value))
    if stem in ('', '.', '..'):
        return '_' * max(1, len(stem))
    return stem


def _sort_key(entity_id: str) -> tuple:
    # Numeric ids in numeric order, then everything else lexicographically
    if entity_id.isascii() and entity_id.isdigit():
        return (0, int(entity_id), '')
    return (1, 0, entity_id)


class EntityExtractor:
    """Extracts deduplicated sub-entities and their back-references.

    Args:
        entity_key: Record field holding the list of embedded references.
        id_key: Field of each reference that identifies the entity.
        name_key: Field of each reference holding the display name.
    """

    def __init__(self, entity_key: str, id_key: str = 'id', name_key: str = 'name') -> None:
        self.entity_key = entity_key
        self.id_key = id_key
        self.name_key = name_key

    def references(self, record: Record) -> list[dict[str, Any]]:
        """Return the well-formed embedded references of one record.

        A missing or non-list field yields an empty list; non-object elements
        are dropped.
        """
        raw = record.get(self.entity_key)
        if not isinstance(raw, list):
            return []
        return [ref for ref in raw if isinstance(ref, dict)]

    def extract(
        self,
        items: Iterable[Record],
        link_fn: Callable[[Record], str],
    ) -> list[SubEntity]:
        """Build one SubEntity per unique id, sorted by id.

        The first name seen for an id wins. Every (record, reference) pair adds
        one entry to that entity's items, in record order.
        """
        entities: dict[str, SubEntity] = {}

        for record in items:
            for ref in self.references(record):
                entity_id = format_entity_id(ref.get(self.id_key))
                entity = entities.get(entity_id)
                if entity is None:
                    entity = SubEntity(id=entity_id, name=ref.get(self.name_key))
                    entities[entity_id] = entity

                entity.items.append(EntityRef(
                    id=record.get('id'),
                    title=record.get('title'),
                    image=record.get('image'),
                    link=link_fn(record),
                ))

        return [entities[k] for k in sorted(entities, key=_sort_key)]
