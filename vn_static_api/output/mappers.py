"""Projections from records and derived developers to output documents.

Post and developer documents link to each other, so both sides build their
links through ``post_link`` and ``developer_link``.
"""

from typing import Any

from vn_static_api.domain.constants import DEVELOPERS_BASE_PATH, POSTS_BASE_PATH
from vn_static_api.domain.models import Record, SubEntity
from vn_static_api.pagination import build_pagination_links
from vn_static_api.relations.entity_extractor import EntityExtractor, entity_file_stem

DEVELOPER_EXTRACTOR = EntityExtractor('developers', id_key='id', name_key='name')


def post_link(record: Record) -> str:
    return f"{POSTS_BASE_PATH}/{entity_file_stem(record.get('id'))}.json"


def developer_link(developer_id: Any) -> str:
    return f"{DEVELOPERS_BASE_PATH}/{entity_file_stem(developer_id)}.json"


# ── Posts ────────────────────────────────────────────────────────────────

def post_developers(record: Record) -> list[dict[str, Any]]:
    """Resolve a record's embedded developers to ``{name, id, link}`` summaries."""
    return [
        {
            'name': dev.get('name'),
            'id': dev.get('id'),
            'link': developer_link(dev.get('id')),
        }
        for dev in DEVELOPER_EXTRACTOR.references(record)
    ]


def post_summary(record: Record) -> dict[str, Any]:
    return {
        'id': record.get('id'),
        'title': record.get('title'),
        'image': record.get('image'),
        'link': post_link(record),
    }


def map_post_detail(record: Record) -> dict[str, Any]:
    return {
        'id': record.get('id'),
        'title': record.get('title'),
        'developers': post_developers(record),
        'aliases': record.get('aliases'),
        'description': record.get('description'),
        'image': record.get('image'),
        'link': post_link(record),
    }


def map_post_page(page: list[Record], current_page: int, total_pages: int) -> dict[str, Any]:
    return {
        'posts': [post_summary(record) for record in page],
        'pagination': build_pagination_links(current_page, total_pages, POSTS_BASE_PATH),
    }


# ── Developers ───────────────────────────────────────────────────────────

def developer_summary(developer: SubEntity) -> dict[str, Any]:
    return {
        'name': developer.name,
        'id': developer.id,
        'link': developer_link(developer.id),
    }


def map_developer_detail(developer: SubEntity) -> dict[str, Any]:
    return {
        'name': developer.name,
        'id': developer.id,
        'posts': [ref.to_dict() for ref in developer.items],
        'link': developer_link(developer.id),
    }


def map_developer_page(page: list[SubEntity], current_page: int, total_pages: int) -> dict[str, Any]:
    return {
        'developers': [developer_summary(dev) for dev in page],
        'pagination': build_pagination_links(current_page, total_pages, DEVELOPERS_BASE_PATH),
    }
