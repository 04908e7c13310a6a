"""Reverse indexes from embedded sub-entities back to their records."""

from vn_static_api.relations.entity_extractor import EntityExtractor, entity_file_stem, format_entity_id

__all__ = ['EntityExtractor', 'entity_file_stem', 'format_entity_id']
