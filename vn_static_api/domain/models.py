"""Shared data models used across generation modules."""

from dataclasses import dataclass, field
from typing import Any

from vn_static_api.domain.constants import (
    DATA_URL,
    FETCH_TIMEOUT_SECONDS,
    OUTPUT_DIR,
    PAGE_SIZE,
)

# A source record is kept as the decoded JSON object so unknown fields pass through.
Record = dict[str, Any]


@dataclass
class EntityRef:
    """Reference from a derived entity back to one record that mentions it."""

    id: Any
    title: Any
    image: Any
    link: str

    def to_dict(self) -> dict[str, Any]:
        return {'id': self.id, 'title': self.title, 'image': self.image, 'link': self.link}


@dataclass
class SubEntity:
    """A deduplicated entity (e.g. a developer) derived from record references."""

    id: str
    name: Any
    items: list[EntityRef] = field(default_factory=list)


@dataclass
class FileCounter:
    """Running total of files written during one generation run."""

    total: int = 0

    def increment(self) -> None:
        self.total += 1


@dataclass
class SiteOptions:
    """Options controlling site generation."""

    data_url: str = DATA_URL
    source_file: str | None = None
    output_dir: str = OUTPUT_DIR
    page_size: int = PAGE_SIZE
    timeout: float = FETCH_TIMEOUT_SECONDS
    pretty: bool = True
    include_search_index: bool = True


@dataclass
class GenerationResult:
    """Result summary of a generation run."""

    records: int
    developers: int
    files_generated: int
    output_dir: str
    duration_seconds: float = 0.0
    skipped: bool = False
