"""Page splitting and navigation links for paginated collections."""

from typing import Any, Sequence, TypeVar

from vn_static_api.domain.constants import INDEX_FILENAME, PAGE_DIRNAME

T = TypeVar('T')


def paginate(items: Sequence[T], page_size: int) -> list[list[T]]:
    """Split items into order-preserving pages of at most page_size elements.

    An empty sequence yields no pages at all, not one empty page.
    """
    if page_size <= 0:
        raise ValueError(f"page_size must be positive, got {page_size}")
    return [list(items[i:i + page_size]) for i in range(0, len(items), page_size)]


def page_path(base_path: str, page_number: int) -> str:
    """Relative path of a page file: page 1 is the collection's index.json."""
    if page_number == 1:
        return f"{base_path}/{INDEX_FILENAME}"
    return f"{base_path}/{PAGE_DIRNAME}/{page_number}.json"


def build_pagination_links(current_page: int, total_pages: int, base_path: str) -> dict[str, Any]:
    """Build the pagination block for one page of a collection.

    Page 2 links back to a bare ``index.json``; page 1 is written at the
    collection root and never under ``page/``.

    Raises:
        ValueError: If current_page is outside [1, total_pages].
    """
    if total_pages < 1 or not 1 <= current_page <= total_pages:
        raise ValueError(
            f"current_page must be within [1, {total_pages}], got {current_page}"
        )

    next_page = None
    if current_page < total_pages:
        next_page = f"{base_path}/{PAGE_DIRNAME}/{current_page + 1}.json"

    previous_page = None
    if current_page == 2:
        previous_page = INDEX_FILENAME
    elif current_page > 2:
        previous_page = f"{base_path}/{PAGE_DIRNAME}/{current_page - 1}.json"

    return {
        'currentPage': current_page,
        'totalPages': total_pages,
        'nextPage': next_page,
        'previousPage': previous_page,
    }
