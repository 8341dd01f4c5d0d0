from dataclasses import dataclass, field
from typing import List, Sequence

from config import EXPENSES_PER_PAGE

DEFAULT_PAGE_SIZE = EXPENSES_PER_PAGE

NEXT = "next"
PREVIOUS = "previous"


@dataclass
class PageView:
    items: List = field(default_factory=list)
    current_page: int = 1
    total_pages: int = 0
    has_prev: bool = False
    has_next: bool = False


def _check_page_size(page_size: int):
    if page_size < 1:
        raise ValueError(f"page_size must be positive, got {page_size}")


def total_pages(item_count: int, page_size: int = DEFAULT_PAGE_SIZE) -> int:
    _check_page_size(page_size)
    return -(-item_count // page_size)


def page_slice(items: Sequence, current_page: int, page_size: int = DEFAULT_PAGE_SIZE) -> List:
    _check_page_size(page_size)
    if current_page < 1:
        return []
    end = current_page * page_size
    return list(items[end - page_size:end])


def advance(direction: str, current_page: int, total: int) -> int:
    """Move one page; a no-op at either end."""
    if direction == NEXT:
        return current_page + 1 if current_page < total else current_page
    if direction == PREVIOUS:
        return current_page - 1 if current_page > 1 else current_page
    raise ValueError(f"Unknown direction: {direction!r}")


def clamp_page(current_page: int, total: int) -> int:
    return max(1, min(current_page, total))


def paginate(items: Sequence, current_page: int, page_size: int = DEFAULT_PAGE_SIZE) -> PageView:
    pages = total_pages(len(items), page_size)
    return PageView(
        items=page_slice(items, current_page, page_size),
        current_page=current_page,
        total_pages=pages,
        has_prev=current_page > 1,
        has_next=current_page < pages,
    )
