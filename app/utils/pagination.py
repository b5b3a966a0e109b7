"""
Offset pagination helpers
"""
from math import ceil
from typing import Tuple

from app.core.config import settings


def calculate_total_pages(count: int, page_size: int = None) -> int:
    """
    Number of pages needed to show `count` rows.

    There is always at least one page, so an empty listing still renders
    page 1.
    """
    if page_size is None:
        page_size = settings.PAGE_SIZE
    if page_size < 1:
        raise ValueError("page_size must be positive")
    if not count:
        return 1
    return max(1, ceil(count / page_size))


def page_bounds(page: int, page_size: int = None) -> Tuple[int, int]:
    """
    (offset, limit) for a 1-based page number
    """
    if page_size is None:
        page_size = settings.PAGE_SIZE
    if page < 1:
        raise ValueError("page must be >= 1")
    return (page - 1) * page_size, page_size
