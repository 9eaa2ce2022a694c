from __future__ import annotations

import math


def page_count(total: int, page_size: int) -> int:
    """
    Number of pages needed to cover `total` rows at `page_size` rows per page.
    Raises ValueError for a non-positive page size or a negative total.
    """
    if page_size < 1:
        raise ValueError(f"Invalid page size: {page_size!r}")
    if total < 0:
        raise ValueError(f"Invalid total: {total!r}")
    return math.ceil(total / page_size)


def start_row(page: int, page_size: int) -> int:
    """1-based offset of the first row requested on `page` (also 1-based)."""
    if page < 1:
        raise ValueError(f"Invalid page index: {page!r}")
    return (page - 1) * page_size + 1
