"""Page/size normalisation shared by list queries."""
from __future__ import annotations

from typing import Tuple

from sqlalchemy.orm import Query

from blog_core.utils.settings import get_settings


def page_bounds(page: int, size: int) -> Tuple[int, int]:
    """Return ``(offset, limit)`` for a 1-indexed page.

    Non-positive pages become 1, sizes above the configured maximum are capped
    and non-positive sizes fall back to the configured default.
    """
    settings = get_settings()
    if page <= 0:
        page = 1
    if size > settings.page_size_max:
        size = settings.page_size_max
    elif size <= 0:
        size = settings.page_size_default
    return (page - 1) * size, size


def paginate(query: Query, page: int, size: int) -> Query:
    offset, limit = page_bounds(page, size)
    return query.offset(offset).limit(limit)
