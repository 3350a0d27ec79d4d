from typing import List

from fastapi import Query

from projectboard.config import settings
from projectboard.schemas.pagination import PageRequest

DEFAULT_SORT = "created_at,desc"


def get_page_request(
    page: int = Query(default=0, ge=0, description="0-based page index"),
    size: int = Query(
        default=settings.default_page_size,
        ge=1,
        le=settings.max_page_size,
        description="Items per page",
    ),
    sort: List[str] = Query(
        default=[DEFAULT_SORT],
        description="Repeatable 'property,direction' pairs, e.g. sort=title,asc",
    ),
) -> PageRequest:
    """Paging query parameters shared by every list endpoint (newest first by default)."""
    return PageRequest.of(page=page, size=size, sort=sort)
