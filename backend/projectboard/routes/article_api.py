"""
ProjectBoard Backend: Generic Article Filter API
=================================================

What:  GET /api/articles, filtering by any field of the search allow-list.
How:   Every query parameter other than page/size/sort is a (field, value)
       pair handed to the search bindings; the pairs are AND-ed.

Example:
    GET /api/articles?title=spring&created_by=uno&sort=title,asc
    GET /api/articles?created_at=2024-01-15T12:00:00
    GET /api/articles?user_password=x   → 400, field not searchable
"""

from fastapi import APIRouter, Depends, Request, Response

from projectboard.schemas.article import ArticleResponse
from projectboard.schemas.common import ErrorResponse
from projectboard.schemas.pagination import Page, PageRequest
from projectboard.routes.params import get_page_request
from projectboard.services.article_service import ArticleService
from projectboard.services.dependencies import get_article_service

router = APIRouter(prefix="/api", tags=["Article API"])

PAGING_PARAMS = {"page", "size", "sort"}


@router.get(
    "/articles",
    response_model=Page[ArticleResponse],
    responses={400: {"description": "Unsupported filter field or value", "model": ErrorResponse}},
    summary="Filter articles by field",
    description=(
        "Filterable fields: title, content, hashtag, created_by, user_id, nickname "
        "(case-insensitive substring) and created_at (exact, ISO-8601)."
    ),
)
async def filter_articles(
    request: Request,
    response: Response,
    page_request: PageRequest = Depends(get_page_request),
    service: ArticleService = Depends(get_article_service),
) -> Page[ArticleResponse]:
    filters = {
        key: value
        for key, value in request.query_params.items()
        if key not in PAGING_PARAMS
    }
    articles = await service.filter_articles(filters, page_request)
    response.headers["X-Total-Count"] = str(articles.total_elements)
    return articles.map(ArticleResponse.from_dto)
