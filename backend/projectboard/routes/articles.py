"""
ProjectBoard Backend: Article Route Handlers
=============================================

What:  The board's web front controller.
How:   Extracts query/path/body parameters, delegates to ArticleService,
       converts DTOs to response models. No business rules live here.

Routes:
    GET    /articles                  search or list, paginated
    GET    /articles/search-hashtag   exact hashtag search, paginated
    GET    /articles/hashtags         distinct hashtags
    GET    /articles/{article_id}     detail (404 when missing)
    POST   /articles                  create
    PATCH  /articles/{article_id}     partial update (missing id is a no-op)
    DELETE /articles/{article_id}     delete (missing id is a no-op)

Static paths are declared before /articles/{article_id} so they are not
captured by the path parameter.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status

from projectboard.models.search_type import SearchType
from projectboard.schemas.article import (
    ArticleRequest,
    ArticleResponse,
    ArticleUpdateRequest,
    ArticleWithCommentsResponse,
)
from projectboard.schemas.common import ErrorResponse
from projectboard.schemas.pagination import Page, PageRequest
from projectboard.routes.params import get_page_request
from projectboard.services.article_service import ArticleService
from projectboard.services.dependencies import get_article_service, get_user_account_service
from projectboard.services.user_account_service import UserAccountService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/articles", tags=["Articles"])


@router.get(
    "",
    response_model=Page[ArticleResponse],
    responses={400: {"description": "Invalid sort", "model": ErrorResponse}},
    summary="List or search articles",
)
async def list_articles(
    response: Response,
    search_type: Optional[SearchType] = Query(
        default=None,
        description="Field to search: TITLE, CONTENT, HASHTAG, USER_ID, NICKNAME",
    ),
    search_value: Optional[str] = Query(
        default=None,
        description="Case-insensitive substring to look for in the chosen field",
    ),
    page_request: PageRequest = Depends(get_page_request),
    service: ArticleService = Depends(get_article_service),
) -> Page[ArticleResponse]:
    """
    Paginated article listing.

    Example:
        GET /articles?search_type=TITLE&search_value=spring&page=0&size=10
    """
    articles = await service.search_articles(search_type, search_value, page_request)
    response.headers["X-Total-Count"] = str(articles.total_elements)
    return articles.map(ArticleResponse.from_dto)


@router.get(
    "/search-hashtag",
    response_model=Page[ArticleResponse],
    summary="Search articles by exact hashtag",
)
async def search_articles_via_hashtag(
    response: Response,
    search_value: Optional[str] = Query(default=None, description="Hashtag, e.g. #java"),
    page_request: PageRequest = Depends(get_page_request),
    service: ArticleService = Depends(get_article_service),
) -> Page[ArticleResponse]:
    """A missing or blank hashtag returns an empty page."""
    articles = await service.search_articles_via_hashtag(search_value, page_request)
    response.headers["X-Total-Count"] = str(articles.total_elements)
    return articles.map(ArticleResponse.from_dto)


@router.get(
    "/hashtags",
    response_model=List[str],
    summary="Distinct hashtags in use",
)
async def list_hashtags(
    service: ArticleService = Depends(get_article_service),
) -> List[str]:
    return await service.list_hashtags()


@router.get(
    "/{article_id}",
    response_model=ArticleWithCommentsResponse,
    responses={404: {"description": "Article not found", "model": ErrorResponse}},
    summary="Get a single article",
)
async def get_article(
    article_id: int,
    service: ArticleService = Depends(get_article_service),
) -> ArticleWithCommentsResponse:
    article = await service.get_article(article_id)
    return ArticleWithCommentsResponse.from_dto(article)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    responses={404: {"description": "Author not found", "model": ErrorResponse}},
    summary="Create an article",
)
async def create_article(
    body: ArticleRequest,
    service: ArticleService = Depends(get_article_service),
    user_account_service: UserAccountService = Depends(get_user_account_service),
) -> Response:
    author = await user_account_service.get_user_account(body.user_id)
    await service.save_article(body.to_dto(author))
    return Response(status_code=status.HTTP_201_CREATED)


@router.patch(
    "/{article_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Partially update an article",
)
async def update_article(
    article_id: int,
    body: ArticleUpdateRequest,
    service: ArticleService = Depends(get_article_service),
) -> Response:
    """
    Only the fields present in the body are written. Updating a missing
    article is accepted and does nothing (a warning is logged server-side).
    """
    await service.update_article(article_id, body.to_dto())
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/{article_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete an article",
)
async def delete_article(
    article_id: int,
    service: ArticleService = Depends(get_article_service),
) -> Response:
    await service.delete_article(article_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
