"""
ProjectBoard Backend: Article Service (Board Business Logic)
=============================================================

What:  Search, lookup, creation, partial update and deletion of articles.
How:   Receives its repositories through the constructor; every call runs in
       the caller's unit of work (one AsyncSession per request). Entities
       never leave this layer: results are mapped to frozen DTOs.
Who:   Called by the route handlers in routes/articles.py and
       routes/article_api.py.

Failure Semantics:
    get_article / get_article_dto   missing id → NotFoundError (404)
    update_article                  missing id → WARNING log, no-op
    delete_article                  missing id → no-op (store semantics)
    search_articles_via_hashtag     blank hashtag → empty page
    store errors                    propagate unchanged
"""

import logging
from typing import List, Mapping, Optional, Union

from projectboard.exceptions import NotFoundError
from projectboard.models.search_type import SearchType
from projectboard.repositories.article_repository import ArticleRepository
from projectboard.repositories.bindings import build_predicate
from projectboard.repositories.user_account_repository import UserAccountRepository
from projectboard.schemas.article import (
    ArticleDto,
    ArticleUpdateDto,
    ArticleWithCommentsDto,
)
from projectboard.schemas.pagination import Page, PageRequest

logger = logging.getLogger(__name__)


class ArticleService:
    """
    Business logic layer for board articles.

    Responsibilities:
        - search_articles(): keyword search on one field, or the full listing
        - search_articles_via_hashtag(): exact hashtag match
        - filter_articles(): generic field filters through the search bindings
        - get_article() / get_article_dto(): lookup with not-found handling
        - save_article() / update_article() / delete_article(): writes
        - list_hashtags(): distinct hashtags for the browsing view
    """

    def __init__(
        self,
        article_repository: ArticleRepository,
        user_account_repository: UserAccountRepository,
    ):
        self.article_repository = article_repository
        self.user_account_repository = user_account_repository

    # ── Reads ─────────────────────────────────────────────────────────────

    async def search_articles(
        self,
        search_type: Optional[SearchType],
        search_keyword: Optional[str],
        page_request: PageRequest,
    ) -> Page[ArticleDto]:
        """
        Page of articles whose `search_type` field contains `search_keyword`.

        Without a search type or with a blank keyword the unfiltered listing
        is returned unchanged apart from the DTO mapping.
        """
        if search_type is None or not search_keyword or not search_keyword.strip():
            articles = await self.article_repository.find_all(page_request)
            return articles.map(ArticleDto.from_entity)

        finders = {
            SearchType.TITLE: self.article_repository.find_by_title_containing,
            SearchType.CONTENT: self.article_repository.find_by_content_containing,
            SearchType.HASHTAG: self.article_repository.find_by_hashtag_containing,
            SearchType.USER_ID: self.article_repository.find_by_user_id_containing,
            SearchType.NICKNAME: self.article_repository.find_by_nickname_containing,
        }
        articles = await finders[search_type](search_keyword, page_request)
        return articles.map(ArticleDto.from_entity)

    async def search_articles_via_hashtag(
        self,
        hashtag: Optional[str],
        page_request: PageRequest,
    ) -> Page[ArticleDto]:
        """Exact hashtag match. A blank hashtag yields an empty page, not an error."""
        if hashtag is None or not hashtag.strip():
            return Page.empty(page_request)

        articles = await self.article_repository.find_by_hashtag(hashtag, page_request)
        return articles.map(ArticleDto.from_entity)

    async def filter_articles(
        self,
        filters: Mapping[str, str],
        page_request: PageRequest,
    ) -> Page[ArticleDto]:
        """
        Page of articles matching every (field, value) pair in `filters`.

        Raises:
            ValidationError: a field outside the search allow-list
        """
        predicate = build_predicate(filters)
        articles = await self.article_repository.find_all_by_predicate(predicate, page_request)
        return articles.map(ArticleDto.from_entity)

    async def get_article(self, article_id: int) -> ArticleWithCommentsDto:
        """
        Raises:
            NotFoundError: "article not found - articleId: {id}"
        """
        article = await self.article_repository.find_by_id(article_id)
        if article is None:
            raise self._article_not_found(article_id)
        return ArticleWithCommentsDto.from_entity(article)

    async def get_article_dto(self, article_id: int) -> ArticleDto:
        """
        Raises:
            NotFoundError: "article not found - articleId: {id}"
        """
        article = await self.article_repository.find_by_id(article_id)
        if article is None:
            raise self._article_not_found(article_id)
        return ArticleDto.from_entity(article)

    async def list_hashtags(self) -> List[str]:
        """Distinct non-blank hashtags across all articles, trimmed and sorted."""
        hashtags = await self.article_repository.find_all_distinct_hashtags()
        return sorted({tag.strip() for tag in hashtags if tag and tag.strip()})

    # ── Writes ────────────────────────────────────────────────────────────

    async def save_article(self, dto: ArticleDto) -> None:
        """
        Inserts a new article authored by dto.user_account.

        The author DTO is trusted as coming from a lookup in the same unit of
        work (UserAccountService.get_user_account); only its id is used.

        Raises:
            NotFoundError: the author id does not exist
        """
        author = await self.user_account_repository.get_reference_by_id(dto.user_account.id)
        article = await self.article_repository.save(dto.to_entity(author))
        logger.info("Article %s created by %s", article.id, author.user_id)

    async def update_article(
        self,
        article_id: int,
        dto: Union[ArticleUpdateDto, ArticleDto],
    ) -> None:
        """
        Partial update: only non-None title/content/hashtag are written.

        An ArticleDto may also move the article to another author, when its
        user_account.user_id differs from the current author's and that
        account exists. A missing article is logged and ignored.
        """
        try:
            article = await self.article_repository.get_reference_by_id(article_id)
        except NotFoundError as e:
            logger.warning(
                "Article update failed, article not found - articleId: %s (%s)",
                article_id,
                e.message,
            )
            return

        if dto.title is not None:
            article.title = dto.title
        if dto.content is not None:
            article.content = dto.content
        if dto.hashtag is not None:
            article.hashtag = dto.hashtag

        if isinstance(dto, ArticleDto):
            new_user_id = dto.user_account.user_id
            if new_user_id != article.user_account.user_id:
                new_author = await self.user_account_repository.find_by_user_id(new_user_id)
                if new_author is not None:
                    article.user_account = new_author

        await self.article_repository.save(article)

    async def delete_article(self, article_id: int) -> None:
        await self.article_repository.delete_by_id(article_id)

    @staticmethod
    def _article_not_found(article_id: int) -> NotFoundError:
        return NotFoundError(
            resource="article",
            resource_id=str(article_id),
            message=f"article not found - articleId: {article_id}",
        )
