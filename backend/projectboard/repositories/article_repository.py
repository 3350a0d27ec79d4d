"""
ProjectBoard Backend: Article Repository
=========================================

What:  Every query the board needs against the `article` table.
How:   Wraps one AsyncSession (the request's unit of work). Writes are
       flushed, never committed; get_db_session owns the transaction.
       Paged queries run a row query and a COUNT query with the same
       predicate and join.
Who:   Constructed per request and injected into ArticleService.

Query Set:
    find_all                          unfiltered page
    find_by_{title,content,hashtag,
            user_id,nickname}_containing   containment via search bindings
    find_by_hashtag                   exact hashtag match
    find_all_by_predicate             arbitrary bound predicate
    find_by_id / get_reference_by_id  lookup by primary key
    save / delete_by_id               writes
    find_all_distinct_hashtags        hashtag browsing
"""

import logging
from typing import List, Optional

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import contains_eager
from sqlalchemy.sql.elements import ColumnElement

from projectboard.exceptions import NotFoundError
from projectboard.models.article import Article
from projectboard.repositories.bindings import bind, order_by_clauses
from projectboard.schemas.pagination import Page, PageRequest

logger = logging.getLogger(__name__)


class ArticleRepository:
    """Persistence boundary for Article entities."""

    def __init__(self, session: AsyncSession):
        self.session = session

    # ── Paged queries ─────────────────────────────────────────────────────

    async def find_all(self, page_request: PageRequest) -> Page[Article]:
        return await self.find_all_by_predicate(None, page_request)

    async def find_by_title_containing(self, title: str, page_request: PageRequest) -> Page[Article]:
        return await self.find_all_by_predicate(bind("title", title), page_request)

    async def find_by_content_containing(self, content: str, page_request: PageRequest) -> Page[Article]:
        return await self.find_all_by_predicate(bind("content", content), page_request)

    async def find_by_hashtag_containing(self, hashtag: str, page_request: PageRequest) -> Page[Article]:
        return await self.find_all_by_predicate(bind("hashtag", hashtag), page_request)

    async def find_by_user_id_containing(self, user_id: str, page_request: PageRequest) -> Page[Article]:
        return await self.find_all_by_predicate(bind("user_id", user_id), page_request)

    async def find_by_nickname_containing(self, nickname: str, page_request: PageRequest) -> Page[Article]:
        return await self.find_all_by_predicate(bind("nickname", nickname), page_request)

    async def find_by_hashtag(self, hashtag: str, page_request: PageRequest) -> Page[Article]:
        """Exact hashtag match; this path does not go through the bindings."""
        return await self.find_all_by_predicate(Article.hashtag == hashtag, page_request)

    async def find_all_by_predicate(
        self,
        predicate: Optional[ColumnElement],
        page_request: PageRequest,
    ) -> Page[Article]:
        """
        One page of articles matching `predicate` (all articles when None).

        Query plan:
            SELECT article.*, user_account.* FROM article
            JOIN user_account ON user_account.id = article.user_account_id
            WHERE :predicate ORDER BY :sort LIMIT :size OFFSET :page * :size
            + SELECT count(article.id) with the same join and predicate

        Raises:
            ValidationError: unknown sort property
        """
        query = (
            select(Article)
            .join(Article.user_account)
            .options(contains_eager(Article.user_account))
        )
        count_query = select(func.count(Article.id)).select_from(Article).join(Article.user_account)
        if predicate is not None:
            query = query.where(predicate)
            count_query = count_query.where(predicate)

        query = (
            query.order_by(*order_by_clauses(page_request.sort))
            .offset(page_request.offset)
            .limit(page_request.size)
        )

        result = await self.session.execute(query)
        articles = list(result.scalars().all())
        total = (await self.session.execute(count_query)).scalar_one()

        logger.debug(
            "Article page %d (size %d): %d rows of %d",
            page_request.page, page_request.size, len(articles), total,
        )
        return Page(
            content=articles,
            page=page_request.page,
            size=page_request.size,
            total_elements=total,
        )

    # ── Single-row access ─────────────────────────────────────────────────

    async def find_by_id(self, article_id: int) -> Optional[Article]:
        return await self.session.get(Article, article_id)

    async def get_reference_by_id(self, article_id: int) -> Article:
        """
        Fully loaded article for an in-place update.

        Raises:
            NotFoundError: no article with this id
        """
        article = await self.find_by_id(article_id)
        if article is None:
            raise NotFoundError(
                resource="article",
                resource_id=str(article_id),
                message=f"Unable to find Article with id {article_id}",
            )
        return article

    async def find_all_distinct_hashtags(self) -> List[str]:
        result = await self.session.execute(
            select(Article.hashtag).where(Article.hashtag.is_not(None)).distinct()
        )
        return list(result.scalars().all())

    # ── Writes ────────────────────────────────────────────────────────────

    async def save(self, article: Article) -> Article:
        """Inserts a new article or writes back a loaded one; flushes, does not commit."""
        self.session.add(article)
        await self.session.flush()
        return article

    async def delete_by_id(self, article_id: int) -> None:
        """Deletes the article if present; a missing id deletes nothing."""
        result = await self.session.execute(delete(Article).where(Article.id == article_id))
        if result.rowcount == 0:
            logger.debug("delete_by_id: no article with id %s", article_id)
