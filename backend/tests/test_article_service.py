"""
ProjectBoard Backend: Article Service Unit Tests
=================================================

What:  Tests for ArticleService business logic.
How:   Repositories are AsyncMock(spec=...) instances (see conftest.py);
       no database is involved.

What we test:
    ✅ Search with no type / blank keyword falls back to the full listing
    ✅ Each SearchType dispatches to its repository finder
    ✅ Hashtag search: blank → empty page, otherwise exact match
    ✅ Lookup by id, including the not-found message
    ✅ Save resolves the author; unknown author raises NotFoundError
    ✅ Partial update writes only provided fields; missing article is a logged no-op
    ✅ Delete delegates to the repository
    ✅ Distinct hashtag listing is trimmed, de-duplicated and sorted
"""

import logging

import pytest

from conftest import create_article, create_user_account
from projectboard.exceptions import NotFoundError, ValidationError
from projectboard.models.article import Article
from projectboard.models.search_type import SearchType
from projectboard.schemas.article import (
    ArticleDto,
    ArticleUpdateDto,
    ArticleWithCommentsDto,
)
from projectboard.schemas.pagination import Page, PageRequest
from projectboard.schemas.user_account import UserAccountDto


def _page_of(*articles: Article, page_request: PageRequest = PageRequest()) -> Page:
    return Page(
        content=list(articles),
        page=page_request.page,
        size=page_request.size,
        total_elements=len(articles),
    )


def _article_dto(title: str = "new title", user_id: str = "uno") -> ArticleDto:
    return ArticleDto(
        user_account=UserAccountDto.from_entity(create_user_account(user_id=user_id)),
        title=title,
        content="new content",
        hashtag="#java",
    )


class TestSearchArticles:
    """search_articles() and search_articles_via_hashtag()."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("search_type,keyword", [
        (None, None),
        (None, "spring"),
        (SearchType.TITLE, None),
        (SearchType.TITLE, ""),
        (SearchType.TITLE, "   "),
    ])
    async def test_without_keyword_returns_full_listing(
        self, article_service, article_repository, search_type, keyword
    ):
        page_request = PageRequest.of(sort=["created_at,desc"])
        article_repository.find_all.return_value = Page.empty(page_request)

        articles = await article_service.search_articles(search_type, keyword, page_request)

        assert articles.is_empty()
        article_repository.find_all.assert_awaited_once_with(page_request)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("search_type,finder", [
        (SearchType.TITLE, "find_by_title_containing"),
        (SearchType.CONTENT, "find_by_content_containing"),
        (SearchType.HASHTAG, "find_by_hashtag_containing"),
        (SearchType.USER_ID, "find_by_user_id_containing"),
        (SearchType.NICKNAME, "find_by_nickname_containing"),
    ])
    async def test_search_type_dispatches_to_finder(
        self, article_service, article_repository, search_type, finder
    ):
        page_request = PageRequest()
        getattr(article_repository, finder).return_value = _page_of(create_article())

        articles = await article_service.search_articles(search_type, "title", page_request)

        getattr(article_repository, finder).assert_awaited_once_with("title", page_request)
        article_repository.find_all.assert_not_awaited()
        assert articles.total_elements == 1
        assert isinstance(articles.content[0], ArticleDto)
        assert articles.content[0].title == "title"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("hashtag", [None, "", "   "])
    async def test_blank_hashtag_returns_empty_page(
        self, article_service, article_repository, hashtag
    ):
        page_request = PageRequest.of(page=2, size=5)

        articles = await article_service.search_articles_via_hashtag(hashtag, page_request)

        assert articles.is_empty()
        assert articles.page == 2
        assert articles.size == 5
        assert articles.total_elements == 0
        article_repository.find_by_hashtag.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_hashtag_search_uses_exact_match(self, article_service, article_repository):
        page_request = PageRequest()
        article_repository.find_by_hashtag.return_value = _page_of(create_article())

        articles = await article_service.search_articles_via_hashtag("#java", page_request)

        article_repository.find_by_hashtag.assert_awaited_once_with("#java", page_request)
        assert [dto.hashtag for dto in articles.content] == ["#java"]


class TestFilterArticles:

    @pytest.mark.asyncio
    async def test_builds_predicate_and_queries(self, article_service, article_repository):
        page_request = PageRequest()
        article_repository.find_all_by_predicate.return_value = _page_of(create_article())

        articles = await article_service.filter_articles({"title": "tit"}, page_request)

        article_repository.find_all_by_predicate.assert_awaited_once()
        predicate, passed_request = article_repository.find_all_by_predicate.await_args.args
        assert predicate is not None
        assert passed_request == page_request
        assert articles.total_elements == 1

    @pytest.mark.asyncio
    async def test_no_filters_queries_everything(self, article_service, article_repository):
        article_repository.find_all_by_predicate.return_value = Page.empty()

        await article_service.filter_articles({}, PageRequest())

        predicate, _ = article_repository.find_all_by_predicate.await_args.args
        assert predicate is None

    @pytest.mark.asyncio
    async def test_unknown_field_is_rejected(self, article_service, article_repository):
        with pytest.raises(ValidationError) as exc_info:
            await article_service.filter_articles({"user_password": "x"}, PageRequest())

        assert exc_info.value.field == "user_password"
        article_repository.find_all_by_predicate.assert_not_awaited()


class TestGetArticle:

    @pytest.mark.asyncio
    async def test_returns_article_with_comments(self, article_service, article_repository):
        article = create_article(article_id=1)
        article_repository.find_by_id.return_value = article

        dto = await article_service.get_article(1)

        assert isinstance(dto, ArticleWithCommentsDto)
        assert dto.id == 1
        assert dto.title == article.title
        assert dto.content == article.content
        assert dto.hashtag == article.hashtag
        assert dto.user_account.user_id == "uno"
        assert dto.article_comments == ()
        article_repository.find_by_id.assert_awaited_once_with(1)

    @pytest.mark.asyncio
    async def test_missing_article_raises_not_found(self, article_service, article_repository):
        article_repository.find_by_id.return_value = None

        with pytest.raises(NotFoundError) as exc_info:
            await article_service.get_article(0)

        assert exc_info.value.message == "article not found - articleId: 0"

    @pytest.mark.asyncio
    async def test_get_article_dto(self, article_service, article_repository):
        article_repository.find_by_id.return_value = create_article(article_id=7)

        dto = await article_service.get_article_dto(7)

        assert isinstance(dto, ArticleDto)
        assert dto.id == 7

    @pytest.mark.asyncio
    async def test_get_article_dto_missing(self, article_service, article_repository):
        article_repository.find_by_id.return_value = None

        with pytest.raises(NotFoundError, match="articleId: 7"):
            await article_service.get_article_dto(7)


class TestSaveArticle:

    @pytest.mark.asyncio
    async def test_saves_article_for_existing_author(
        self, article_service, article_repository, user_account_repository
    ):
        author = create_user_account(account_id=1)
        user_account_repository.get_reference_by_id.return_value = author
        article_repository.save.side_effect = lambda article: article

        await article_service.save_article(_article_dto(title="hello"))

        user_account_repository.get_reference_by_id.assert_awaited_once_with(1)
        user_account_repository.find_by_user_id.assert_not_awaited()
        article_repository.save.assert_awaited_once()
        saved = article_repository.save.await_args.args[0]
        assert isinstance(saved, Article)
        assert saved.title == "hello"
        assert saved.user_account is author

    @pytest.mark.asyncio
    async def test_unknown_author_raises_not_found(
        self, article_service, article_repository, user_account_repository
    ):
        user_account_repository.get_reference_by_id.side_effect = NotFoundError(
            resource="user account",
            resource_id="1",
            message="Unable to find UserAccount with id 1",
        )

        with pytest.raises(NotFoundError):
            await article_service.save_article(_article_dto(user_id="ghost"))

        article_repository.save.assert_not_awaited()


class TestUpdateArticle:

    @pytest.mark.asyncio
    async def test_updates_provided_fields(self, article_service, article_repository):
        article = create_article()
        author = article.user_account
        article_repository.get_reference_by_id.return_value = article
        dto = ArticleUpdateDto(title="새 타이틀", content="새 내용", hashtag="#springboot")

        await article_service.update_article(1, dto)

        assert article.title == "새 타이틀"
        assert article.content == "새 내용"
        assert article.hashtag == "#springboot"
        assert article.user_account is author
        article_repository.save.assert_awaited_once_with(article)

    @pytest.mark.asyncio
    async def test_none_fields_are_left_unchanged(self, article_service, article_repository):
        article = create_article()
        article_repository.get_reference_by_id.return_value = article

        await article_service.update_article(1, ArticleUpdateDto(title="only the title"))

        assert article.title == "only the title"
        assert article.content == "content"
        assert article.hashtag == "#java"

    @pytest.mark.asyncio
    async def test_article_dto_can_move_article_to_another_author(
        self, article_service, article_repository, user_account_repository
    ):
        article = create_article()
        new_author = create_user_account(user_id="dosdos", nickname="Dos", account_id=2)
        article_repository.get_reference_by_id.return_value = article
        user_account_repository.find_by_user_id.return_value = new_author

        await article_service.update_article(1, _article_dto(user_id="dosdos"))

        user_account_repository.find_by_user_id.assert_awaited_once_with("dosdos")
        assert article.user_account is new_author

    @pytest.mark.asyncio
    async def test_unknown_new_author_keeps_current_author(
        self, article_service, article_repository, user_account_repository
    ):
        article = create_article()
        author = article.user_account
        article_repository.get_reference_by_id.return_value = article
        user_account_repository.find_by_user_id.return_value = None

        await article_service.update_article(1, _article_dto(user_id="ghost"))

        assert article.user_account is author
        article_repository.save.assert_awaited_once_with(article)

    @pytest.mark.asyncio
    async def test_missing_article_logs_warning_and_does_nothing(
        self, article_service, article_repository, caplog
    ):
        article_repository.get_reference_by_id.side_effect = NotFoundError(
            resource="Article",
            resource_id="1",
            message="Unable to find Article with id 1",
        )

        with caplog.at_level(logging.WARNING, logger="projectboard.services.article_service"):
            await article_service.update_article(1, ArticleUpdateDto(title="x"))

        article_repository.save.assert_not_awaited()
        assert any(
            "article not found - articleId: 1" in record.getMessage()
            for record in caplog.records
        )


class TestDeleteAndHashtags:

    @pytest.mark.asyncio
    async def test_delete_delegates_to_repository(self, article_service, article_repository):
        await article_service.delete_article(1)

        article_repository.delete_by_id.assert_awaited_once_with(1)

    @pytest.mark.asyncio
    async def test_list_hashtags_is_distinct_and_sorted(self, article_service, article_repository):
        article_repository.find_all_distinct_hashtags.return_value = [
            "#spring", " #java ", "#java", "", "   ", "#python",
        ]

        hashtags = await article_service.list_hashtags()

        assert hashtags == ["#java", "#python", "#spring"]
