"""
ProjectBoard Backend: Article DTOs and API Schemas
===================================================

What:  Immutable DTOs used at the service boundary, and the request/response
       models used by the routes.
How:   DTOs are frozen Pydantic models. Entity → DTO copies every field,
       audit metadata included. DTO → Entity is only used when creating an
       article; updates patch the loaded entity in place so id, author and
       created_at/created_by survive.

Shapes:
    ArticleDto              ← search results, get_article_dto
    ArticleWithCommentsDto  ← get_article (comments not implemented, always empty)
    ArticleUpdateDto        ← partial update; None means "keep stored value"
"""

from datetime import datetime
from typing import Any, Optional, Tuple

from pydantic import BaseModel, Field

from projectboard.models.article import Article
from projectboard.models.user_account import UserAccount
from projectboard.schemas.user_account import UserAccountDto, UserAccountResponse


# ══════════════════════════════════════════════════════════════════════════
# Service DTOs
# ══════════════════════════════════════════════════════════════════════════


class ArticleDto(BaseModel):
    id: Optional[int] = None
    user_account: UserAccountDto
    title: str
    content: str
    hashtag: Optional[str] = None
    created_at: Optional[datetime] = None
    created_by: Optional[str] = None
    modified_at: Optional[datetime] = None
    modified_by: Optional[str] = None

    model_config = {"frozen": True}

    @classmethod
    def from_entity(cls, entity: Article) -> "ArticleDto":
        return cls(
            id=entity.id,
            user_account=UserAccountDto.from_entity(entity.user_account),
            title=entity.title,
            content=entity.content,
            hashtag=entity.hashtag,
            created_at=entity.created_at,
            created_by=entity.created_by,
            modified_at=entity.modified_at,
            modified_by=entity.modified_by,
        )

    def to_entity(self, user_account: UserAccount) -> Article:
        """
        New, unsaved Article authored by `user_account`.

        The author is passed in as a persistent entity rather than rebuilt
        from `self.user_account`, so the insert references the existing row.
        """
        return Article(
            user_account=user_account,
            title=self.title,
            content=self.content,
            hashtag=self.hashtag,
        )


class ArticleWithCommentsDto(BaseModel):
    id: int
    user_account: UserAccountDto
    title: str
    content: str
    hashtag: Optional[str] = None
    # Comments are not stored yet; always empty
    article_comments: Tuple[Any, ...] = ()
    created_at: datetime
    created_by: str
    modified_at: datetime
    modified_by: str

    model_config = {"frozen": True}

    @classmethod
    def from_entity(cls, entity: Article) -> "ArticleWithCommentsDto":
        return cls(
            id=entity.id,
            user_account=UserAccountDto.from_entity(entity.user_account),
            title=entity.title,
            content=entity.content,
            hashtag=entity.hashtag,
            created_at=entity.created_at,
            created_by=entity.created_by,
            modified_at=entity.modified_at,
            modified_by=entity.modified_by,
        )


class ArticleUpdateDto(BaseModel):
    """Fields eligible for a partial update. Unset fields keep their stored value."""

    title: Optional[str] = None
    content: Optional[str] = None
    hashtag: Optional[str] = None

    model_config = {"frozen": True}


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class ArticleRequest(BaseModel):
    """Body of POST /articles."""

    user_id: str = Field(min_length=1, max_length=50, description="Author's user identifier")
    title: str = Field(min_length=1, max_length=255)
    content: str = Field(min_length=1, max_length=10000)
    hashtag: Optional[str] = Field(default=None, max_length=255)

    def to_dto(self, user_account: UserAccountDto) -> ArticleDto:
        return ArticleDto(
            user_account=user_account,
            title=self.title,
            content=self.content,
            hashtag=self.hashtag,
        )


class ArticleUpdateRequest(BaseModel):
    """Body of PATCH /articles/{id}. Omitted fields are left unchanged."""

    title: Optional[str] = Field(default=None, min_length=1, max_length=255)
    content: Optional[str] = Field(default=None, min_length=1, max_length=10000)
    hashtag: Optional[str] = Field(default=None, max_length=255)

    def to_dto(self) -> ArticleUpdateDto:
        return ArticleUpdateDto(title=self.title, content=self.content, hashtag=self.hashtag)


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class ArticleResponse(BaseModel):
    """Article summary used in list pages."""

    id: int
    title: str
    content: str
    hashtag: Optional[str] = None
    created_at: datetime
    created_by: str
    modified_at: datetime
    modified_by: str
    user_id: str = Field(description="Author's user identifier")
    nickname: str = Field(description="Author's nickname")

    @classmethod
    def from_dto(cls, dto: ArticleDto) -> "ArticleResponse":
        return cls(
            id=dto.id,
            title=dto.title,
            content=dto.content,
            hashtag=dto.hashtag,
            created_at=dto.created_at,
            created_by=dto.created_by,
            modified_at=dto.modified_at,
            modified_by=dto.modified_by,
            user_id=dto.user_account.user_id,
            nickname=dto.user_account.nickname,
        )


class ArticleWithCommentsResponse(BaseModel):
    """Full article detail for GET /articles/{id}."""

    id: int
    title: str
    content: str
    hashtag: Optional[str] = None
    created_at: datetime
    created_by: str
    modified_at: datetime
    modified_by: str
    author: UserAccountResponse
    article_comments: list = Field(default_factory=list)

    @classmethod
    def from_dto(cls, dto: ArticleWithCommentsDto) -> "ArticleWithCommentsResponse":
        return cls(
            id=dto.id,
            title=dto.title,
            content=dto.content,
            hashtag=dto.hashtag,
            created_at=dto.created_at,
            created_by=dto.created_by,
            modified_at=dto.modified_at,
            modified_by=dto.modified_by,
            author=UserAccountResponse.from_dto(dto.user_account),
            article_comments=list(dto.article_comments),
        )
