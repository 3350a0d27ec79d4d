"""
ProjectBoard Backend: Article SQLAlchemy Model
===============================================

What:  ORM model for the `article` table (board posts).
How:   Many-to-one to UserAccount. The author is referenced, never owned:
       deleting an article leaves the account untouched.
Who:   Queried by ArticleRepository; mapped to DTOs in schemas/article.py.

Indexes:
    title, hashtag, created_at, created_by: the columns the search bindings
    filter and sort on most often.
"""

from typing import Optional

from sqlalchemy import ForeignKey, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from projectboard.database import Base
from projectboard.models.auditing import AuditingFields
from projectboard.models.user_account import UserAccount


class Article(AuditingFields, Base):
    """
    A board post with title, content, optional hashtag and an author.

    Lifecycle:
        1. Created from author + title + content + hashtag
        2. Updated in place (title/content/hashtag setters); id never changes
        3. Deleted by id; deleting a missing id is a no-op
    """

    __tablename__ = "article"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    user_account_id: Mapped[int] = mapped_column(
        ForeignKey("user_account.id"),
        nullable=False,
        comment="Author of the article",
    )
    # lazy="joined": the author is loaded with the article, async sessions
    # cannot lazy-load on attribute access
    user_account: Mapped[UserAccount] = relationship(lazy="joined", innerjoin=True)

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    content: Mapped[str] = mapped_column(String(10000), nullable=False)
    hashtag: Mapped[Optional[str]] = mapped_column(String(255), nullable=True, default=None)

    __table_args__ = (
        Index("idx_article_title", "title"),
        Index("idx_article_hashtag", "hashtag"),
        Index("idx_article_created_at", "created_at"),
        Index("idx_article_created_by", "created_by"),
    )

    def __repr__(self) -> str:
        return f"<Article(id={self.id}, title='{self.title}', hashtag='{self.hashtag}')>"
