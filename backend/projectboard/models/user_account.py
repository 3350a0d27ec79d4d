"""
ProjectBoard Backend: UserAccount SQLAlchemy Model
===================================================

What:  ORM model for the `user_account` table (registered authors).
Who:   Referenced by Article.user_account; looked up by UserAccountRepository.

Table Design:
    - Integer identity primary key, assigned by the database
    - user_id: login-style identifier, unique
    - user_password: opaque string (no hashing in scope)
    - email unique; indexes on created_at / created_by for admin listings
"""

from typing import Optional

from sqlalchemy import Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from projectboard.database import Base
from projectboard.models.auditing import AuditingFields


class UserAccount(AuditingFields, Base):
    """
    A registered author identity.

    Lifecycle:
        Created once at registration; mutated only by direct field
        assignment; never deleted by any board operation.
    """

    __tablename__ = "user_account"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    user_id: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
        unique=True,
        comment="Public user identifier",
    )
    user_password: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(100), nullable=False)
    nickname: Mapped[str] = mapped_column(String(100), nullable=False)
    memo: Mapped[Optional[str]] = mapped_column(String(255), nullable=True, default=None)

    __table_args__ = (
        Index("idx_user_account_email", "email", unique=True),
        Index("idx_user_account_created_at", "created_at"),
        Index("idx_user_account_created_by", "created_by"),
    )

    def __repr__(self) -> str:
        return f"<UserAccount(id={self.id}, user_id='{self.user_id}')>"
