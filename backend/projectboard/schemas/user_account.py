"""
ProjectBoard Backend: UserAccount DTOs
=======================================

What:  Immutable snapshot of a UserAccount for the service boundary, plus
       the public response shape (which never includes the password).
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from projectboard.models.user_account import UserAccount


class UserAccountDto(BaseModel):
    """Flat, frozen copy of a UserAccount row including audit metadata."""

    id: Optional[int] = None
    user_id: str
    user_password: str
    email: str
    nickname: str
    memo: Optional[str] = None
    created_at: Optional[datetime] = None
    created_by: Optional[str] = None
    modified_at: Optional[datetime] = None
    modified_by: Optional[str] = None

    model_config = {"frozen": True}

    @classmethod
    def from_entity(cls, entity: UserAccount) -> "UserAccountDto":
        return cls(
            id=entity.id,
            user_id=entity.user_id,
            user_password=entity.user_password,
            email=entity.email,
            nickname=entity.nickname,
            memo=entity.memo,
            created_at=entity.created_at,
            created_by=entity.created_by,
            modified_at=entity.modified_at,
            modified_by=entity.modified_by,
        )

    def to_entity(self) -> UserAccount:
        """New, unsaved entity; identity and audit fields are left to the store."""
        return UserAccount(
            user_id=self.user_id,
            user_password=self.user_password,
            email=self.email,
            nickname=self.nickname,
            memo=self.memo,
        )


class UserAccountResponse(BaseModel):
    """Author details exposed over HTTP."""

    user_id: str = Field(description="Public user identifier")
    email: str
    nickname: str
    memo: Optional[str] = None

    @classmethod
    def from_dto(cls, dto: UserAccountDto) -> "UserAccountResponse":
        return cls(user_id=dto.user_id, email=dto.email, nickname=dto.nickname, memo=dto.memo)
