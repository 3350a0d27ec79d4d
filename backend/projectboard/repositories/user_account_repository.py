from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from projectboard.exceptions import NotFoundError
from projectboard.models.user_account import UserAccount


class UserAccountRepository:
    """Persistence boundary for UserAccount entities."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def find_by_id(self, account_id: int) -> Optional[UserAccount]:
        return await self.session.get(UserAccount, account_id)

    async def get_reference_by_id(self, account_id: Optional[int]) -> UserAccount:
        """
        Author entity for a DTO that came from a lookup in the same session.

        Served from the session identity map when already loaded.

        Raises:
            NotFoundError: no account with this id
        """
        user_account = None
        if account_id is not None:
            user_account = await self.find_by_id(account_id)
        if user_account is None:
            raise NotFoundError(
                resource="user account",
                resource_id=str(account_id),
                message=f"Unable to find UserAccount with id {account_id}",
            )
        return user_account

    async def find_by_user_id(self, user_id: str) -> Optional[UserAccount]:
        result = await self.session.execute(
            select(UserAccount).where(UserAccount.user_id == user_id)
        )
        return result.scalar_one_or_none()

    async def save(self, user_account: UserAccount) -> UserAccount:
        self.session.add(user_account)
        await self.session.flush()
        return user_account
