from projectboard.exceptions import NotFoundError
from projectboard.repositories.user_account_repository import UserAccountRepository
from projectboard.schemas.user_account import UserAccountDto


class UserAccountService:
    """Author lookups for the write routes."""

    def __init__(self, user_account_repository: UserAccountRepository):
        self.user_account_repository = user_account_repository

    async def get_user_account(self, user_id: str) -> UserAccountDto:
        """
        Raises:
            NotFoundError: "user account not found - userId: {user_id}"
        """
        user_account = await self.user_account_repository.find_by_user_id(user_id)
        if user_account is None:
            raise NotFoundError(
                resource="user account",
                resource_id=user_id,
                message=f"user account not found - userId: {user_id}",
            )
        return UserAccountDto.from_entity(user_account)
