"""
ProjectBoard Backend: Service Wiring
=====================================

What:  FastAPI dependencies that assemble services for one request.
How:   The request's AsyncSession (get_db_session) is passed to the
       repositories, and the repositories to the services. Tests replace
       get_db_session through app.dependency_overrides.
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from projectboard.database import get_db_session
from projectboard.repositories.article_repository import ArticleRepository
from projectboard.repositories.user_account_repository import UserAccountRepository
from projectboard.services.article_service import ArticleService
from projectboard.services.user_account_service import UserAccountService


def get_article_service(db: AsyncSession = Depends(get_db_session)) -> ArticleService:
    return ArticleService(
        article_repository=ArticleRepository(db),
        user_account_repository=UserAccountRepository(db),
    )


def get_user_account_service(db: AsyncSession = Depends(get_db_session)) -> UserAccountService:
    return UserAccountService(user_account_repository=UserAccountRepository(db))
