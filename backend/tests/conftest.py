"""
ProjectBoard Backend: Test Configuration (conftest.py)
=======================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped):
    ├── db_engine:        in-memory SQLite engine with the board schema
    ├── db_session:       AsyncSession on db_engine
    ├── seeded_board:     two authors and five articles flushed into db_session
    ├── test_client:      HTTPX AsyncClient whose requests share db_session
    ├── article_repository / user_account_repository: AsyncMock ports
    └── article_service:  ArticleService wired to the mocked repositories
"""

import os

# Override settings for testing BEFORE any projectboard imports
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["DEFAULT_AUDITOR"] = "uno"

from datetime import datetime, timezone
from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from projectboard.database import Base, get_db_session
from projectboard.models.article import Article
from projectboard.models.user_account import UserAccount
from projectboard.repositories.article_repository import ArticleRepository
from projectboard.repositories.user_account_repository import UserAccountRepository
from projectboard.services.article_service import ArticleService


# ══════════════════════════════════════════════════════════════════════════
# Database Fixtures (real SQLite, in memory)
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def db_engine():
    """Fresh in-memory database per test; StaticPool keeps the one connection alive."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(db_engine):
    factory = async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        yield session


@pytest_asyncio.fixture
async def seeded_board(db_session):
    """
    Two authors and five articles.

        uno (Uno):           "Spring Boot tips" #spring, "Java streams" #java,
                             "More Java" #java
        dosdos (Dos Amigos): "Python typing" #python, "100% coverage" (no hashtag)
    """
    uno = UserAccount(
        user_id="uno",
        user_password="password",
        email="uno@mail.com",
        nickname="Uno",
        memo="This is memo",
    )
    dos = UserAccount(
        user_id="dosdos",
        user_password="password",
        email="dos@mail.com",
        nickname="Dos Amigos",
    )
    db_session.add_all([uno, dos])
    await db_session.flush()

    articles = [
        Article(user_account=uno, title="Spring Boot tips", content="Use constructor injection", hashtag="#spring"),
        Article(user_account=uno, title="Java streams", content="map, filter and reduce", hashtag="#java"),
        Article(user_account=dos, title="Python typing", content="Generics, like in Spring", hashtag="#python"),
        Article(user_account=dos, title="100% coverage", content="not a goal", hashtag=None),
        Article(user_account=uno, title="More Java", content="records and sealed types", hashtag="#java"),
    ]
    db_session.add_all(articles)
    await db_session.flush()

    return {"users": {"uno": uno, "dosdos": dos}, "articles": articles}


@pytest_asyncio.fixture
async def test_client(db_session):
    """
    HTTPX AsyncClient talking to the FastAPI app through ASGITransport.

    Every request uses db_session, so data seeded by a test is visible to
    the routes and writes made through the API are visible to the test.
    """
    from projectboard.main import app

    async def override_db_session():
        yield db_session

    app.dependency_overrides[get_db_session] = override_db_session
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()


# ══════════════════════════════════════════════════════════════════════════
# Service Fixtures (mocked repositories)
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def article_repository():
    return AsyncMock(spec=ArticleRepository)


@pytest.fixture
def user_account_repository():
    return AsyncMock(spec=UserAccountRepository)


@pytest.fixture
def article_service(article_repository, user_account_repository):
    return ArticleService(
        article_repository=article_repository,
        user_account_repository=user_account_repository,
    )


# ══════════════════════════════════════════════════════════════════════════
# Entity Builders
# ══════════════════════════════════════════════════════════════════════════

def create_user_account(user_id: str = "uno", nickname: str = "Uno", account_id: int = 1) -> UserAccount:
    now = datetime.now(timezone.utc)
    return UserAccount(
        id=account_id,
        user_id=user_id,
        user_password="password",
        email=f"{user_id}@email.com",
        nickname=nickname,
        memo=None,
        created_at=now,
        created_by=user_id,
        modified_at=now,
        modified_by=user_id,
    )


def create_article(article_id: int = 1, user_account: UserAccount = None) -> Article:
    now = datetime.now(timezone.utc)
    return Article(
        id=article_id,
        user_account=user_account or create_user_account(),
        title="title",
        content="content",
        hashtag="#java",
        created_at=now,
        created_by="Uno",
        modified_at=now,
        modified_by="Uno",
    )
