"""
Test Configuration Module
"""

import fakeredis
import pytest
import pytest_asyncio
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker

from blog_api.db.models import Base
from blog_api.domain.post import PostCreate
from blog_api.repositories.sqlalchemy.post_repo import SQLAlchemyPostRepository


# Use in-memory database for testing
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture
async def async_engine():
    """Create async database engine for testing"""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
    )

    # Create all tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    # Clean up
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(async_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create database session for testing"""
    async_session = async_sessionmaker(
        async_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with async_session() as session:
        yield session


@pytest.fixture
def fake_redis() -> fakeredis.FakeAsyncRedis:
    """Isolated fake Redis client per test"""
    return fakeredis.FakeAsyncRedis(server=fakeredis.FakeServer(), decode_responses=True)


def make_post_create(
    title: str = "Hello world",
    content: str = "First post body",
    first_name: str = "Ada",
    last_name: str = "Lovelace",
) -> PostCreate:
    return PostCreate(
        title=title,
        content=content,
        author={"firstName": first_name, "lastName": last_name},
    )


@pytest.fixture
def make_post():
    """Factory for PostCreate payloads"""
    return make_post_create


@pytest_asyncio.fixture
async def seeded_posts(db_session):
    """Insert ten posts with distinct authors into the test database"""
    repo = SQLAlchemyPostRepository(db_session)
    posts = []
    for i in range(1, 11):
        posts.append(
            await repo.insert(
                make_post_create(
                    title=f"Post number {i}",
                    content=f"Body of post {i}",
                    first_name=f"First{i}",
                    last_name=f"Last{i}",
                )
            )
        )
    return posts
