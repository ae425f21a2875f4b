"""
Shared test fixtures and configuration for pytest.
"""

import os
import pytest
from datetime import datetime, timezone
from typing import AsyncGenerator

# Set test environment before importing app modules
os.environ["ENVIRONMENT"] = "test"
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["JWT_SECRET_KEY"] = "test-secret-key-for-testing-only"

from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.pool import StaticPool

from app.main import app
from app.db.database import Base, get_db_session
from app.db.models import SessionModel, SessionStatus, UserModel
from app.core.auth import hash_password, create_access_token


# Test database URL (in-memory SQLite)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
async def async_engine():
    """Create async test database engine."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
async def db_session(async_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session."""
    async_session_maker = async_sessionmaker(
        async_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with async_session_maker() as session:
        yield session
        await session.rollback()


@pytest.fixture
async def test_client(db_session) -> AsyncGenerator[AsyncClient, None]:
    """Create an async test client with database override."""

    async def override_get_db_session():
        yield db_session

    app.dependency_overrides[get_db_session] = override_get_db_session

    # https so the Secure auth cookie round-trips through the cookie jar
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="https://test"
    ) as client:
        yield client

    app.dependency_overrides.clear()


# ============ User Fixtures ============

@pytest.fixture
def test_user_data():
    """Test user data."""
    return {
        "email": "test@example.com",
        "password": "testpassword123",
        "first_name": "Test",
        "last_name": "User",
    }


async def _create_user(db_session, email, password, first_name, last_name="") -> UserModel:
    now = datetime.now(timezone.utc)
    user = UserModel(
        email=email,
        password_hash=hash_password(password),
        first_name=first_name,
        last_name=last_name,
        created_at=now,
        updated_at=now,
    )
    db_session.add(user)
    await db_session.flush()
    return user


@pytest.fixture
async def test_user(db_session, test_user_data) -> UserModel:
    """Create a test user in the database."""
    return await _create_user(db_session, **test_user_data)


@pytest.fixture
async def other_user(db_session) -> UserModel:
    """A second user who must never see test_user's sessions."""
    return await _create_user(db_session, "other@example.com", "otherpassword", "Other")


@pytest.fixture
def auth_cookies(test_user) -> dict:
    """Cookie header carrying a token for the test user."""
    return {"Cookie": f"jwt={create_access_token(test_user.id)}"}


@pytest.fixture
def other_auth_cookies(other_user) -> dict:
    """Cookie header carrying a token for the other user."""
    return {"Cookie": f"jwt={create_access_token(other_user.id)}"}


# ============ Session Fixtures ============

@pytest.fixture
async def test_session(db_session, test_user) -> SessionModel:
    """A draft session owned by the test user."""
    now = datetime.now(timezone.utc)
    record = SessionModel(
        user_id=test_user.id,
        title="Evening Breathwork",
        tags=["breath", "sleep"],
        json_file_url="https://example.com/breathwork.json",
        status=SessionStatus.DRAFT.value,
        created_at=now,
        updated_at=now,
    )
    db_session.add(record)
    await db_session.flush()
    return record


@pytest.fixture
async def published_session(db_session, test_user) -> SessionModel:
    """A published session owned by the test user."""
    now = datetime.now(timezone.utc)
    record = SessionModel(
        user_id=test_user.id,
        title="Sunrise Stretch",
        tags=["yoga"],
        json_file_url=None,
        status=SessionStatus.PUBLISHED.value,
        created_at=now,
        updated_at=now,
    )
    db_session.add(record)
    await db_session.flush()
    return record
