"""Shared fixtures: environment, per-test SQLite database and an authenticated client."""

import os
import tempfile
from datetime import date, datetime, timezone
from pathlib import Path
from uuid import uuid4

# Settings are cached on first import, so the environment must be ready first
_TEST_DB_DIR = Path(tempfile.mkdtemp(prefix="hr-api-tests-"))
os.environ.setdefault("DATABASE_URL", f"sqlite+aiosqlite:///{_TEST_DB_DIR / 'default.db'}")
os.environ.setdefault("JWT_SECRET", "test-secret-key-with-plenty-of-entropy-0123456789")
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")
os.environ.setdefault("ENVIRONMENT", "development")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import Session
from sqlalchemy.pool import NullPool

from hr_api.database import get_db
from hr_api.main import app as fastapi_app
from hr_api.models.domain.user import UserRole
from hr_api.models.orm import Base, UserORM
from hr_api.security.password import PasswordService, get_password_service

ADMIN_EMAIL = "admin@example.com"
USER_EMAIL = "user@example.com"
PASSWORD = "correct-horse-battery"

# Minimum bcrypt cost keeps the suite fast
PasswordService.BCRYPT_ROUNDS = 4


@pytest.fixture
def database_path(tmp_path: Path) -> Path:
    """Fresh SQLite database file with the schema created."""
    path = tmp_path / "hr.db"
    sync_engine = create_engine(f"sqlite:///{path}")
    Base.metadata.create_all(sync_engine)
    sync_engine.dispose()
    return path


@pytest.fixture
def seed_user(database_path: Path):
    """Insert a user row directly and return its id."""

    def _seed(email: str, roles: list[str], is_active: bool = True, name: str = "Test User"):
        sync_engine = create_engine(f"sqlite:///{database_path}")
        user_id = uuid4()
        with Session(sync_engine) as session:
            session.add(
                UserORM(
                    id=user_id,
                    email=email,
                    name=name,
                    password_hash=get_password_service().hash_password(PASSWORD),
                    roles=roles,
                    is_active=is_active,
                    created_at=datetime.now(timezone.utc),
                )
            )
            session.commit()
        sync_engine.dispose()
        return user_id

    return _seed


@pytest.fixture
def client(database_path: Path):
    """Test client whose requests run against the per-test database."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{database_path}", poolclass=NullPool)
    session_maker = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async def override_get_db():
        async with session_maker() as session:
            try:
                yield session
                await session.commit()
            except SQLAlchemyError:
                await session.rollback()
                raise

    fastapi_app.dependency_overrides[get_db] = override_get_db
    with TestClient(fastapi_app) as test_client:
        yield test_client
    fastapi_app.dependency_overrides.clear()


def _login(client: TestClient, email: str) -> dict[str, str]:
    response = client.post("/api/login_check", json={"email": email, "password": PASSWORD})
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


@pytest.fixture
def admin_headers(client: TestClient, seed_user) -> dict[str, str]:
    seed_user(ADMIN_EMAIL, [UserRole.USER.value, UserRole.ADMIN.value], name="Admin")
    return _login(client, ADMIN_EMAIL)


@pytest.fixture
def user_headers(client: TestClient, seed_user) -> dict[str, str]:
    seed_user(USER_EMAIL, [UserRole.USER.value], name="Regular User")
    return _login(client, USER_EMAIL)


def years_ago(years: int) -> date:
    """Same day ``years`` years back, clamped for 29 February."""
    today = date.today()
    try:
        return today.replace(year=today.year - years)
    except ValueError:
        return today.replace(year=today.year - years, day=28)


@pytest.fixture
def employee_payload():
    def _payload(**overrides) -> dict:
        payload = {
            "first_name": "John",
            "last_name": "Doe",
            "email": f"john.doe.{uuid4().hex[:8]}@example.com",
            "position": "Software Engineer",
            "salary_amount": "75000.00",
            "salary_currency": "USD",
            "hired_at": years_ago(2).isoformat(),
        }
        payload.update(overrides)
        return payload

    return _payload


@pytest.fixture
def create_employee(client: TestClient, admin_headers: dict[str, str], employee_payload):
    """Create an employee through the API and return the response body."""

    def _create(**overrides) -> dict:
        response = client.post("/api/employees", json=employee_payload(**overrides), headers=admin_headers)
        assert response.status_code == 201, response.text
        return response.json()

    return _create
