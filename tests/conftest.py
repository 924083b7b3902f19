"""Pytest configuration and shared fixtures."""

import uuid
from datetime import datetime, timedelta, timezone
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from finance_survey.core.security import create_access_token, hash_password
from finance_survey.dependencies.auth import get_auth_service
from finance_survey.domains.admin.models import Admin, RefreshToken
from finance_survey.domains.admin.repository import AdminRepositoryInterface
from finance_survey.domains.auth.service import AuthService
from finance_survey.domains.survey.catalog import questions
from finance_survey.domains.survey.models import SurveyResponse
from finance_survey.domains.survey.repository import InMemoryResponseRepository
from finance_survey.domains.survey.router import get_response_repository
from finance_survey.main import create_app

JAKARTA = timezone(timedelta(hours=7))

ADMIN_EMAIL = "admin@rumahsakit.com"
ADMIN_PASSWORD = "rahasia123"


class FakeCache:
    """In-process stand-in for a RedisCache instance."""

    def __init__(self):
        self.values: dict[str, str] = {}
        self.ttls: dict[str, int | None] = {}

    async def set(self, key, value, ttl=None):
        self.values[key] = value
        self.ttls[key] = ttl

    async def exists(self, key):
        return key in self.values


class FakeAdminRepository(AdminRepositoryInterface):
    """Admin accounts kept in dictionaries."""

    def __init__(self):
        self.admins: dict[uuid.UUID, Admin] = {}
        self.tokens: dict[str, RefreshToken] = {}

    async def create(self, admin: Admin) -> Admin:
        admin.id = admin.id or uuid.uuid4()
        if admin.is_active is None:
            admin.is_active = True
        self.admins[admin.id] = admin
        return admin

    async def get_by_id(self, admin_id):
        return self.admins.get(admin_id)

    async def get_by_email(self, email):
        return next((a for a in self.admins.values() if a.email == email), None)

    async def record_login(self, admin):
        admin.last_login_at = datetime.now(timezone.utc)

    async def add_refresh_token(self, token):
        self.tokens[token.token_hash] = token

    async def get_refresh_token(self, token_hash):
        return self.tokens.get(token_hash)

    async def revoke_refresh_tokens(self, admin_id):
        count = 0
        for token in self.tokens.values():
            if token.admin_id == admin_id and token.revoked_at is None:
                token.revoked_at = datetime.now(timezone.utc)
                count += 1
        return count


def make_response(
    counter: str = "Rawat Jalan Umum",
    created_at: datetime | None = None,
    answer_index: int = 0,
    comment: str | None = None,
    **overrides,
) -> SurveyResponse:
    """Build a valid response; ``answer_index`` picks the same option for every question."""
    fields = {
        "counter": counter,
        "name": "Budi Santoso",
        "medical_record_number": "MR-001",
        "phone": "081234567890",
        "comment": comment,
        "created_at": created_at or datetime(2024, 1, 5, 10, 0, tzinfo=JAKARTA),
    }
    fields.update({q.id.value: q.options[answer_index] for q in questions()})
    fields.update(overrides)
    return SurveyResponse(**fields)


@pytest.fixture
def response_factory():
    return make_response


@pytest.fixture
def response_repo() -> InMemoryResponseRepository:
    return InMemoryResponseRepository()


@pytest.fixture
def admin_repo() -> FakeAdminRepository:
    return FakeAdminRepository()


@pytest.fixture
def blacklist() -> FakeCache:
    return FakeCache()


@pytest_asyncio.fixture
async def admin(admin_repo: FakeAdminRepository) -> Admin:
    return await admin_repo.create(
        Admin(
            id=uuid.uuid4(),
            email=ADMIN_EMAIL,
            password_hash=hash_password(ADMIN_PASSWORD),
            name="Admin Keuangan",
            is_active=True,
        )
    )


@pytest.fixture
def admin_headers(admin: Admin) -> dict:
    token = create_access_token({"sub": str(admin.id), "email": admin.email, "name": admin.name})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def app(response_repo, admin_repo, blacklist):
    """Application wired to in-memory stores."""
    app = create_app()
    app.dependency_overrides[get_response_repository] = lambda: response_repo
    app.dependency_overrides[get_auth_service] = lambda: AuthService(
        repository=admin_repo,
        blacklist=blacklist,
    )
    return app


@pytest_asyncio.fixture
async def client(app) -> AsyncGenerator[AsyncClient, None]:
    """Create test HTTP client."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
