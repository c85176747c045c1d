import os
from collections import Counter
from collections.abc import AsyncGenerator
from datetime import datetime

# Cheap hashes and a fixed locale for the whole test session; must be set
# before the application modules read their settings.
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("LOCALE", "he")
os.environ.setdefault("LOG_FORMAT", "console")

import pytest
import pytest_asyncio
from dotenv import load_dotenv
from httpx import ASGITransport, AsyncClient
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

# Load environment variables from .env file
load_dotenv()

from app.core.security import get_password_hash
from app.dependencies import get_trainee_service
from app.main import app
from app.models import metadata

LOGIN_URL = "/functions/v1/trainee-login"
PHONE = "0501234567"
PASSWORD = "secret123"


class FakeTraineeStore:
    """In-memory stand-in for TraineeService that counts every call."""

    def __init__(self) -> None:
        self.trainees: list[dict] = []
        self.credentials: list[dict] = []
        self.calls: Counter[str] = Counter()
        self.last_logins: dict[str, datetime] = {}
        self.lookup_error: Exception | None = None
        self.update_error: Exception | None = None

    def add_trainee(self, trainee: dict, password: str | None = None, **credential) -> None:
        self.trainees.append(trainee)
        if password is not None:
            self.credentials.append(
                {
                    "id": f"auth-{trainee['id']}",
                    "trainee_id": trainee["id"],
                    "phone": trainee["phone"],
                    "password_hash": get_password_hash(password),
                    "is_active": True,
                    "last_login": None,
                    **credential,
                }
            )

    async def get_active_trainee_by_phone(self, phone: str) -> dict | None:
        self.calls["get_active_trainee_by_phone"] += 1
        if self.lookup_error is not None:
            raise self.lookup_error
        for trainee in self.trainees:
            if trainee["phone"] == phone and trainee["is_active"]:
                return dict(trainee)
        return None

    async def get_active_credential_by_phone(self, phone: str) -> dict | None:
        self.calls["get_active_credential_by_phone"] += 1
        for credential in self.credentials:
            if credential["phone"] == phone and credential["is_active"]:
                return dict(credential)
        return None

    async def update_last_login(self, credential_id: str, logged_in_at: datetime) -> None:
        self.calls["update_last_login"] += 1
        if self.update_error is not None:
            raise self.update_error
        self.last_logins[credential_id] = logged_in_at

    @property
    def total_calls(self) -> int:
        return sum(self.calls.values())


def store_failure() -> OperationalError:
    """A connection-level failure as raised by the database driver."""
    return OperationalError("SELECT trainees", {}, ConnectionRefusedError("refused"))


@pytest.fixture
def sample_trainee() -> dict:
    """Active trainee matching the documented login scenario."""
    return {
        "id": "t1",
        "trainer_id": "coach-1",
        "full_name": "Dana Cohen",
        "phone": PHONE,
        "email": "dana@example.com",
        "birth_date": None,
        "gender": "female",
        "height": 165.0,
        "is_active": True,
    }


@pytest.fixture
def fake_store(sample_trainee: dict) -> FakeTraineeStore:
    """Store holding Dana Cohen with password secret123."""
    store = FakeTraineeStore()
    store.add_trainee(sample_trainee, password=PASSWORD)
    return store


@pytest_asyncio.fixture
async def client(fake_store: FakeTraineeStore) -> AsyncGenerator[AsyncClient, None]:
    """Create a test HTTP client backed by the fake store."""
    app.dependency_overrides[get_trainee_service] = lambda: fake_store

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def session_factory() -> AsyncGenerator[async_sessionmaker[AsyncSession], None]:
    """Session factory over a fresh in-memory SQLite database."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(metadata.create_all)

    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    await engine.dispose()
