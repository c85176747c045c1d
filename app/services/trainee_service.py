"""Trainee identity and credential store."""

from datetime import datetime

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.models.trainee_auth import trainee_auth
from app.models.trainees import trainees


class TraineeService:
    """
    Read trainees and their credentials by phone.

    Every call opens its own session and closes it before returning, so a
    service instance can outlive the request that created it (the last-login
    update runs after the response has been sent).
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        """Initialize service with a session factory."""
        self.session_factory = session_factory

    async def get_active_trainee_by_phone(self, phone: str) -> dict | None:
        """Get the active trainee registered under a phone number."""
        query = select(trainees).where(
            trainees.c.phone == phone,
            trainees.c.is_active.is_(True),
        )
        async with self.session_factory() as db:
            result = await db.execute(query)
            trainee = result.mappings().first()
        return dict(trainee) if trainee else None

    async def get_active_credential_by_phone(self, phone: str) -> dict | None:
        """Get the active credential row for a phone number."""
        query = select(trainee_auth).where(
            trainee_auth.c.phone == phone,
            trainee_auth.c.is_active.is_(True),
        )
        async with self.session_factory() as db:
            result = await db.execute(query)
            credential = result.mappings().first()
        return dict(credential) if credential else None

    async def update_last_login(self, credential_id: str, logged_in_at: datetime) -> None:
        """Stamp the credential's last successful login."""
        query = (
            update(trainee_auth)
            .where(trainee_auth.c.id == credential_id)
            .values(last_login=logged_in_at)
        )
        async with self.session_factory() as db:
            await db.execute(query)
            await db.commit()
