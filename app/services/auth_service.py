"""Authentication service for trainee phone/password login."""

from datetime import UTC, datetime

import structlog
from fastapi import BackgroundTasks
from sqlalchemy.exc import SQLAlchemyError
from starlette.concurrency import run_in_threadpool

from app.config import Settings
from app.core.exceptions import (
    BadRequestException,
    DependencyException,
    UnauthorizedException,
)
from app.core.messages import get_message
from app.core.security import verify_password
from app.schemas.auth import LoginResponse, TraineeResponse
from app.services.trainee_service import TraineeService

logger = structlog.get_logger()


def mask_phone(phone: str) -> str:
    """Keep only the last three digits of a phone number for logging."""
    if len(phone) <= 3:
        return "***"
    return "*" * (len(phone) - 3) + phone[-3:]


class AuthService:
    """Verify trainee credentials and issue the session handle."""

    def __init__(self, trainee_service: TraineeService, settings: Settings):
        """Initialize auth service with the trainee store and settings."""
        self.trainees = trainee_service
        self.settings = settings

    def _message(self, key: str) -> str:
        return get_message(key, self.settings.locale)

    def _rejected(self, phone: str, reason: str) -> UnauthorizedException:
        # Every rejection carries the same message so callers cannot tell
        # which phone numbers are registered.
        logger.info("trainee_login_rejected", phone=mask_phone(phone), reason=reason)
        return UnauthorizedException(self._message("invalid_credentials"))

    def _store_failed(self, phone: str, exc: Exception) -> DependencyException:
        logger.error(
            "trainee_store_failed",
            phone=mask_phone(phone),
            error_type=type(exc).__name__,
        )
        message = self._message("login_failed")
        if self.settings.debug:
            message += f": {type(exc).__name__}"
        return DependencyException(message)

    async def authenticate(
        self,
        phone: str | None,
        password: str | None,
        background_tasks: BackgroundTasks | None = None,
    ) -> LoginResponse:
        """
        Authenticate a trainee by phone and password.

        Args:
            phone: Phone number as typed by the trainee
            password: Plain text password
            background_tasks: Where to schedule the last-login update. When
                omitted the update is awaited inline (still best-effort).

        Returns:
            Trainee id and profile

        Raises:
            BadRequestException: If phone or password is missing
            UnauthorizedException: If the credential does not verify
            DependencyException: If the trainee store fails
        """
        phone = (phone or "").strip()
        if not phone or not password:
            raise BadRequestException(self._message("missing_credentials"))

        try:
            trainee = await self.trainees.get_active_trainee_by_phone(phone)
            if trainee is None:
                raise self._rejected(phone, "unknown_phone")

            credential = await self.trainees.get_active_credential_by_phone(phone)
        except SQLAlchemyError as e:
            raise self._store_failed(phone, e) from e

        if credential is None:
            raise self._rejected(phone, "no_credential")
        if credential["trainee_id"] != trainee["id"]:
            logger.warning(
                "trainee_credential_mismatch",
                phone=mask_phone(phone),
                trainee_id=trainee["id"],
            )
            raise self._rejected(phone, "credential_mismatch")

        try:
            verified = await run_in_threadpool(
                verify_password, password, credential["password_hash"]
            )
        except ValueError:
            logger.error("trainee_password_hash_unrecognized", trainee_id=trainee["id"])
            verified = False
        if not verified:
            raise self._rejected(phone, "wrong_password")

        if background_tasks is not None:
            background_tasks.add_task(self.record_last_login, credential["id"])
        else:
            await self.record_last_login(credential["id"])

        logger.info("trainee_login_succeeded", trainee_id=trainee["id"])

        return LoginResponse(
            trainee_id=trainee["id"],
            trainee=TraineeResponse.model_validate(trainee),
        )

    async def record_last_login(self, credential_id: str) -> None:
        """
        Stamp last_login on the credential row.

        Failures are logged and dropped; the login has already succeeded.

        Args:
            credential_id: Credential row identifier
        """
        try:
            await self.trainees.update_last_login(credential_id, datetime.now(UTC))
        except Exception as e:
            logger.warning(
                "last_login_update_failed",
                credential_id=credential_id,
                error_type=type(e).__name__,
                error=str(e),
            )
