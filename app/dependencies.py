"""FastAPI dependencies."""

from typing import Annotated

from fastapi import Depends

from app.config import Settings, get_settings
from app.database import AsyncSessionLocal
from app.services.auth_service import AuthService
from app.services.trainee_service import TraineeService


def get_trainee_service() -> TraineeService:
    """Provide the trainee store bound to the application's session factory."""
    return TraineeService(AsyncSessionLocal)


def get_auth_service(
    trainee_service: Annotated[TraineeService, Depends(get_trainee_service)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> AuthService:
    """Provide the auth service with its store and settings injected."""
    return AuthService(trainee_service, settings)


# Type aliases for dependency injection
AppSettings = Annotated[Settings, Depends(get_settings)]
Auth = Annotated[AuthService, Depends(get_auth_service)]
