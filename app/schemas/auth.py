"""Authentication schemas."""

from datetime import date

from pydantic import BaseModel, Field


class TraineeLoginRequest(BaseModel):
    """Phone and password login request."""

    phone: str | None = Field(default=None, description="Trainee phone number")
    password: str | None = Field(default=None, description="Trainee password")


class TraineeResponse(BaseModel):
    """Trainee profile returned after login. Never carries credential fields."""

    id: str
    trainer_id: str
    full_name: str
    phone: str
    email: str | None = None
    birth_date: date | None = None
    gender: str | None = None
    height: float | None = None
    is_active: bool = True

    model_config = {"from_attributes": True}


class LoginResponse(BaseModel):
    """Login response: the trainee id doubles as the client-held session handle."""

    trainee_id: str
    trainee: TraineeResponse


class ErrorResponse(BaseModel):
    """Error body shared by every failure status."""

    error: str
