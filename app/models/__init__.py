"""Database models."""

from app.models.trainee_auth import trainee_auth
from app.models.trainees import metadata, trainees

__all__ = [
    "metadata",
    "trainee_auth",
    "trainees",
]
