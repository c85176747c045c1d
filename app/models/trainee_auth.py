"""Trainee credential model definition using SQLAlchemy Core."""

from uuid import uuid4

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    ForeignKey,
    String,
    Table,
    Text,
    func,
    text,
)

from app.models.trainees import metadata

trainee_auth = Table(
    "trainee_auth",
    metadata,
    Column("id", Text, primary_key=True, default=lambda: str(uuid4())),
    Column(
        "trainee_id",
        Text,
        ForeignKey("trainees.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    ),
    Column("phone", String(20), nullable=False, unique=True),
    # bcrypt hash, never leaves this service
    Column("password_hash", Text, nullable=False),
    Column("is_active", Boolean, nullable=False, server_default=text("true")),
    Column("last_login", DateTime(timezone=True)),
    Column("created_at", DateTime(timezone=True), nullable=False, server_default=func.now()),
)
