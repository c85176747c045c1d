"""Trainee identity model definition using SQLAlchemy Core."""

from uuid import uuid4

from sqlalchemy import (
    Boolean,
    Column,
    Date,
    DateTime,
    Index,
    MetaData,
    Numeric,
    String,
    Table,
    Text,
    func,
    text,
)

metadata = MetaData()

trainees = Table(
    "trainees",
    metadata,
    Column("id", Text, primary_key=True, default=lambda: str(uuid4())),
    # Owning trainer (provisioned outside this service)
    Column("trainer_id", Text, nullable=False, index=True),
    # Profile
    Column("full_name", Text, nullable=False),
    Column("phone", String(20), nullable=False),
    Column("email", Text),
    Column("birth_date", Date),
    Column("gender", Text),
    Column("height", Numeric(5, 1)),
    # Account state
    Column("is_active", Boolean, nullable=False, server_default=text("true")),
    Column("created_at", DateTime(timezone=True), nullable=False, server_default=func.now()),
    # A phone identifies at most one active trainee
    Index(
        "uq_trainees_active_phone",
        "phone",
        unique=True,
        postgresql_where=text("is_active"),
        sqlite_where=text("is_active"),
    ),
)
