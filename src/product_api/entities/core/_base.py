import uuid
from datetime import UTC, datetime

import sqlalchemy as sa
from pydantic import BaseModel, field_validator
from pydantic import Field as PydanticField
from sqlmodel import Field, SQLModel


def utc_now() -> datetime:
    return datetime.now(UTC)


class Entity(BaseModel):
    """Base entity class with auto-generated UUID identifier."""

    id: str = PydanticField(
        default_factory=lambda: str(uuid.uuid4()),
        description="Unique identifier for the entity",
    )

    created_at: datetime = PydanticField(default_factory=utc_now)
    updated_at: datetime | None = PydanticField(default=None)

    @field_validator("created_at", "updated_at")
    @classmethod
    def _assume_utc(cls, value: datetime | None) -> datetime | None:
        # SQLite hands back naive datetimes; everything is stored as UTC
        if value is not None and value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value


class EntityTable(SQLModel, table=False):
    """Base table with a UUID primary key and audit timestamps."""

    id: str = Field(
        primary_key=True,
        max_length=36,
        description="Unique identifier for the entity",
    )

    created_at: datetime = Field(sa_type=sa.DateTime(timezone=True), nullable=False)
    updated_at: datetime | None = Field(
        default=None, sa_type=sa.DateTime(timezone=True), nullable=True
    )
