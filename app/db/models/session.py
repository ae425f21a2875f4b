"""
Wellness session model: the owned, publishable resource.
"""

from enum import Enum
from typing import Optional

from sqlalchemy import JSON, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from app.core.validation import new_object_id
from app.db.database import Base
from app.db.models.base import TimestampMixin


class SessionStatus(str, Enum):
    """Publication state of a session."""

    DRAFT = "draft"
    PUBLISHED = "published"


class SessionModel(TimestampMixin, Base):
    """A wellness session owned by exactly one user."""

    __tablename__ = "sessions"

    id: Mapped[str] = mapped_column(
        String(24),
        primary_key=True,
        default=new_object_id,
    )
    user_id: Mapped[str] = mapped_column(
        String(24),
        ForeignKey("users.id"),
        nullable=False,
        index=True,
    )
    title: Mapped[str] = mapped_column(
        String,
        nullable=False,
    )
    tags: Mapped[list[str]] = mapped_column(
        JSON,
        nullable=False,
        default=list,
    )
    json_file_url: Mapped[Optional[str]] = mapped_column(
        String,
        nullable=True,
    )
    status: Mapped[str] = mapped_column(
        String(16),
        nullable=False,
        default=SessionStatus.DRAFT.value,
        index=True,
    )