"""
User model for authentication and session ownership.
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from app.core.validation import new_object_id
from app.db.database import Base
from app.db.models.base import TimestampMixin


class UserModel(TimestampMixin, Base):
    """User account for authentication and session ownership."""

    __tablename__ = "users"

    id: Mapped[str] = mapped_column(
        String(24),
        primary_key=True,
        default=new_object_id,
    )
    email: Mapped[str] = mapped_column(
        String,
        unique=True,
        nullable=False,
        index=True,
    )
    password_hash: Mapped[str] = mapped_column(
        String,
        nullable=False,
    )
    first_name: Mapped[str] = mapped_column(
        String,
        nullable=False,
    )
    last_name: Mapped[str] = mapped_column(
        String,
        nullable=False,
        default="",
    )