"""
SQLAlchemy ORM models package.

Re-exports all models for convenient imports.
"""

from app.db.models.user import UserModel
from app.db.models.session import SessionModel, SessionStatus

__all__ = [
    "UserModel",
    "SessionModel",
    "SessionStatus",
]
