"""
Pydantic schemas for API request/response validation.
"""

from datetime import datetime
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from app.db.models import SessionModel, UserModel


# ============ User Schemas ============

class UserResponse(BaseModel):
    """Public user fields. Never includes the password hash."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., alias="_id", description="User ID")
    email: str
    firstName: str
    lastName: str = ""


class AuthCheckResponse(BaseModel):
    """Result of a cookie check."""

    message: str = "Authorized"
    user: UserResponse


class MessageResponse(BaseModel):
    """Plain acknowledgement."""

    message: str


# ============ Session Schemas ============

class SessionDraftRequest(BaseModel):
    """Save-draft body. No id creates a new session."""

    id: Optional[str] = Field(None, description="Existing session ID to overwrite")
    title: Optional[str] = None
    tags: Union[str, List[str], None] = Field(
        None, description="Comma-separated string or list of tags"
    )
    json_file_url: Optional[str] = None


class SessionPublishRequest(BaseModel):
    """Publish body. The id is required by the service."""

    id: Optional[str] = Field(None, description="Session ID to publish")
    title: Optional[str] = None
    tags: Union[str, List[str], None] = None
    json_file_url: Optional[str] = None


class SessionResponse(BaseModel):
    """A session as its owner sees it."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., alias="_id", description="Session ID")
    user_id: str
    title: str
    tags: List[str] = Field(default_factory=list)
    json_file_url: Optional[str] = None
    status: str = Field(..., pattern="^(draft|published)$")
    createdAt: datetime
    updatedAt: datetime


class PublicSessionResponse(BaseModel):
    """Catalog projection of a published session."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., alias="_id", description="Session ID")
    user_id: str
    title: str
    tags: List[str] = Field(default_factory=list)
    json_file_url: Optional[str] = None
    createdAt: datetime


class SessionDetailResponse(BaseModel):
    """Single owned session."""

    session: SessionResponse


class SessionEnvelope(BaseModel):
    """Single session after a write, with its confirmation message."""

    message: str
    session: SessionResponse


class SessionListResponse(BaseModel):
    """Owner's sessions."""

    sessions: List[SessionResponse]


class PublicSessionListResponse(BaseModel):
    """Published sessions."""

    sessions: List[PublicSessionResponse]


# ============ Formatting ============

def format_user(user: UserModel) -> UserResponse:
    """Format user model to response."""
    return UserResponse(
        id=user.id,
        email=user.email,
        firstName=user.first_name,
        lastName=user.last_name or "",
    )


def format_session(record: SessionModel) -> SessionResponse:
    """Format session model to response."""
    return SessionResponse(
        id=record.id,
        user_id=record.user_id,
        title=record.title,
        tags=list(record.tags or []),
        json_file_url=record.json_file_url,
        status=record.status,
        createdAt=record.created_at,
        updatedAt=record.updated_at,
    )


def format_public_session(record: SessionModel) -> PublicSessionResponse:
    """Format session model to the public catalog projection."""
    return PublicSessionResponse(
        id=record.id,
        user_id=record.user_id,
        title=record.title,
        tags=list(record.tags or []),
        json_file_url=record.json_file_url,
        createdAt=record.created_at,
    )
