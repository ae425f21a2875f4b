"""
Authentication service for user management.
"""

import logging
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.core.auth import (
    decode_token,
    hash_password,
    is_token_expired,
    verify_password,
)
from app.core.exceptions import (
    AuthError,
    ConflictError,
    InternalError,
    InvalidCredentialsError,
    ValidationError,
)
from app.db.models import UserModel

logger = logging.getLogger(__name__)


class AuthService:
    """Service for authentication and user management."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def register(
        self,
        email: str,
        password: str,
        first_name: str,
        last_name: Optional[str] = "",
    ) -> UserModel:
        """
        Register a new user.

        Args:
            email: User's email address (unique, case-sensitive)
            password: Plain text password
            first_name: Required first name
            last_name: Optional last name

        Returns:
            Created UserModel

        Raises:
            ValidationError: If a required field is empty or the password is too short
            ConflictError: If email already exists
        """
        first_name = (first_name or "").strip()
        last_name = (last_name or "").strip()

        if not email or not email.strip() or not password or not first_name:
            raise ValidationError("Fill in all the fields")

        if len(password) < settings.min_password_length:
            raise ValidationError(
                f"Password must be at least {settings.min_password_length} characters"
            )

        try:
            # Check-then-insert; the unique index catches a concurrent duplicate
            if await self.get_user_by_email(email):
                raise ConflictError(f"Email already registered: {email}")

            now = datetime.now(timezone.utc)
            user = UserModel(
                email=email,
                password_hash=hash_password(password),
                first_name=first_name,
                last_name=last_name,
                created_at=now,
                updated_at=now,
            )
            self.session.add(user)
            await self.session.flush()
        except IntegrityError as e:
            await self.session.rollback()
            raise ConflictError(f"Email already registered: {email}") from e
        except SQLAlchemyError as e:
            logger.exception("Failed to register user")
            raise InternalError(f"Registration failed: {e}") from e

        logger.info(f"Registered user {user.id}")
        return user

    async def authenticate(self, email: str, password: str) -> UserModel:
        """
        Verify credentials and return the matching user.

        Args:
            email: User's email
            password: Plain text password

        Returns:
            The authenticated UserModel

        Raises:
            InvalidCredentialsError: Unknown email or wrong password
        """
        if not email or not password:
            raise InvalidCredentialsError("Missing email or password")

        try:
            user = await self.get_user_by_email(email)
        except SQLAlchemyError as e:
            logger.exception("Failed to look up user for login")
            raise InternalError(f"Login lookup failed: {e}") from e

        if not user or not verify_password(password, user.password_hash):
            logger.warning("Rejected login attempt")
            raise InvalidCredentialsError("Invalid credentials")

        return user

    async def resolve_token(self, token: Optional[str]) -> UserModel:
        """
        Resolve a login token to a live user.

        Raises:
            AuthError: Token missing, malformed, expired, of the wrong type,
                or naming a user that no longer exists
        """
        if not token:
            raise AuthError("No token provided")

        token_data = decode_token(token)
        if not token_data:
            raise AuthError("Invalid token")

        if is_token_expired(token_data):
            raise AuthError("Token has expired")

        if token_data.token_type != "access":
            raise AuthError("Invalid token type")

        try:
            user = await self.get_user_by_id(token_data.user_id)
        except SQLAlchemyError as e:
            logger.exception("Failed to resolve token user")
            raise InternalError(f"Token user lookup failed: {e}") from e

        if not user:
            raise AuthError(f"User {token_data.user_id} not found")

        return user

    async def get_user_by_id(self, user_id: str) -> Optional[UserModel]:
        """Get user by ID."""
        return await self.session.get(UserModel, user_id)

    async def get_user_by_email(self, email: str) -> Optional[UserModel]:
        """Get user by email."""
        result = await self.session.execute(
            select(UserModel).where(UserModel.email == email)
        )
        return result.scalar_one_or_none()
