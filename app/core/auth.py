"""
JWT authentication utilities and the auth cookie.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import Response
from jose import JWTError, jwt
from passlib.context import CryptContext
from pydantic import BaseModel

from app.config import settings


# Password hashing context
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


class TokenData(BaseModel):
    """Data extracted from a JWT token."""

    user_id: str
    exp: datetime
    token_type: str


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    return pwd_context.verify(plain_password, hashed_password)


def hash_password(password: str) -> str:
    """Hash a password for storage."""
    return pwd_context.hash(password)


def create_access_token(user_id: str) -> str:
    """
    Create a JWT access token.

    Args:
        user_id: User's unique ID

    Returns:
        Encoded JWT token
    """
    now = datetime.now(timezone.utc)
    payload = {
        "sub": user_id,
        "exp": now + timedelta(days=settings.jwt_expire_days),
        "type": "access",
        "iat": now,
    }
    return jwt.encode(payload, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def decode_token(token: str) -> Optional[TokenData]:
    """
    Decode and validate a JWT token.

    Args:
        token: Encoded JWT token

    Returns:
        TokenData if valid, None otherwise
    """
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret_key,
            algorithms=[settings.jwt_algorithm],
        )
        return TokenData(
            user_id=payload["sub"],
            exp=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
            token_type=payload.get("type", "access"),
        )
    except (JWTError, KeyError, TypeError, ValueError):
        return None


def is_token_expired(token_data: TokenData) -> bool:
    """Check if a token is expired."""
    return token_data.exp < datetime.now(timezone.utc)


def set_auth_cookie(response: Response, token: str) -> None:
    """Attach the login token as an HttpOnly, SameSite=Strict cookie."""
    response.set_cookie(
        key=settings.auth_cookie_name,
        value=token,
        max_age=settings.jwt_expire_seconds,
        httponly=True,
        samesite="strict",
        secure=settings.cookie_secure,
    )


def clear_auth_cookie(response: Response) -> None:
    """Overwrite the auth cookie with an empty, zero-lifetime value."""
    response.set_cookie(
        key=settings.auth_cookie_name,
        value="",
        max_age=0,
        httponly=True,
        samesite="strict",
        secure=settings.cookie_secure,
    )
