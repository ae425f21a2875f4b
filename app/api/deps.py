"""
API route dependencies.
"""

from typing import Annotated, Optional

from fastapi import Depends
from fastapi.security import APIKeyCookie
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.db.database import get_db_session
from app.db.models import UserModel
from app.services.auth_service import AuthService
from app.services.catalog_service import CatalogService
from app.services.session_service import SessionService


# Login token travels in an HttpOnly cookie
cookie_scheme = APIKeyCookie(name=settings.auth_cookie_name, auto_error=False)


async def get_current_user(
    token: Optional[str] = Depends(cookie_scheme),
    session: AsyncSession = Depends(get_db_session),
) -> UserModel:
    """
    Dependency to get current authenticated user.

    Requires a valid token cookie naming an existing user. Fails closed with
    AuthError (401) for every other case.
    """
    auth_service = AuthService(session)
    return await auth_service.resolve_token(token)


async def get_auth_service(session: AsyncSession = Depends(get_db_session)) -> AuthService:
    return AuthService(session)


async def get_session_service(
    session: AsyncSession = Depends(get_db_session),
) -> SessionService:
    return SessionService(session)


async def get_catalog_service(
    session: AsyncSession = Depends(get_db_session),
) -> CatalogService:
    return CatalogService(session)


# Dependency annotations
CurrentUserDep = Annotated[UserModel, Depends(get_current_user)]
AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]
SessionServiceDep = Annotated[SessionService, Depends(get_session_service)]
CatalogServiceDep = Annotated[CatalogService, Depends(get_catalog_service)]
