"""
Authentication endpoints: registration, login, logout and cookie check.
"""

from typing import Optional

from fastapi import APIRouter, Response
from pydantic import BaseModel

from app.api.deps import AuthServiceDep, CurrentUserDep
from app.core.auth import clear_auth_cookie, create_access_token, set_auth_cookie
from app.models.schemas import (
    AuthCheckResponse,
    MessageResponse,
    UserResponse,
    format_user,
)


router = APIRouter()


# Request Models
class RegisterRequest(BaseModel):
    """Registration request. Emptiness and length are checked by the service."""

    email: str = ""
    password: str = ""
    firstName: str = ""
    lastName: Optional[str] = ""


class LoginRequest(BaseModel):
    """Login request."""

    email: str = ""
    password: str = ""


@router.post("/register", response_model=UserResponse)
async def register(request: RegisterRequest, response: Response, auth: AuthServiceDep):
    """
    Register a new user account.

    Signs the new user in by setting the token cookie.
    """
    user = await auth.register(
        email=request.email,
        password=request.password,
        first_name=request.firstName,
        last_name=request.lastName,
    )
    set_auth_cookie(response, create_access_token(user.id))
    return format_user(user)


@router.post("/login", response_model=UserResponse)
async def login(request: LoginRequest, response: Response, auth: AuthServiceDep):
    """
    Login with email and password.

    Sets the HttpOnly token cookie and returns the user profile.
    """
    user = await auth.authenticate(request.email, request.password)
    set_auth_cookie(response, create_access_token(user.id))
    return format_user(user)


@router.post("/logout", response_model=MessageResponse)
async def logout(response: Response):
    """
    Clear the token cookie.

    Stateless: a copied token stays valid until it expires.
    """
    clear_auth_cookie(response)
    return MessageResponse(message="Logged out successfully")


@router.get("/check", response_model=AuthCheckResponse)
async def check_auth(current_user: CurrentUserDep):
    """Confirm the cookie resolves to a live user."""
    return AuthCheckResponse(user=format_user(current_user))
