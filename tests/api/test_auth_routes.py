"""
API tests for authentication endpoints.
Tests registration, login, logout, and the cookie check.
"""

import pytest

from fastapi import status

from app.core.auth import create_access_token
from app.core.validation import new_object_id


class TestRegisterEndpoint:
    """Tests for POST /api/auth/register."""

    @pytest.mark.asyncio
    async def test_register_success(self, test_client):
        """Test successful user registration."""
        response = await test_client.post(
            "/api/auth/register",
            json={
                "email": "newuser@example.com",
                "password": "securepassword123",
                "firstName": "New",
                "lastName": "User",
            },
        )

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["email"] == "newuser@example.com"
        assert data["firstName"] == "New"
        assert data["lastName"] == "User"
        assert len(data["_id"]) == 24
        assert "password" not in data
        assert "password_hash" not in data
        assert "jwt=" in response.headers["set-cookie"]

    @pytest.mark.asyncio
    async def test_register_without_last_name(self, test_client):
        """Test registration without last name is allowed."""
        response = await test_client.post(
            "/api/auth/register",
            json={"email": "nolast@example.com", "password": "password123", "firstName": "Solo"},
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["lastName"] == ""

    @pytest.mark.asyncio
    async def test_register_duplicate_email(self, test_client, test_user):
        """Test registration with existing email fails."""
        response = await test_client.post(
            "/api/auth/register",
            json={
                "email": test_user.email,
                "password": "newpassword123",
                "firstName": "Again",
            },
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["detail"] == "Email already exists"

    @pytest.mark.asyncio
    async def test_register_short_password(self, test_client):
        """Test registration with too short password."""
        response = await test_client.post(
            "/api/auth/register",
            json={"email": "user@example.com", "password": "short", "firstName": "Shorty"},
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "at least 6" in response.json()["detail"]

    @pytest.mark.asyncio
    async def test_register_missing_first_name(self, test_client):
        """Test registration without first name."""
        response = await test_client.post(
            "/api/auth/register",
            json={"email": "user@example.com", "password": "password123"},
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["detail"] == "Fill in all the fields"

    @pytest.mark.asyncio
    async def test_register_wrong_body_type(self, test_client):
        """Test a body of the wrong shape is a 400, not a 422."""
        response = await test_client.post("/api/auth/register", json=["not", "an", "object"])

        assert response.status_code == status.HTTP_400_BAD_REQUEST


class TestLoginEndpoint:
    """Tests for POST /api/auth/login."""

    @pytest.mark.asyncio
    async def test_login_success(self, test_client, test_user, test_user_data):
        """Test successful login sets the cookie and returns the profile."""
        response = await test_client.post(
            "/api/auth/login",
            json={"email": test_user.email, "password": test_user_data["password"]},
        )

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["_id"] == test_user.id
        assert data["firstName"] == "Test"

        cookie = response.headers["set-cookie"]
        assert cookie.startswith("jwt=")
        assert "HttpOnly" in cookie
        assert "SameSite=strict" in cookie
        assert "Secure" in cookie
        assert "Max-Age=604800" in cookie

    @pytest.mark.asyncio
    async def test_login_wrong_password(self, test_client, test_user):
        """Test login with wrong password."""
        response = await test_client.post(
            "/api/auth/login",
            json={"email": test_user.email, "password": "wrongpassword"},
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["detail"] == "Invalid credentials"
        assert "set-cookie" not in response.headers

    @pytest.mark.asyncio
    async def test_login_nonexistent_user(self, test_client):
        """Test login with non-existent email gives the same answer."""
        response = await test_client.post(
            "/api/auth/login",
            json={"email": "nonexistent@example.com", "password": "password123"},
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["detail"] == "Invalid credentials"


class TestCheckEndpoint:
    """Tests for GET /api/auth/check."""

    @pytest.mark.asyncio
    async def test_check_with_cookie(self, test_client, test_user, auth_cookies):
        response = await test_client.get("/api/auth/check", headers=auth_cookies)

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["message"] == "Authorized"
        assert data["user"]["_id"] == test_user.id
        assert data["user"]["email"] == test_user.email

    @pytest.mark.asyncio
    async def test_check_without_cookie(self, test_client):
        response = await test_client.get("/api/auth/check")

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    @pytest.mark.asyncio
    async def test_check_with_garbage_cookie(self, test_client):
        response = await test_client.get(
            "/api/auth/check", headers={"Cookie": "jwt=not-a-token"}
        )

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    @pytest.mark.asyncio
    async def test_check_for_missing_user(self, test_client):
        """A valid signature for a user that does not exist is still 401."""
        token = create_access_token(new_object_id())
        response = await test_client.get(
            "/api/auth/check", headers={"Cookie": f"jwt={token}"}
        )

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


class TestLogoutEndpoint:
    """Tests for POST /api/auth/logout."""

    @pytest.mark.asyncio
    async def test_logout_clears_cookie(self, test_client):
        response = await test_client.post("/api/auth/logout")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["message"] == "Logged out successfully"
        cookie = response.headers["set-cookie"]
        assert cookie.startswith("jwt=")
        assert "Max-Age=0" in cookie

    @pytest.mark.asyncio
    async def test_login_then_logout_flow(self, test_client, test_user, test_user_data):
        """The cookie jar authenticates after login and not after logout."""
        await test_client.post(
            "/api/auth/login",
            json={"email": test_user.email, "password": test_user_data["password"]},
        )
        assert (await test_client.get("/api/auth/check")).status_code == status.HTTP_200_OK
        assert (await test_client.get("/api/my-sessions")).status_code == status.HTTP_200_OK

        await test_client.post("/api/auth/logout")

        assert (await test_client.get("/api/auth/check")).status_code == (
            status.HTTP_401_UNAUTHORIZED
        )
        assert (await test_client.get("/api/my-sessions")).status_code == (
            status.HTTP_401_UNAUTHORIZED
        )
        response = await test_client.post(
            "/api/my-sessions/save-draft", json={"title": "After logout"}
        )
        assert response.status_code == status.HTTP_401_UNAUTHORIZED
