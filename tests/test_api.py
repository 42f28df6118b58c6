"""Auth and user API endpoint tests."""

from datetime import UTC, datetime, timedelta

from fastapi.testclient import TestClient

from flowboard.api.dependencies import get_auth_service, get_token_service
from flowboard.errors import (
    InvalidCredentials,
    NotFound,
    StoreFailure,
    TokenExpired,
    UserExists,
    ValidationError,
)
from flowboard.main import app, status_for
from flowboard.models.user import User


def test_health_check(client):
    """Test health check endpoint."""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_signup(client):
    """Test user registration."""
    response = client.post(
        "/api/auth/signup",
        json={"name": "New User", "email": "newuser@example.com", "password": "password123"},
    )
    assert response.status_code == 201
    data = response.json()
    assert data["token"]
    assert data["user"]["name"] == "New User"
    assert data["user"]["email"] == "newuser@example.com"
    assert "password" not in data["user"]
    assert "password_hash" not in data["user"]


def test_signup_duplicate_email(client, auth_headers):
    """Test registration with duplicate email fails with 409."""
    response = client.post(
        "/api/auth/signup",
        json={"name": "Duplicate", "email": auth_headers.email, "password": "password123"},
    )
    assert response.status_code == 409
    assert response.json()["error"] == "conflict"


def test_signup_duplicate_email_different_case(client, auth_headers):
    """Emails are compared case-insensitively."""
    response = client.post(
        "/api/auth/signup",
        json={"name": "Duplicate", "email": "TEST@example.com", "password": "password123"},
    )
    assert response.status_code == 409


def test_signup_missing_fields(client):
    """Test registration without a password is a 400."""
    response = client.post(
        "/api/auth/signup",
        json={"name": "No Password", "email": "nopass@example.com"},
    )
    assert response.status_code == 400
    assert response.json()["error"] == "validation_error"


def test_signup_short_password(client):
    """Test registration with a short password is rejected."""
    response = client.post(
        "/api/auth/signup",
        json={"name": "Short", "email": "short@example.com", "password": "abc"},
    )
    assert response.status_code == 400
    assert "abc" not in response.text


def test_login(client, auth_headers):
    """Test user login."""
    response = client.post(
        "/api/auth/login", json={"email": auth_headers.email, "password": "testpass123"}
    )
    assert response.status_code == 200
    data = response.json()
    assert data["token"]
    assert data["user"]["id"] == auth_headers.user_id
    assert "password_hash" not in data["user"]


def test_login_token_is_usable(client, auth_headers):
    """Test the login token authenticates later requests."""
    response = client.post(
        "/api/auth/login", json={"email": auth_headers.email, "password": "testpass123"}
    )
    token = response.json()["token"]

    response = client.get("/api/users/me", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 200
    assert response.json()["user"]["id"] == auth_headers.user_id


def test_login_wrong_password_and_unknown_email_look_the_same(client, auth_headers):
    """Wrong password and unknown email produce identical responses."""
    wrong_password = client.post(
        "/api/auth/login", json={"email": auth_headers.email, "password": "wrongpass"}
    )
    unknown_email = client.post(
        "/api/auth/login", json={"email": "nobody@example.com", "password": "testpass123"}
    )
    assert wrong_password.status_code == 401
    assert unknown_email.status_code == 401
    assert wrong_password.json() == unknown_email.json()
    assert wrong_password.json()["error"] == "invalid_credentials"


def test_get_current_user(client, auth_headers):
    """Test getting current user information."""
    response = client.get("/api/users/me", headers=auth_headers)
    assert response.status_code == 200
    user = response.json()["user"]
    assert user["email"] == auth_headers.email
    assert user["name"] == "Test User"
    assert "password_hash" not in user


def test_get_current_user_deleted(client, db, auth_headers):
    """A valid token for a user that no longer exists yields 404."""
    db.query(User).filter(User.id == auth_headers.user_id).delete()
    db.commit()

    response = client.get("/api/users/me", headers=auth_headers)
    assert response.status_code == 404


def test_unauthorized_access(client):
    """Test that endpoints require authentication."""
    response = client.get("/api/users/me")
    assert response.status_code == 401
    assert response.headers["www-authenticate"] == "Bearer"
    assert response.json()["error"] == "unauthorized"


def test_wrong_auth_scheme(client):
    """Test that a non-bearer Authorization header is rejected."""
    response = client.get("/api/users/me", headers={"Authorization": "Basic dXNlcjpwYXNz"})
    assert response.status_code == 401


def test_invalid_token(client):
    """Test that a garbage token is rejected without detail."""
    response = client.get("/api/users/me", headers={"Authorization": "Bearer not-a-token"})
    assert response.status_code == 401
    assert response.json() == {"error": "unauthorized", "message": "Invalid or expired token"}


def test_expired_token(client, auth_headers):
    """Test that an expired token gets the same opaque 401."""
    token = get_token_service().issue(
        auth_headers.user_id, now=datetime.now(UTC) - timedelta(hours=25)
    )
    response = client.get("/api/users/me", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 401
    assert response.json() == {"error": "unauthorized", "message": "Invalid or expired token"}


def test_signup_password_with_nul(client):
    """A password bcrypt cannot hash is a 400, not a crash."""
    response = client.post(
        "/api/auth/signup",
        json={"name": "Nul", "email": "nul@example.com", "password": "abcdefg\u0000h"},
    )
    assert response.status_code == 400
    assert response.json()["error"] == "validation_error"


def test_login_password_with_nul(client, auth_headers):
    """Login with a NUL in the password is rejected as invalid input."""
    response = client.post(
        "/api/auth/login", json={"email": auth_headers.email, "password": "testpass\u0000123"}
    )
    assert response.status_code == 400
    assert response.json()["error"] == "validation_error"


def test_unexpected_error_is_opaque(client):
    """Unhandled exceptions still produce the structured error body."""

    def broken_auth_service():
        raise RuntimeError("secret internal detail")

    app.dependency_overrides[get_auth_service] = broken_auth_service

    with TestClient(app, raise_server_exceptions=False) as unsafe_client:
        response = unsafe_client.post(
            "/api/auth/login", json={"email": "someone@example.com", "password": "password123"}
        )

    assert response.status_code == 500
    assert response.json() == {"error": "internal_error", "message": "Internal server error"}
    assert "secret internal detail" not in response.text


def test_error_status_mapping():
    """HTTP statuses are assigned by the API layer, by error family."""
    assert status_for(ValidationError()) == 400
    assert status_for(InvalidCredentials()) == 401
    assert status_for(TokenExpired()) == 401
    assert status_for(NotFound()) == 404
    assert status_for(UserExists()) == 409
    assert status_for(StoreFailure()) == 500
    assert not hasattr(ValidationError(), "status_code")
