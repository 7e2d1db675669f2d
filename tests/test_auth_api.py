from fastapi import status

from app.services import auth as auth_service


def test_login_success(client, seed):
    """Test successful login with valid credentials."""
    response = client.post("/auth/token", json={"username": "u1", "password": "password1"})
    assert response.status_code == status.HTTP_200_OK
    token = response.json()["token"]
    payload = auth_service.decode_token(token)
    assert payload["username"] == "u1"
    assert payload["isAdmin"] is False


def test_login_unknown_user(client, seed):
    response = client.post("/auth/token", json={"username": "no-such-user", "password": "password1"})
    assert response.status_code == status.HTTP_401_UNAUTHORIZED
    assert response.json()["error"]["message"] == "Invalid username/password"


def test_login_wrong_password(client, seed):
    """Test login failure with wrong password."""
    response = client.post("/auth/token", json={"username": "u1", "password": "nope"})
    assert response.status_code == status.HTTP_401_UNAUTHORIZED


def test_login_missing_field(client, seed):
    response = client.post("/auth/token", json={"username": "u1"})
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert any("password" in msg for msg in response.json()["error"]["message"])


def test_login_invalid_types(client, seed):
    response = client.post("/auth/token", json={"username": 42, "password": "above-is-a-number"})
    assert response.status_code == status.HTTP_400_BAD_REQUEST


def test_register(client, seed):
    response = client.post("/auth/register", json={
        "username": "new",
        "firstName": "first",
        "lastName": "last",
        "password": "password",
        "email": "new@email.com",
    })
    assert response.status_code == status.HTTP_201_CREATED
    payload = auth_service.decode_token(response.json()["token"])
    assert payload["username"] == "new"
    assert payload["isAdmin"] is False


def test_register_cannot_grant_admin(client, seed):
    response = client.post("/auth/register", json={
        "username": "sneaky",
        "firstName": "first",
        "lastName": "last",
        "password": "password",
        "email": "sneaky@email.com",
        "isAdmin": True,
    })
    assert response.status_code == status.HTTP_400_BAD_REQUEST


def test_register_duplicate(client, seed):
    response = client.post("/auth/register", json={
        "username": "u1",
        "firstName": "first",
        "lastName": "last",
        "password": "password",
        "email": "dup@email.com",
    })
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["error"]["message"] == "Duplicate username: u1"


def test_register_bad_email(client, seed):
    response = client.post("/auth/register", json={
        "username": "new",
        "firstName": "first",
        "lastName": "last",
        "password": "password",
        "email": "not-an-email",
    })
    assert response.status_code == status.HTTP_400_BAD_REQUEST


def test_registered_user_can_log_in(client, seed):
    client.post("/auth/register", json={
        "username": "new",
        "firstName": "first",
        "lastName": "last",
        "password": "password",
        "email": "new@email.com",
    })
    response = client.post("/auth/token", json={"username": "new", "password": "password"})
    assert response.status_code == status.HTTP_200_OK
