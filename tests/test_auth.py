# tests/test_auth.py - Authentication & session tests
from datetime import timedelta

from taskpulse.utils.security import create_access_token
from tests.conftest import TEST_PASSWORD, get_auth_headers


class TestRegistration:
    def test_register_success(self, client):
        res = client.post("/api/auth/register", json={
            "firstName": "New",
            "lastName": "Person",
            "email": "new.person@taskpulse.com",
            "password": "secret-pass",
        })
        assert res.status_code == 201
        data = res.json()
        assert data["token"]
        assert data["userEmail"] == "new.person@taskpulse.com"
        assert data["user"]["role"] == "employee"
        assert data["user"]["avatar"] == "https://ui-avatars.com/api/?name=New+Person"
        assert "passwordHash" not in data["user"]

    def test_register_token_is_usable(self, client):
        res = client.post("/api/auth/register", json={
            "firstName": "Token",
            "lastName": "Holder",
            "email": "token@taskpulse.com",
            "password": "secret-pass",
        })
        token = res.json()["token"]
        me = client.get("/api/user", headers={"Authorization": f"Bearer {token}"})
        assert me.status_code == 200
        assert me.json()["user"]["email"] == "token@taskpulse.com"

    def test_register_duplicate_email_is_case_insensitive(self, client, test_user):
        res = client.post("/api/auth/register", json={
            "firstName": "Alice",
            "lastName": "Again",
            "email": "ALICE@taskpulse.com",
            "password": "secret-pass",
        })
        assert res.status_code == 400
        assert res.json()["message"] == "Email already in use"

    def test_register_missing_fields(self, client):
        res = client.post("/api/auth/register", json={"email": "x@taskpulse.com"})
        assert res.status_code == 400
        assert res.json()["message"] == "All fields are required"

    def test_register_invalid_email(self, client):
        res = client.post("/api/auth/register", json={
            "firstName": "Bad",
            "lastName": "Email",
            "email": "not-an-email",
            "password": "secret-pass",
        })
        assert res.status_code == 400


class TestLogin:
    def test_login_success(self, client, test_user):
        res = client.post("/api/auth/login", json={"email": test_user.email, "password": TEST_PASSWORD})
        assert res.status_code == 200
        data = res.json()
        assert data["user"]["id"] == test_user.id
        assert data["userEmail"] == test_user.email
        assert data["token"]

    def test_login_seeded_admin(self, client):
        res = client.post("/api/auth/login", json={"email": "admin@gmail.com", "password": "admin123"})
        assert res.status_code == 200
        assert res.json()["user"]["role"] == "admin"
        assert res.json()["user"]["id"] == "1"

    def test_login_email_case_insensitive(self, client, test_user):
        res = client.post("/api/auth/login", json={"email": "Alice@TaskPulse.com", "password": TEST_PASSWORD})
        assert res.status_code == 200

    def test_wrong_password_and_unknown_email_look_the_same(self, client, test_user):
        wrong = client.post("/api/auth/login", json={"email": test_user.email, "password": "nope"})
        unknown = client.post("/api/auth/login", json={"email": "ghost@taskpulse.com", "password": "nope"})
        assert wrong.status_code == unknown.status_code == 401
        assert wrong.json() == unknown.json() == {"message": "Invalid email or password"}

    def test_login_missing_password(self, client, test_user):
        res = client.post("/api/auth/login", json={"email": test_user.email})
        assert res.status_code == 400
        assert res.json()["message"] == "All fields are required"

    def test_login_empty_password(self, client, test_user):
        res = client.post("/api/auth/login", json={"email": test_user.email, "password": ""})
        assert res.status_code == 400


class TestAuthorization:
    def test_missing_token(self, client):
        res = client.get("/api/tasks")
        assert res.status_code == 401
        assert "message" in res.json()

    def test_garbage_token(self, client):
        res = client.get("/api/tasks", headers={"Authorization": "Bearer not-a-jwt"})
        assert res.status_code == 401
        assert res.json()["message"] == "Could not validate credentials"

    def test_expired_token(self, client, test_user):
        token = create_access_token({"sub": test_user.id}, expires_delta=timedelta(seconds=-5))
        res = client.get("/api/tasks", headers={"Authorization": f"Bearer {token}"})
        assert res.status_code == 401

    def test_token_for_deleted_user(self, client, store, test_user):
        headers = get_auth_headers(test_user)
        store.users.delete(test_user.id)
        res = client.get("/api/user", headers=headers)
        assert res.status_code == 401

    def test_public_endpoints(self, client):
        assert client.get("/").status_code == 200
        health = client.get("/health")
        assert health.status_code == 200
        assert health.json()["status"] == "healthy"


class TestProfile:
    def test_current_user(self, client, test_user):
        res = client.get("/api/user", headers=get_auth_headers(test_user))
        assert res.status_code == 200
        user = res.json()["user"]
        assert user["firstName"] == "Alice"
        assert "passwordHash" not in user

    def test_list_users(self, client, test_user, other_user):
        res = client.get("/api/users", headers=get_auth_headers(test_user))
        assert res.status_code == 200
        emails = {u["email"] for u in res.json()}
        assert {"admin@gmail.com", test_user.email, other_user.email} <= emails
        assert all("passwordHash" not in u for u in res.json())

    def test_profile_includes_notifications(self, client, test_user):
        res = client.get("/api/profile", headers=get_auth_headers(test_user))
        assert res.status_code == 200
        assert res.json()["notifications"] == []

    def test_update_profile(self, client, test_user):
        headers = get_auth_headers(test_user)
        res = client.put("/api/profile", json={"firstName": "Alicia"}, headers=headers)
        assert res.status_code == 200
        assert res.json()["firstName"] == "Alicia"
        assert res.json()["lastName"] == "Walker"
        assert client.get("/api/user", headers=headers).json()["user"]["firstName"] == "Alicia"

    def test_update_profile_rejects_role_change(self, client, test_user):
        res = client.put("/api/profile", json={"role": "admin"}, headers=get_auth_headers(test_user))
        assert res.status_code == 400
        assert "role" in res.json()["message"]
