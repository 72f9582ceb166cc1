# tests/api/test_auth_api.py

from urllib.parse import parse_qs, urlparse

from fastapi.testclient import TestClient

from norwedfilm.core.config import settings
from norwedfilm.core.security import SESSION_COOKIE_NAME
from norwedfilm.services import supabase_auth

from tests.utils.auth import get_api_key_headers, get_session_headers


def test_admin_requires_authentication(anon_client: TestClient):
    response = anon_client.get("/api/admin/projects")

    assert response.status_code == 401
    assert response.json()["error"]["category"] == "authentication_error"


def test_admin_rejects_forged_token(anon_client: TestClient):
    response = anon_client.get(
        "/api/admin/projects", headers={"Authorization": "Bearer not-a-jwt"}
    )
    assert response.status_code == 401


def test_admin_with_session_token(anon_client: TestClient):
    response = anon_client.get("/api/admin/projects", headers=get_session_headers())
    assert response.status_code == 200


def test_admin_with_api_key_header(anon_client: TestClient):
    response = anon_client.get("/api/admin/projects", headers=get_api_key_headers())
    assert response.status_code == 200


def test_admin_with_api_key_as_bearer(anon_client: TestClient):
    response = anon_client.get(
        "/api/admin/projects",
        headers={"Authorization": f"Bearer {settings.ADMIN_API_KEY}"},
    )
    assert response.status_code == 200


def test_auth_health_accepts_only_api_key(anon_client: TestClient):
    with_key = anon_client.get("/api/admin/auth/health", headers=get_api_key_headers())
    with_session = anon_client.get("/api/admin/auth/health", headers=get_session_headers())

    assert with_key.status_code == 200
    assert with_key.json()["auth"] == "api-key"
    assert with_session.status_code == 401


def test_current_user(anon_client: TestClient):
    response = anon_client.get("/api/auth/user", headers=get_session_headers())

    assert response.status_code == 200
    assert response.json()["email"] == "admin@norwedfilm.no"
    assert response.json()["firstName"] == "Nora"
    assert anon_client.get("/api/auth/user").status_code == 401


def test_supabase_session_exchange(anon_client: TestClient, monkeypatch):
    monkeypatch.setattr(
        supabase_auth.SupabaseAuthClient,
        "get_user",
        lambda self, token: {
            "id": "b7f1",
            "email": "Admin@Norwedfilm.no",
            "user_metadata": {"full_name": "Nora Berg", "avatar_url": "/nora.png"},
        },
    )

    response = anon_client.post(
        "/api/auth/supabase/session", json={"accessToken": "supabase-token"}
    )

    assert response.status_code == 200
    data = response.json()
    assert data["tokenType"] == "bearer"
    assert data["user"] == {
        "email": "admin@norwedfilm.no",
        "firstName": "Nora",
        "lastName": "Berg",
        "profileImageUrl": "/nora.png",
    }
    assert SESSION_COOKIE_NAME in response.cookies

    # The cookie alone now authenticates admin requests.
    assert anon_client.get("/api/admin/projects").status_code == 200


def test_supabase_session_email_not_allowed(anon_client: TestClient, monkeypatch):
    monkeypatch.setattr(
        supabase_auth.SupabaseAuthClient,
        "get_user",
        lambda self, token: {"id": "x", "email": "stranger@example.com"},
    )

    response = anon_client.post(
        "/api/auth/supabase/session", json={"accessToken": "supabase-token"}
    )

    assert response.status_code == 403


def test_logout_clears_cookie(anon_client: TestClient):
    response = anon_client.get("/api/logout", follow_redirects=False)

    assert response.status_code == 302
    assert response.headers["location"] == "/"
    assert SESSION_COOKIE_NAME in response.headers["set-cookie"]


def test_login_redirects_to_admin_login(anon_client: TestClient):
    response = anon_client.get("/api/login", follow_redirects=False)
    assert response.headers["location"] == "/admin/login"


def test_supabase_login_sanitises_next(anon_client: TestClient, monkeypatch):
    monkeypatch.setattr(settings, "SUPABASE_URL", "https://abc.supabase.co")
    monkeypatch.setattr(settings, "SUPABASE_ANON_KEY", "anon")

    response = anon_client.get(
        "/api/login/supabase", params={"next": "//evil.example"}, follow_redirects=False
    )

    location = urlparse(response.headers["location"])
    assert location.netloc == "abc.supabase.co"
    redirect_to = parse_qs(location.query)["redirect_to"][0]
    assert parse_qs(urlparse(redirect_to).query)["next"] == ["/admin"]


def test_supabase_login_not_configured(anon_client: TestClient, monkeypatch):
    monkeypatch.setattr(settings, "SUPABASE_URL", None)

    response = anon_client.get("/api/login/supabase", follow_redirects=False)

    assert "supabase_not_configured" in response.headers["location"]


def test_rotate_api_key(anon_client: TestClient):
    old_headers = get_api_key_headers()

    status = anon_client.get("/api/admin/api-key/status", headers=old_headers).json()
    assert status["source"] == "environment"

    rotated = anon_client.post("/api/admin/api-key/rotate", json={}, headers=old_headers)
    assert rotated.status_code == 200
    new_key = rotated.json()["apiKey"]
    assert new_key.startswith("nwf_")
    assert rotated.json()["rotatedBy"] == "api-key"

    assert anon_client.get("/api/admin/projects", headers=old_headers).status_code == 401
    assert (
        anon_client.get("/api/admin/projects", headers={"X-Api-Key": new_key}).status_code
        == 200
    )
    status = anon_client.get("/api/admin/api-key/status", headers={"X-Api-Key": new_key}).json()
    assert status["source"] == "database"
    assert "apiKey" not in status


def test_rotate_rejects_short_key(anon_client: TestClient):
    response = anon_client.post(
        "/api/admin/api-key/rotate", json={"apiKey": "short"}, headers=get_api_key_headers()
    )

    assert response.status_code == 400
    assert response.json()["error"]["field"] == "apiKey"
