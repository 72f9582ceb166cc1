# tests/services/test_supabase_auth.py

from unittest.mock import MagicMock

import httpx
import pytest

from norwedfilm.core.config import settings
from norwedfilm.core.exceptions import AuthError, ExternalServiceError
from norwedfilm.services import supabase_auth
from norwedfilm.services.supabase_auth import (
    SupabaseAuthClient,
    is_allowed_admin_email,
    session_user_from_supabase,
)


@pytest.fixture
def supabase_configured(monkeypatch):
    monkeypatch.setattr(settings, "SUPABASE_URL", "https://abc.supabase.co/")
    monkeypatch.setattr(settings, "SUPABASE_ANON_KEY", "anon-key")


def _mock_http(monkeypatch, response=None, error=None):
    http_client = MagicMock()
    http_client.__enter__.return_value = http_client
    if error is not None:
        http_client.get.side_effect = error
    else:
        http_client.get.return_value = response
    monkeypatch.setattr(supabase_auth.httpx, "Client", lambda **kwargs: http_client)
    return http_client


def test_get_user(monkeypatch, supabase_configured):
    http_client = _mock_http(
        monkeypatch, httpx.Response(200, json={"id": "u1", "email": "a@b.no"})
    )

    data = SupabaseAuthClient().get_user("token-123")

    assert data["email"] == "a@b.no"
    url = http_client.get.call_args.args[0]
    headers = http_client.get.call_args.kwargs["headers"]
    assert url == "https://abc.supabase.co/auth/v1/user"
    assert headers["Authorization"] == "Bearer token-123"
    assert headers["apikey"] == "anon-key"


def test_rejected_token(monkeypatch, supabase_configured):
    _mock_http(monkeypatch, httpx.Response(401, json={"msg": "bad jwt"}))

    with pytest.raises(AuthError):
        SupabaseAuthClient().get_user("expired")


def test_upstream_failure(monkeypatch, supabase_configured):
    _mock_http(monkeypatch, error=httpx.ConnectError("boom"))

    with pytest.raises(ExternalServiceError) as exc_info:
        SupabaseAuthClient().get_user("token")

    assert exc_info.value.status_code == 502


def test_not_configured(monkeypatch):
    monkeypatch.setattr(settings, "SUPABASE_URL", None)

    with pytest.raises(ExternalServiceError):
        SupabaseAuthClient().get_user("token")


def test_session_user_from_full_name():
    user = session_user_from_supabase(
        {"email": "Nora@Example.no", "user_metadata": {"full_name": "Nora Marie Berg"}}
    )

    assert user.email == "nora@example.no"
    assert user.first_name == "Nora"
    assert user.last_name == "Marie Berg"


def test_session_user_requires_email():
    with pytest.raises(AuthError):
        session_user_from_supabase({"user_metadata": {}})


def test_admin_allow_list(monkeypatch):
    monkeypatch.setattr(settings, "ADMIN_EMAILS", "nora@norwedfilm.no, Lars@norwedfilm.no")

    assert is_allowed_admin_email("NORA@norwedfilm.no")
    assert is_allowed_admin_email("lars@norwedfilm.no")
    assert not is_allowed_admin_email("eve@example.com")

    monkeypatch.setattr(settings, "ADMIN_EMAILS", "")
    assert is_allowed_admin_email("anyone@example.com")


def test_authorize_url(supabase_configured):
    url = supabase_auth.build_authorize_url("https://norwedfilm.no/admin/login/callback?next=%2Fadmin")

    assert url.startswith("https://abc.supabase.co/auth/v1/authorize?provider=google")
    assert "redirect_to=https%3A%2F%2Fnorwedfilm.no%2Fadmin%2Flogin%2Fcallback" in url
