import time

import jwt
import pytest
from django.test import Client, RequestFactory

from accounts import identity as identity_module
from accounts.identity import (
    AnonymousIdentity,
    Identity,
    IdentityProviderError,
    authenticate,
    decode_session_token,
    get_session_token,
)
from tests.conftest import TEST_SECRET, make_token

pytestmark = pytest.mark.django_db

AUTH_TEST_URL = "/api/auth/test"


def bearer(token):
    return {"HTTP_AUTHORIZATION": f"Bearer {token}"}


# ########################################################
# GET /api/auth/test
# ########################################################


def test_auth_test_without_session_is_unauthorized(client):
    response = client.get(AUTH_TEST_URL)

    assert response.status_code == 401
    assert response.json() == {"error": "Unauthorized"}


def test_auth_test_with_bearer_token_returns_user_id(client):
    response = client.get(AUTH_TEST_URL, **bearer(make_token("user_123")))

    assert response.status_code == 200
    assert response.json() == {"success": True, "userId": "user_123"}


def test_auth_test_reads_session_cookie(client, identity_provider):
    client.cookies[identity_provider["SESSION_COOKIE"]] = make_token("user_cookie")

    response = client.get(AUTH_TEST_URL)

    assert response.status_code == 200
    assert response.json()["userId"] == "user_cookie"


@pytest.mark.parametrize(
    "token",
    [
        make_token("user_123", exp=int(time.time()) - 3600),
        make_token("user_123", iss="https://someone-else.test"),
        make_token("user_123", secret="another-secret-that-is-long-enough-000"),
        "not-a-jwt",
    ],
    ids=["expired", "wrong-issuer", "bad-signature", "garbage"],
)
def test_auth_test_rejects_invalid_tokens(client, token):
    response = client.get(AUTH_TEST_URL, **bearer(token))

    assert response.status_code == 401
    assert response.json() == {"error": "Unauthorized"}


def test_auth_test_reports_provider_failure(client, monkeypatch):
    def unreachable(token):
        raise IdentityProviderError("Could not fetch signing keys")

    monkeypatch.setattr(identity_module, "decode_session_token", unreachable)

    response = client.get(AUTH_TEST_URL, **bearer(make_token("user_123")))

    assert response.status_code == 401
    assert response.json() == {"error": "Authentication failed"}


def test_auth_test_only_allows_get(client):
    response = client.post(AUTH_TEST_URL)
    assert response.status_code == 405


# ########################################################
# Token handling
# ########################################################


def test_bearer_header_takes_precedence_over_cookie():
    request = RequestFactory().get("/", HTTP_AUTHORIZATION="Bearer header-token")
    request.COOKIES["__session"] = "cookie-token"

    assert get_session_token(request) == "header-token"


def test_missing_token_gives_anonymous_identity():
    request = RequestFactory().get("/")

    result = authenticate(request)

    assert isinstance(result, AnonymousIdentity)
    assert result.is_authenticated is False


def test_valid_token_gives_identity_with_session_id():
    request = RequestFactory().get("/", HTTP_AUTHORIZATION=f"Bearer {make_token('user_9')}")

    result = authenticate(request)

    assert isinstance(result, Identity)
    assert result.user_id == "user_9"
    assert result.session_id == "sess_test"
    assert result.is_authenticated is True


def test_token_without_subject_is_rejected():
    token = make_token("user_1")
    claims = jwt.decode(token, options={"verify_signature": False})
    claims.pop("sub")
    token = jwt.encode(claims, TEST_SECRET, algorithm="HS256")

    with pytest.raises(jwt.InvalidTokenError):
        decode_session_token(token)


def test_unlisted_authorized_party_is_rejected(settings):
    settings.IDENTITY_PROVIDER = {**settings.IDENTITY_PROVIDER, "AUTHORIZED_PARTIES": ["https://app.test"]}

    assert decode_session_token(make_token("user_1", azp="https://app.test"))["sub"] == "user_1"
    with pytest.raises(jwt.InvalidTokenError):
        decode_session_token(make_token("user_1", azp="https://evil.test"))


def test_unconfigured_provider_raises(settings):
    settings.IDENTITY_PROVIDER = {**settings.IDENTITY_PROVIDER, "JWKS_URL": "", "SECRET_KEY": ""}

    with pytest.raises(IdentityProviderError):
        decode_session_token(make_token("user_1"))


def test_jwks_connection_failure_raises_provider_error(settings, monkeypatch):
    settings.IDENTITY_PROVIDER = {**settings.IDENTITY_PROVIDER, "JWKS_URL": "https://identity.test/jwks"}

    class UnreachableJWKSClient:
        def get_signing_key_from_jwt(self, token):
            raise jwt.PyJWKClientConnectionError("connection refused")

    monkeypatch.setattr(identity_module, "get_jwks_client", lambda url: UnreachableJWKSClient())

    with pytest.raises(IdentityProviderError):
        decode_session_token(make_token("user_1"))


def test_identity_is_resolved_once_per_request(monkeypatch):
    calls = []
    original = identity_module.decode_session_token

    def counting(token):
        calls.append(token)
        return original(token)

    monkeypatch.setattr(identity_module, "decode_session_token", counting)
    client = Client(**bearer(make_token("user_1")))

    client.get(AUTH_TEST_URL)

    assert len(calls) == 1


def test_anonymous_claims_are_not_shared():
    first = AnonymousIdentity()
    first.claims["role"] = "admin"

    assert AnonymousIdentity().claims == {}
    assert first.claims == {}


# ########################################################
# Provider outages behind the admin gates
# ########################################################


@pytest.fixture
def provider_down(monkeypatch):
    def unreachable(token):
        raise IdentityProviderError("Could not fetch signing keys")

    monkeypatch.setattr(identity_module, "decode_session_token", unreachable)


def test_admin_page_sends_to_sign_in_when_provider_is_down(admin_client, provider_down, caplog):
    response = admin_client.get("/admin/sms/test")

    assert response.status_code == 302
    assert response["Location"] == "/sign-in"
    assert "Identity provider unavailable" in caplog.text


def test_admin_api_reports_provider_failure(admin_client, provider_down):
    response = admin_client.get("/api/result-approvals", {"term": "FIRST"})

    assert response.status_code == 401
    assert response.json() == {"error": "Authentication failed"}
