import time

import jwt
import pytest
import requests
from django.test import Client

from accounts.models import Admin
from core.models import Grade, SchoolClass
from school.models import School

TEST_SECRET = "test-identity-secret-0123456789abcdef"
TEST_ISSUER = "https://identity.schoolhub.test"
CSRF_TOKEN = "abcdefghijklmnopqrstuvwxyz012345"


def make_token(user_id, secret=TEST_SECRET, **overrides):
    now = int(time.time())
    claims = {
        "sub": user_id,
        "sid": "sess_test",
        "iss": TEST_ISSUER,
        "iat": now,
        "nbf": now,
        "exp": now + 300,
    }
    claims.update(overrides)
    return jwt.encode(claims, secret, algorithm="HS256")


class FakeResponse:
    def __init__(self, status_code=200, payload=None, content=b"", headers=None):
        self.status_code = status_code
        self.ok = 200 <= status_code < 300
        self._payload = payload
        self.content = content
        self.headers = headers or {}

    def json(self):
        if self._payload is None:
            raise ValueError("No JSON object could be decoded")
        return self._payload

    def raise_for_status(self):
        if not self.ok:
            raise requests.HTTPError(f"{self.status_code} Error")


@pytest.fixture(autouse=True)
def identity_provider(settings):
    settings.IDENTITY_PROVIDER = {
        **settings.IDENTITY_PROVIDER,
        "JWKS_URL": "",
        "ISSUER": TEST_ISSUER,
        "SECRET_KEY": TEST_SECRET,
        "ALGORITHMS": ["HS256"],
        "AUTHORIZED_PARTIES": [],
        "HOSTED_SIGN_IN_URL": "https://accounts.schoolhub.test/sign-in",
    }
    settings.HUBTEL_CLIENT_ID = "hubtel-client"
    settings.HUBTEL_CLIENT_SECRET = "hubtel-secret"
    settings.HUBTEL_SMS_FROM = "SchoolApp"
    return settings.IDENTITY_PROVIDER


@pytest.fixture
def token_for():
    return make_token


@pytest.fixture
def school(db):
    return School.objects.create(name="Greenwood Academy", email="office@greenwood.test")


@pytest.fixture
def other_school(db):
    return School.objects.create(name="Hillside College")


@pytest.fixture
def admin(school):
    return Admin.objects.create(
        id="user_admin_1", username="greenwood_admin", name="Ama", surname="Mensah", school=school
    )


@pytest.fixture
def grade(school):
    return Grade.objects.create(level=1, school=school)


@pytest.fixture
def school_class(grade, school):
    return SchoolClass.objects.create(name="1A", grade=grade, school=school)


@pytest.fixture
def admin_client(admin):
    return Client(HTTP_AUTHORIZATION=f"Bearer {make_token(admin.pk)}")


@pytest.fixture
def stranger_client(db):
    """Signed in with the identity provider but not an admin of any school."""
    return Client(HTTP_AUTHORIZATION=f"Bearer {make_token('user_stranger')}")


@pytest.fixture
def bearer_csrf_client(admin):
    """Bearer-token API client with Django's CSRF checks switched on."""
    return Client(enforce_csrf_checks=True, HTTP_AUTHORIZATION=f"Bearer {make_token(admin.pk)}")


@pytest.fixture
def cookie_client(admin, settings):
    """Browser-style client: session cookie and a CSRF cookie, CSRF checks on."""
    client = Client(enforce_csrf_checks=True)
    client.cookies[settings.IDENTITY_PROVIDER["SESSION_COOKIE"]] = make_token(admin.pk)
    client.cookies[settings.CSRF_COOKIE_NAME] = CSRF_TOKEN
    return client
