"""
Session validation against the hosted identity provider.

The provider issues a short-lived signed JWT per session. It reaches us in
the session cookie (browser requests) or as a bearer token (API clients).
The ``sub`` claim is the provider's user id, which is also the primary key
of ``accounts.Admin``.
"""
import logging
from dataclasses import dataclass, field
from functools import lru_cache

import jwt
from django.conf import settings

logger = logging.getLogger(__name__)


class IdentityProviderError(Exception):
    """The provider could not be reached or returned unusable key material."""


@dataclass(frozen=True)
class Identity:
    user_id: str
    session_id: str | None = None
    claims: dict = field(default_factory=dict)

    is_authenticated = True


class AnonymousIdentity:
    user_id = None
    session_id = None
    is_authenticated = False

    @property
    def claims(self):
        return {}

    def __repr__(self):
        return "AnonymousIdentity"


@lru_cache(maxsize=4)
def get_jwks_client(jwks_url):
    return jwt.PyJWKClient(jwks_url, cache_keys=True)


def uses_bearer_token(request):
    return request.headers.get("Authorization", "").lower().startswith("bearer ")


def get_session_token(request):
    """Bearer header takes precedence over the session cookie."""
    if uses_bearer_token(request):
        return request.headers["Authorization"][7:].strip() or None
    return request.COOKIES.get(settings.IDENTITY_PROVIDER["SESSION_COOKIE"]) or None


def decode_session_token(token):
    """
    Verify ``token`` and return its claims.

    Raises ``jwt.InvalidTokenError`` for tokens that fail verification and
    ``IdentityProviderError`` when the signing key cannot be obtained.
    """
    conf = settings.IDENTITY_PROVIDER

    if conf["JWKS_URL"]:
        try:
            key = get_jwks_client(conf["JWKS_URL"]).get_signing_key_from_jwt(token).key
        except jwt.PyJWKClientConnectionError as exc:
            raise IdentityProviderError(f"Could not fetch signing keys: {exc}") from exc
        except jwt.PyJWKClientError as exc:
            # Unknown kid or malformed key set; treat as an invalid token.
            raise jwt.InvalidTokenError(str(exc)) from exc
    elif conf["SECRET_KEY"]:
        key = conf["SECRET_KEY"]
    else:
        raise IdentityProviderError("Identity provider is not configured")

    claims = jwt.decode(
        token,
        key,
        algorithms=conf["ALGORITHMS"],
        issuer=conf["ISSUER"] or None,
        leeway=conf["LEEWAY"],
        options={"require": ["exp", "sub"]},
    )

    parties = conf["AUTHORIZED_PARTIES"]
    azp = claims.get("azp")
    if parties and azp and azp not in parties:
        raise jwt.InvalidTokenError(f"Unauthorized party: {azp}")
    return claims


def authenticate(request):
    token = get_session_token(request)
    if not token:
        return AnonymousIdentity()

    try:
        claims = decode_session_token(token)
    except jwt.InvalidTokenError as exc:
        logger.info("Rejected session token: %s", exc)
        return AnonymousIdentity()

    return Identity(user_id=claims["sub"], session_id=claims.get("sid"), claims=claims)


def get_identity(request):
    if not hasattr(request, "_cached_identity"):
        request._cached_identity = authenticate(request)
    return request._cached_identity
