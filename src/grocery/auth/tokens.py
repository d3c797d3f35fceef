"""Bearer tokens: compact HS256-signed JWTs.

Claims: ``sub``, ``email``, ``role``, ``iss``, ``iat`` and ``exp``. Tokens are
verified against the shared secret, the configured issuer, their expiry and,
when one is configured, the allow-list of emails.
"""

import base64
import hashlib
import hmac
import json
import time

from grocery.auth.principal import Principal, Role
from grocery.errors import AuthenticationFailed
from grocery.settings import Settings, get_settings

_HEADER = {"alg": "HS256", "typ": "JWT"}


def _b64encode(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def _b64decode(segment: str) -> bytes:
    padded = segment + "=" * (-len(segment) % 4)
    return base64.urlsafe_b64decode(padded.encode("ascii"))


def _sign(signing_input: bytes, secret: str) -> str:
    digest = hmac.new(secret.encode("utf-8"), signing_input, hashlib.sha256).digest()
    return _b64encode(digest)


def issue_token(principal: Principal, settings: Settings | None = None, now: int | None = None) -> str:
    """Issue a signed token for ``principal``, valid for the configured TTL."""
    settings = settings or get_settings()
    issued_at = int(now if now is not None else time.time())
    claims = {
        "sub": principal.user_id,
        "email": principal.email,
        "role": principal.role.value if principal.role else None,
        "iss": settings.jwt_issuer,
        "iat": issued_at,
        "exp": issued_at + settings.token_ttl_seconds,
    }

    header_segment = _b64encode(json.dumps(_HEADER, separators=(",", ":")).encode("utf-8"))
    claims_segment = _b64encode(json.dumps(claims, separators=(",", ":")).encode("utf-8"))
    signing_input = f"{header_segment}.{claims_segment}".encode("ascii")
    return f"{header_segment}.{claims_segment}.{_sign(signing_input, settings.jwt_secret)}"


def verify_token(token: str, settings: Settings | None = None, now: int | None = None) -> Principal:
    """Verify ``token`` and return its principal, or raise `AuthenticationFailed`."""
    settings = settings or get_settings()

    parts = token.split(".") if token else []
    if len(parts) != 3:
        raise AuthenticationFailed("Malformed token")
    header_segment, claims_segment, signature = parts

    try:
        header = json.loads(_b64decode(header_segment))
        claims = json.loads(_b64decode(claims_segment))
    except (ValueError, UnicodeDecodeError) as exc:
        raise AuthenticationFailed("Malformed token") from exc

    if not isinstance(header, dict) or header.get("alg") != "HS256":
        raise AuthenticationFailed("Unsupported signing algorithm")

    expected = _sign(f"{header_segment}.{claims_segment}".encode("ascii"), settings.jwt_secret)
    if not hmac.compare_digest(expected, signature):
        raise AuthenticationFailed("Invalid token signature")

    if not isinstance(claims, dict) or claims.get("iss") != settings.jwt_issuer:
        raise AuthenticationFailed("Invalid token issuer")

    current = int(now if now is not None else time.time())
    exp = claims.get("exp")
    if not isinstance(exp, int) or exp <= current:
        raise AuthenticationFailed("Token has expired")

    user_id = claims.get("sub")
    email = claims.get("email") or ""
    if not user_id:
        raise AuthenticationFailed("Token has no subject")

    if settings.allowed_users and email not in settings.allowed_users:
        raise AuthenticationFailed("User is not allowed")

    try:
        role = Role(claims["role"]) if claims.get("role") else None
    except ValueError as exc:
        raise AuthenticationFailed(f"Unknown role {claims['role']!r}") from exc

    return Principal(user_id=str(user_id), email=email, role=role)
