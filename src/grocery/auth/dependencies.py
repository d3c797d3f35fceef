"""FastAPI dependencies that authenticate and authorize the caller."""

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from grocery.auth.principal import Principal
from grocery.auth.tokens import verify_token
from grocery.errors import AuthenticationFailed, PermissionDenied

_bearer = HTTPBearer(auto_error=False)


def get_principal(credentials: HTTPAuthorizationCredentials | None = Depends(_bearer)) -> Principal:
    """Resolve the bearer token into a `Principal` (401 when missing or invalid)."""
    if credentials is None or credentials.scheme.lower() != "bearer":
        raise AuthenticationFailed("Missing bearer token")
    return verify_token(credentials.credentials)


def require_admin(principal: Principal = Depends(get_principal)) -> Principal:
    if not principal.is_admin:
        raise PermissionDenied("Admin role required")
    return principal


def require_customer(principal: Principal = Depends(get_principal)) -> Principal:
    if not principal.is_customer:
        raise PermissionDenied("Customer role required")
    return principal
