import logging

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.core.config import Settings, get_settings
from app.core.security import Identity, TokenError, TokenExpiredError, verify_token

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)

NOT_AUTHORIZED = "Not Authorized"
TOKEN_EXPIRED = "Token Expired"
FORBIDDEN = "Forbidden: Insufficient permission"


def _unauthorized(detail: str = NOT_AUTHORIZED) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_optional_identity(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> Identity | None:
    """Verify the bearer token when one is sent; no header yields ``None``."""
    if credentials is None:
        return None
    try:
        return verify_token(credentials.credentials)
    except TokenExpiredError as exc:
        raise _unauthorized(TOKEN_EXPIRED) from exc
    except TokenError as exc:
        logger.info("Rejected bearer token: %s", exc)
        raise _unauthorized() from exc


def get_current_identity(identity: Identity | None = Depends(get_optional_identity)) -> Identity:
    if identity is None:
        raise _unauthorized()
    return identity


def require_roles(*allowed_roles: str):
    def _checker(identity: Identity | None = Depends(get_optional_identity)) -> Identity:
        if identity is None:
            raise _unauthorized()
        if not set(allowed_roles) & set(identity.roles):
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=FORBIDDEN)
        return identity

    return _checker


def require_admin(
    identity: Identity | None = Depends(get_optional_identity),
    settings: Settings = Depends(get_settings),
) -> Identity:
    if identity is None:
        raise _unauthorized()
    admins = {email.lower() for email in settings.admin_emails}
    if identity.email.lower() not in admins:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=FORBIDDEN)
    return identity
