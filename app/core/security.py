from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any

from jose import ExpiredSignatureError, JWTError, jwt
from passlib.context import CryptContext

from app.core.config import get_settings

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


class TokenError(ValueError):
    pass


class TokenExpiredError(TokenError):
    pass


class InvalidTokenError(TokenError):
    pass


@dataclass(frozen=True)
class Identity:
    """Authenticated caller, as asserted by a verified token."""

    id: int
    email: str
    name: str
    roles: list[str] = field(default_factory=list)

    @classmethod
    def from_claims(cls, claims: dict[str, Any]) -> "Identity":
        user = claims.get("user")
        if not isinstance(user, dict) or "id" not in user or "email" not in user:
            raise InvalidTokenError("Token does not carry a user")
        try:
            user_id = int(user["id"])
        except (TypeError, ValueError) as exc:
            raise InvalidTokenError("Token carries a malformed user id") from exc
        return cls(
            id=user_id,
            email=str(user["email"]),
            name=str(user.get("name") or ""),
            roles=list(user.get("roles") or []),
        )


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(password: str, hashed_password: str) -> bool:
    return pwd_context.verify(password, hashed_password)


def create_access_token(user: Any, roles: list[str], expires_delta: timedelta | None = None) -> str:
    settings = get_settings()
    expire = datetime.now(timezone.utc) + (expires_delta or timedelta(minutes=settings.access_token_expire_minutes))
    payload = {
        "sub": str(user.id),
        "user": {"id": user.id, "email": user.email, "name": user.name, "roles": list(roles)},
        "exp": expire,
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> dict[str, Any]:
    settings = get_settings()
    try:
        return jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except ExpiredSignatureError as exc:
        raise TokenExpiredError("Token expired") from exc
    except JWTError as exc:
        raise InvalidTokenError("Invalid token") from exc


def verify_token(token: str) -> Identity:
    return Identity.from_claims(decode_access_token(token))
