import logging

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from app.core.config import get_settings
from app.core.errors import ErrorKind, ServiceError
from app.core.security import create_access_token, hash_password, verify_password
from app.models.common import utcnow
from app.models.user import User
from app.schemas.user import LoggedInUser, LoginResponse, UserCreate, UserUpdate

logger = logging.getLogger(__name__)


def _active():
    return select(User).where(User.deleted_at.is_(None))


def _normalize_email(email: str) -> str:
    return email.strip().lower()


def _email_taken(db: Session, email: str, exclude_id: int | None = None) -> bool:
    # Soft-deleted rows still hold the unique email.
    stmt = select(User.id).where(func.lower(User.email) == _normalize_email(email))
    if exclude_id is not None:
        stmt = stmt.where(User.id != exclude_id)
    return db.scalar(stmt) is not None


def find_all(db: Session) -> list[User]:
    return list(db.scalars(_active().order_by(User.id)).all())


def find_by_id(db: Session, user_id: int) -> User | None:
    return db.scalar(_active().where(User.id == user_id))


def find_by_email(db: Session, email: str) -> User | None:
    return db.scalar(_active().where(func.lower(User.email) == _normalize_email(email)))


def create(db: Session, payload: UserCreate) -> User:
    if _email_taken(db, payload.email):
        raise ServiceError(ErrorKind.ALREADY_EXISTS, "User already exists")
    user = User(
        name=payload.name,
        email=_normalize_email(payload.email),
        password_hash=hash_password(payload.password),
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info("Registered user id=%s", user.id)
    return user


def update(db: Session, user_id: int, payload: UserUpdate) -> User | None:
    user = find_by_id(db, user_id)
    if user is None:
        return None
    changes = payload.model_dump(exclude_unset=True, exclude_none=True)
    if "email" in changes:
        if _email_taken(db, changes["email"], exclude_id=user.id):
            raise ServiceError(ErrorKind.ALREADY_EXISTS, "User already exists")
        changes["email"] = _normalize_email(changes["email"])
    if "password" in changes:
        changes["password_hash"] = hash_password(changes.pop("password"))
    for key, value in changes.items():
        setattr(user, key, value)
    db.commit()
    db.refresh(user)
    logger.info("Updated user id=%s fields=%s", user.id, sorted(changes))
    return user


def delete(db: Session, user_id: int) -> User | None:
    user = find_by_id(db, user_id)
    if user is None:
        return None
    user.deleted_at = utcnow()
    db.commit()
    db.refresh(user)
    logger.info("Deleted user id=%s", user_id)
    return user


def login(db: Session, email: str, password: str) -> LoginResponse:
    user = find_by_email(db, email)
    if user is None or not verify_password(password, user.password_hash):
        logger.info("Rejected login attempt")
        raise ServiceError(ErrorKind.UNAUTHORIZED, "Not Authorized")
    roles = list(get_settings().login_roles)
    token = create_access_token(user, roles)
    logger.info("User id=%s logged in", user.id)
    return LoginResponse(
        user=LoggedInUser(id=user.id, name=user.name, email=user.email, roles=roles, token=token),
    )
