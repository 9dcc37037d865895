from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.core.security import Identity
from app.db.session import get_db
from app.models.user import User
from app.routers.deps import get_current_identity
from app.schemas.user import LoginRequest, LoginResponse, UserCreate, UserRead, UserUpdate
from app.services import users as user_service

router = APIRouter(prefix="/user", tags=["users"])


def _not_found(user_id: int) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"User with id {user_id} not found")


@router.post("", response_model=UserRead, status_code=status.HTTP_201_CREATED)
def register(payload: UserCreate, db: Session = Depends(get_db)) -> User:
    return user_service.create(db, payload)


@router.post("/login", response_model=LoginResponse)
def login(payload: LoginRequest, db: Session = Depends(get_db)) -> LoginResponse:
    return user_service.login(db, payload.email, payload.password)


@router.get("", response_model=list[UserRead])
def list_users(db: Session = Depends(get_db)) -> list[User]:
    return user_service.find_all(db)


@router.get("/profile", response_model=UserRead)
def profile(identity: Identity = Depends(get_current_identity), db: Session = Depends(get_db)) -> User:
    user = user_service.find_by_id(db, identity.id)
    if not user:
        raise _not_found(identity.id)
    return user


@router.get("/{user_id}", response_model=UserRead)
def get_user(user_id: int, db: Session = Depends(get_db)) -> User:
    user = user_service.find_by_id(db, user_id)
    if not user:
        raise _not_found(user_id)
    return user


@router.put("/{user_id}", response_model=UserRead)
def update_user(user_id: int, payload: UserUpdate, db: Session = Depends(get_db)) -> User:
    user = user_service.update(db, user_id, payload)
    if not user:
        raise _not_found(user_id)
    return user


@router.delete("/{user_id}", response_model=UserRead)
def delete_user(user_id: int, db: Session = Depends(get_db)) -> User:
    user = user_service.delete(db, user_id)
    if not user:
        raise _not_found(user_id)
    return user
