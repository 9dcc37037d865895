from datetime import datetime

from pydantic import BaseModel, EmailStr, Field


class UserCreate(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    email: EmailStr
    password: str = Field(min_length=8, max_length=128)


class UserUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    email: EmailStr | None = None
    password: str | None = Field(default=None, min_length=8, max_length=128)


class UserRead(BaseModel):
    id: int
    name: str
    email: EmailStr
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class LoginRequest(BaseModel):
    # Malformed addresses fall through to the lookup and fail as unauthorized.
    email: str
    password: str


class LoggedInUser(BaseModel):
    id: int
    name: str
    email: EmailStr
    roles: list[str]
    token: str


class LoginResponse(BaseModel):
    user: LoggedInUser
