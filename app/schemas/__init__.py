from app.schemas.category import CategoryCreate, CategoryRead, CategoryUpdate
from app.schemas.common import MessageResponse
from app.schemas.product import ProductCreate, ProductRead, ProductUpdate
from app.schemas.user import LoggedInUser, LoginRequest, LoginResponse, UserCreate, UserRead, UserUpdate

__all__ = [
    "CategoryCreate",
    "CategoryUpdate",
    "CategoryRead",
    "ProductCreate",
    "ProductUpdate",
    "ProductRead",
    "UserCreate",
    "UserUpdate",
    "UserRead",
    "LoginRequest",
    "LoginResponse",
    "LoggedInUser",
    "MessageResponse",
]
