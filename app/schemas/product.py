from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from app.schemas.category import CategoryRead


class ProductCreate(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    description: str
    price: float = Field(ge=0)
    image: str | None = Field(default=None, max_length=500)
    stock: int = Field(ge=0)
    category_id: int


class ProductUpdate(BaseModel):
    """All fields optional; only the ones sent are applied."""

    name: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = None
    price: float | None = Field(default=None, ge=0)
    image: str | None = Field(default=None, max_length=500)
    stock: int | None = Field(default=None, ge=0)
    category_id: int | None = None

    @field_validator("name", "description", "price", "stock", "category_id", mode="before")
    @classmethod
    def reject_null(cls, value):
        if value is None:
            raise ValueError("must not be null")
        return value


class ProductRead(BaseModel):
    id: int
    name: str
    description: str
    price: float
    image: str | None
    stock: int
    category_id: int
    category: CategoryRead | None = None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
