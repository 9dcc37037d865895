from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.core.security import Identity
from app.db.session import get_db
from app.models.product import Product
from app.routers.deps import require_roles
from app.schemas.common import MessageResponse
from app.schemas.product import ProductCreate, ProductRead, ProductUpdate
from app.services import products as product_service

router = APIRouter(prefix="/products", tags=["products"])

require_product_admin = require_roles("admin")


@router.get("", response_model=list[ProductRead])
def list_products(db: Session = Depends(get_db)) -> list[Product]:
    return product_service.find_all(db)


@router.get("/category/{category_id}", response_model=list[ProductRead])
def list_products_by_category(category_id: int, db: Session = Depends(get_db)) -> list[Product]:
    return product_service.find_by_category(db, category_id)


@router.get("/{product_id}", response_model=ProductRead)
def get_product(product_id: int, db: Session = Depends(get_db)) -> Product:
    product = product_service.find_by_id(db, product_id)
    if not product:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Product not found")
    return product


@router.post("", response_model=ProductRead, status_code=status.HTTP_201_CREATED)
def create_product(
    payload: ProductCreate,
    db: Session = Depends(get_db),
    _admin: Identity = Depends(require_product_admin),
) -> Product:
    return product_service.create(db, payload)


@router.put("/{product_id}", response_model=ProductRead)
def update_product(
    product_id: int,
    payload: ProductUpdate,
    db: Session = Depends(get_db),
    _admin: Identity = Depends(require_product_admin),
) -> Product:
    product = product_service.update(db, product_id, payload)
    if not product:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Product not found")
    return product


@router.delete("/{product_id}", response_model=MessageResponse)
def delete_product(
    product_id: int,
    db: Session = Depends(get_db),
    _admin: Identity = Depends(require_product_admin),
) -> MessageResponse:
    if not product_service.delete(db, product_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Product not found")
    return MessageResponse(message="Product deleted successfully")
