import logging

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.models.product import Product
from app.schemas.product import ProductCreate, ProductUpdate

logger = logging.getLogger(__name__)


def find_all(db: Session) -> list[Product]:
    return list(db.scalars(select(Product).order_by(Product.id)).all())


def find_by_id(db: Session, product_id: int) -> Product | None:
    return db.get(Product, product_id)


def find_by_category(db: Session, category_id: int) -> list[Product]:
    stmt = select(Product).where(Product.category_id == category_id).order_by(Product.id)
    return list(db.scalars(stmt).all())


def create(db: Session, payload: ProductCreate) -> Product:
    product = Product(**payload.model_dump())
    db.add(product)
    db.commit()
    db.refresh(product)
    logger.info("Created product id=%s category_id=%s", product.id, product.category_id)
    return product


def update(db: Session, product_id: int, payload: ProductUpdate) -> Product | None:
    product = find_by_id(db, product_id)
    if product is None:
        return None
    for key, value in payload.model_dump(exclude_unset=True).items():
        setattr(product, key, value)
    db.commit()
    db.refresh(product)
    logger.info("Updated product id=%s", product.id)
    return product


def delete(db: Session, product_id: int) -> Product | None:
    product = find_by_id(db, product_id)
    if product is None:
        return None
    db.delete(product)
    db.commit()
    logger.info("Deleted product id=%s", product_id)
    return product
