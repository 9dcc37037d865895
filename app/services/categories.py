import logging

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from app.core.errors import ErrorKind, ServiceError
from app.models.category import Category
from app.models.product import Product
from app.schemas.category import CategoryCreate, CategoryUpdate

logger = logging.getLogger(__name__)


def find_all(db: Session) -> list[Category]:
    return list(db.scalars(select(Category).order_by(Category.id)).all())


def find_by_id(db: Session, category_id: int) -> Category | None:
    return db.get(Category, category_id)


def create(db: Session, payload: CategoryCreate) -> Category:
    category = Category(**payload.model_dump())
    db.add(category)
    db.commit()
    db.refresh(category)
    logger.info("Created category id=%s name=%s", category.id, category.name)
    return category


def update(db: Session, category_id: int, payload: CategoryUpdate) -> Category | None:
    category = find_by_id(db, category_id)
    if category is None:
        return None
    for key, value in payload.model_dump(exclude_unset=True).items():
        setattr(category, key, value)
    db.commit()
    db.refresh(category)
    logger.info("Updated category id=%s", category.id)
    return category


def count_products_referencing(db: Session, category_id: int) -> int:
    return db.scalar(select(func.count()).select_from(Product).where(Product.category_id == category_id)) or 0


def delete(db: Session, category_id: int) -> Category | None:
    """Delete a category that no product references.

    Returns ``None`` when the category does not exist and raises a
    ``CONFLICT`` service error, leaving the row untouched, while products
    still point at it.
    """
    category = find_by_id(db, category_id)
    if category is None:
        return None
    dependents = count_products_referencing(db, category_id)
    if dependents:
        logger.info("Refused to delete category id=%s with %s dependent products", category_id, dependents)
        raise ServiceError(
            ErrorKind.CONFLICT,
            f"Cannot delete category: {dependents} product(s) are still associated with it. "
            "Reassign or delete them first.",
        )
    db.delete(category)
    db.commit()
    logger.info("Deleted category id=%s", category_id)
    return category
