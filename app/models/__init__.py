from app.models.category import Category
from app.models.product import Product
from app.models.user import User

__all__ = ["User", "Category", "Product"]
