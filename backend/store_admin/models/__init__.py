"""ORM model exports for convenient imports elsewhere in the app."""

from store_admin.models.base import Base
from store_admin.models.billboard import Billboard
from store_admin.models.category import Category
from store_admin.models.color import Color
from store_admin.models.product import Image, Product
from store_admin.models.size import Size
from store_admin.models.store import Store

__all__ = [
    "Base",
    "Billboard",
    "Category",
    "Color",
    "Image",
    "Product",
    "Size",
    "Store",
]
