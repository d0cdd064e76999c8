"""Resource handlers for every store-owned entity."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel

from store_admin.core.integrity import ForeignKeyDependents, StoreReference
from store_admin.models import Billboard, Category, Color, Image, Product, Size
from store_admin.models.base import utcnow
from store_admin.services.resources import StoreHandler, StoreResource


class ProductResource(StoreResource[Product]):
    """Products own their images; every write replaces the whole image list."""

    def values_from(self, payload: BaseModel) -> dict[str, Any]:
        values = payload.model_dump()
        values["images"] = [image["url"] for image in values["images"]]
        return values

    def apply(self, obj: Product, values: dict[str, Any]) -> None:
        urls = values.pop("images")
        super().apply(obj, values)
        now = utcnow()
        obj.images = [
            Image(url=url, position=position, created_at=now, updated_at=now)
            for position, url in enumerate(urls)
        ]


stores = StoreHandler(
    dependents=(
        ForeignKeyDependents("billboards", Billboard.store_id),
        ForeignKeyDependents("categories", Category.store_id),
        ForeignKeyDependents("sizes", Size.store_id),
        ForeignKeyDependents("colors", Color.store_id),
        ForeignKeyDependents("products", Product.store_id),
    ),
)

billboards = StoreResource(
    Billboard,
    entity="Billboard",
    dependents=(ForeignKeyDependents("categories", Category.billboard_id),),
)

categories = StoreResource(
    Category,
    entity="Category",
    references=(StoreReference("billboard_id", "billboardId", Billboard),),
    dependents=(ForeignKeyDependents("products", Product.category_id),),
)

sizes = StoreResource(
    Size,
    entity="Size",
    dependents=(ForeignKeyDependents("products", Product.size_id),),
)

colors = StoreResource(
    Color,
    entity="Color",
    dependents=(ForeignKeyDependents("products", Product.color_id),),
)

products = ProductResource(
    Product,
    entity="Product",
    references=(
        StoreReference("category_id", "categoryId", Category),
        StoreReference("size_id", "sizeId", Size),
        StoreReference("color_id", "colorId", Color),
    ),
)
