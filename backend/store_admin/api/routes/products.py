from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from store_admin.core.db import get_session
from store_admin.core.deps import get_current_user_id, get_validator
from store_admin.core.validation import FieldValidator
from store_admin.models.product import Product
from store_admin.schemas.product import ProductIn, ProductOut
from store_admin.services.catalog import products

router = APIRouter(prefix="/{store_id}/products", tags=["products"])


@router.post("", response_model=ProductOut)
async def create_product(
    store_id: str,
    payload: ProductIn,
    session: AsyncSession = Depends(get_session),
    validator: FieldValidator = Depends(get_validator),
    user_id: str = Depends(get_current_user_id),
):
    return await products.create(session, validator, user_id, store_id, payload)


@router.get("", response_model=List[ProductOut])
async def list_products(
    store_id: str,
    category_id: Optional[str] = Query(None, alias="categoryId"),
    size_id: Optional[str] = Query(None, alias="sizeId"),
    color_id: Optional[str] = Query(None, alias="colorId"),
    is_featured: Optional[bool] = Query(None, alias="isFeatured"),
    include_archived: bool = Query(False, alias="includeArchived"),
    session: AsyncSession = Depends(get_session),
):
    """Storefront listing; archived products are hidden unless asked for."""

    criteria = []
    if category_id:
        criteria.append(Product.category_id == category_id)
    if size_id:
        criteria.append(Product.size_id == size_id)
    if color_id:
        criteria.append(Product.color_id == color_id)
    if is_featured is not None:
        criteria.append(Product.is_featured == is_featured)
    if not include_archived:
        criteria.append(Product.is_archived.is_(False))
    return await products.list(session, store_id, criteria)


@router.get("/{product_id}", response_model=ProductOut)
async def get_product(store_id: str, product_id: str, session: AsyncSession = Depends(get_session)):
    return await products.get(session, store_id, product_id)


@router.patch("/{product_id}", response_model=ProductOut)
async def update_product(
    store_id: str,
    product_id: str,
    payload: ProductIn,
    session: AsyncSession = Depends(get_session),
    validator: FieldValidator = Depends(get_validator),
    user_id: str = Depends(get_current_user_id),
):
    return await products.update(session, validator, user_id, store_id, product_id, payload)


@router.delete("/{product_id}", response_model=ProductOut)
async def delete_product(
    store_id: str,
    product_id: str,
    session: AsyncSession = Depends(get_session),
    validator: FieldValidator = Depends(get_validator),
    user_id: str = Depends(get_current_user_id),
):
    return await products.delete(session, validator, user_id, store_id, product_id)
