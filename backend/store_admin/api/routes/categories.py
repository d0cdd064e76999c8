from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from store_admin.core.db import get_session
from store_admin.core.deps import get_current_user_id, get_validator
from store_admin.core.validation import FieldValidator
from store_admin.schemas.category import CategoryIn, CategoryOut
from store_admin.services.catalog import categories

router = APIRouter(prefix="/{store_id}/categories", tags=["categories"])


@router.post("", response_model=CategoryOut)
async def create_category(
    store_id: str,
    payload: CategoryIn,
    session: AsyncSession = Depends(get_session),
    validator: FieldValidator = Depends(get_validator),
    user_id: str = Depends(get_current_user_id),
):
    return await categories.create(session, validator, user_id, store_id, payload)


@router.get("", response_model=List[CategoryOut])
async def list_categories(store_id: str, session: AsyncSession = Depends(get_session)):
    return await categories.list(session, store_id)


@router.get("/{category_id}", response_model=CategoryOut)
async def get_category(store_id: str, category_id: str, session: AsyncSession = Depends(get_session)):
    return await categories.get(session, store_id, category_id)


@router.patch("/{category_id}", response_model=CategoryOut)
async def update_category(
    store_id: str,
    category_id: str,
    payload: CategoryIn,
    session: AsyncSession = Depends(get_session),
    validator: FieldValidator = Depends(get_validator),
    user_id: str = Depends(get_current_user_id),
):
    return await categories.update(session, validator, user_id, store_id, category_id, payload)


@router.delete("/{category_id}", response_model=CategoryOut)
async def delete_category(
    store_id: str,
    category_id: str,
    session: AsyncSession = Depends(get_session),
    validator: FieldValidator = Depends(get_validator),
    user_id: str = Depends(get_current_user_id),
):
    return await categories.delete(session, validator, user_id, store_id, category_id)
