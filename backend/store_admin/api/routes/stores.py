from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from store_admin.core.db import get_session
from store_admin.core.deps import get_current_user_id, get_validator
from store_admin.core.validation import FieldValidator
from store_admin.schemas.store import StoreIn, StoreOut
from store_admin.services.catalog import stores

router = APIRouter(prefix="/stores", tags=["stores"])


@router.post("", response_model=StoreOut)
async def create_store(
    payload: StoreIn,
    session: AsyncSession = Depends(get_session),
    user_id: str = Depends(get_current_user_id),
):
    return await stores.create(session, user_id, payload)


@router.get("", response_model=List[StoreOut])
async def list_stores(
    session: AsyncSession = Depends(get_session),
    user_id: str = Depends(get_current_user_id),
):
    return await stores.list_for_user(session, user_id)


@router.get("/{store_id}", response_model=StoreOut)
async def get_store(
    store_id: str,
    session: AsyncSession = Depends(get_session),
    user_id: str = Depends(get_current_user_id),
):
    return await stores.get(session, user_id, store_id)


@router.patch("/{store_id}", response_model=StoreOut)
async def update_store(
    store_id: str,
    payload: StoreIn,
    session: AsyncSession = Depends(get_session),
    user_id: str = Depends(get_current_user_id),
):
    return await stores.update(session, user_id, store_id, payload)


@router.delete("/{store_id}", response_model=StoreOut)
async def delete_store(
    store_id: str,
    session: AsyncSession = Depends(get_session),
    validator: FieldValidator = Depends(get_validator),
    user_id: str = Depends(get_current_user_id),
):
    # Refused while billboards, categories, sizes, colors or products remain.
    return await stores.delete(session, validator, user_id, store_id)
