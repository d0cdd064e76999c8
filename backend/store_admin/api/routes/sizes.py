from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from store_admin.core.db import get_session
from store_admin.core.deps import get_current_user_id, get_validator
from store_admin.core.validation import FieldValidator
from store_admin.schemas.size import SizeIn, SizeOut
from store_admin.services.catalog import sizes

router = APIRouter(prefix="/{store_id}/sizes", tags=["sizes"])


@router.post("", response_model=SizeOut)
async def create_size(
    store_id: str,
    payload: SizeIn,
    session: AsyncSession = Depends(get_session),
    validator: FieldValidator = Depends(get_validator),
    user_id: str = Depends(get_current_user_id),
):
    return await sizes.create(session, validator, user_id, store_id, payload)


@router.get("", response_model=List[SizeOut])
async def list_sizes(store_id: str, session: AsyncSession = Depends(get_session)):
    return await sizes.list(session, store_id)


@router.get("/{size_id}", response_model=SizeOut)
async def get_size(store_id: str, size_id: str, session: AsyncSession = Depends(get_session)):
    return await sizes.get(session, store_id, size_id)


@router.patch("/{size_id}", response_model=SizeOut)
async def update_size(
    store_id: str,
    size_id: str,
    payload: SizeIn,
    session: AsyncSession = Depends(get_session),
    validator: FieldValidator = Depends(get_validator),
    user_id: str = Depends(get_current_user_id),
):
    return await sizes.update(session, validator, user_id, store_id, size_id, payload)


@router.delete("/{size_id}", response_model=SizeOut)
async def delete_size(
    store_id: str,
    size_id: str,
    session: AsyncSession = Depends(get_session),
    validator: FieldValidator = Depends(get_validator),
    user_id: str = Depends(get_current_user_id),
):
    return await sizes.delete(session, validator, user_id, store_id, size_id)
