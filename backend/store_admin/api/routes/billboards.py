from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from store_admin.core.db import get_session
from store_admin.core.deps import get_current_user_id, get_validator
from store_admin.core.validation import FieldValidator
from store_admin.schemas.billboard import BillboardIn, BillboardOut
from store_admin.services.catalog import billboards

router = APIRouter(prefix="/{store_id}/billboards", tags=["billboards"])


@router.post("", response_model=BillboardOut)
async def create_billboard(
    store_id: str,
    payload: BillboardIn,
    session: AsyncSession = Depends(get_session),
    validator: FieldValidator = Depends(get_validator),
    user_id: str = Depends(get_current_user_id),
):
    return await billboards.create(session, validator, user_id, store_id, payload)


@router.get("", response_model=List[BillboardOut])
async def list_billboards(store_id: str, session: AsyncSession = Depends(get_session)):
    return await billboards.list(session, store_id)


@router.get("/{billboard_id}", response_model=BillboardOut)
async def get_billboard(store_id: str, billboard_id: str, session: AsyncSession = Depends(get_session)):
    return await billboards.get(session, store_id, billboard_id)


@router.patch("/{billboard_id}", response_model=BillboardOut)
async def update_billboard(
    store_id: str,
    billboard_id: str,
    payload: BillboardIn,
    session: AsyncSession = Depends(get_session),
    validator: FieldValidator = Depends(get_validator),
    user_id: str = Depends(get_current_user_id),
):
    return await billboards.update(session, validator, user_id, store_id, billboard_id, payload)


@router.delete("/{billboard_id}", response_model=BillboardOut)
async def delete_billboard(
    store_id: str,
    billboard_id: str,
    session: AsyncSession = Depends(get_session),
    validator: FieldValidator = Depends(get_validator),
    user_id: str = Depends(get_current_user_id),
):
    return await billboards.delete(session, validator, user_id, store_id, billboard_id)
