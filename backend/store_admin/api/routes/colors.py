from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from store_admin.core.db import get_session
from store_admin.core.deps import get_current_user_id, get_validator
from store_admin.core.validation import FieldValidator
from store_admin.schemas.color import ColorIn, ColorOut
from store_admin.services.catalog import colors

router = APIRouter(prefix="/{store_id}/colors", tags=["colors"])


@router.post("", response_model=ColorOut)
async def create_color(
    store_id: str,
    payload: ColorIn,
    session: AsyncSession = Depends(get_session),
    validator: FieldValidator = Depends(get_validator),
    user_id: str = Depends(get_current_user_id),
):
    return await colors.create(session, validator, user_id, store_id, payload)


@router.get("", response_model=List[ColorOut])
async def list_colors(store_id: str, session: AsyncSession = Depends(get_session)):
    return await colors.list(session, store_id)


@router.get("/{color_id}", response_model=ColorOut)
async def get_color(store_id: str, color_id: str, session: AsyncSession = Depends(get_session)):
    return await colors.get(session, store_id, color_id)


@router.patch("/{color_id}", response_model=ColorOut)
async def update_color(
    store_id: str,
    color_id: str,
    payload: ColorIn,
    session: AsyncSession = Depends(get_session),
    validator: FieldValidator = Depends(get_validator),
    user_id: str = Depends(get_current_user_id),
):
    return await colors.update(session, validator, user_id, store_id, color_id, payload)


@router.delete("/{color_id}", response_model=ColorOut)
async def delete_color(
    store_id: str,
    color_id: str,
    session: AsyncSession = Depends(get_session),
    validator: FieldValidator = Depends(get_validator),
    user_id: str = Depends(get_current_user_id),
):
    return await colors.delete(session, validator, user_id, store_id, color_id)
