"""Ownership guard for store-scoped mutations."""

from __future__ import annotations

from loguru import logger
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from store_admin.core.errors import BadRequest, Forbidden, Unauthenticated
from store_admin.models.store import Store


async def authorize_store(session: AsyncSession, user_id: str | None, store_id: str | None) -> Store:
    """Return the store when it belongs to ``user_id``.

    A store that does not exist and a store owned by someone else both fail
    with ``Forbidden`` so callers cannot probe for existing store ids.
    """

    if not user_id:
        raise Unauthenticated()
    if not store_id:
        raise BadRequest("storeId is required")

    store = await session.scalar(
        select(Store).where(Store.id == store_id, Store.user_id == user_id)
    )
    if store is None:
        logger.bind(store_id=store_id).warning("ownership_denied")
        raise Forbidden()
    return store
