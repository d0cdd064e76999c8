"""Generic handlers for store-scoped resources.

Each handler composes the ownership guard and the integrity checks around
single-row reads and writes. Payloads arrive already validated by the
pydantic input models. Routes stay thin and only translate HTTP into these
calls.
"""

from __future__ import annotations

from typing import Any, Generic, Iterable, Sequence, TypeVar

from loguru import logger
from pydantic import BaseModel
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from store_admin.core.db_errors import raise_on_integrity_conflict
from store_admin.core.errors import BadRequest, Conflict, NotFound, Unauthenticated
from store_admin.core.integrity import (
    DependentCounter,
    StoreReference,
    ensure_no_dependents,
    ensure_references,
)
from store_admin.core.ownership import authorize_store
from store_admin.core.validation import FieldValidator
from store_admin.models.base import utcnow
from store_admin.models.store import Store

ModelT = TypeVar("ModelT")


async def _commit_delete(session: AsyncSession, obj: Any, entity: str) -> None:
    await session.delete(obj)
    try:
        await session.commit()
    except IntegrityError as exc:
        await session.rollback()
        raise_on_integrity_conflict(exc, entity)


class StoreResource(Generic[ModelT]):
    """Create/list/get/update/delete for one entity owned by a store."""

    def __init__(
        self,
        model: type[ModelT],
        *,
        entity: str,
        references: Sequence[StoreReference] = (),
        dependents: Sequence[DependentCounter] = (),
    ):
        self.model = model
        self.entity = entity
        self.references = tuple(references)
        self.dependents = tuple(dependents)

    def values_from(self, payload: BaseModel) -> dict[str, Any]:
        return payload.model_dump()

    def apply(self, obj: ModelT, values: dict[str, Any]) -> None:
        for key, value in values.items():
            setattr(obj, key, value)

    async def _find(self, session: AsyncSession, store_id: str, entity_id: str) -> ModelT | None:
        model: Any = self.model
        return await session.scalar(
            select(model).where(model.id == entity_id, model.store_id == store_id)
        )

    async def _authorized_values(
        self,
        session: AsyncSession,
        user_id: str | None,
        store_id: str,
        payload: BaseModel,
    ) -> dict[str, Any]:
        if not user_id:
            raise Unauthenticated()
        await authorize_store(session, user_id, store_id)
        return self.values_from(payload)

    async def list(
        self, session: AsyncSession, store_id: str, criteria: Iterable[Any] = ()
    ) -> list[ModelT]:
        if not store_id:
            raise BadRequest("storeId is required")
        model: Any = self.model
        stmt = (
            select(model)
            .where(model.store_id == store_id, *criteria)
            .order_by(model.created_at.desc())
        )
        return list((await session.scalars(stmt)).all())

    async def get(self, session: AsyncSession, store_id: str, entity_id: str) -> ModelT:
        obj = await self._find(session, store_id, entity_id)
        if obj is None:
            raise NotFound(f"{self.entity} not found")
        return obj

    async def create(
        self,
        session: AsyncSession,
        validator: FieldValidator,
        user_id: str | None,
        store_id: str,
        payload: BaseModel,
    ) -> ModelT:
        values = await self._authorized_values(session, user_id, store_id, payload)
        await ensure_references(session, validator, self.references, store_id, values)

        now = utcnow()
        obj = self.model(store_id=store_id, created_at=now, updated_at=now)
        self.apply(obj, values)
        session.add(obj)
        await session.commit()

        logger.bind(entity=self.entity, store_id=store_id, entity_id=obj.id).info(
            "resource_created"
        )
        return obj

    async def update(
        self,
        session: AsyncSession,
        validator: FieldValidator,
        user_id: str | None,
        store_id: str,
        entity_id: str,
        payload: BaseModel,
    ) -> ModelT:
        values = await self._authorized_values(session, user_id, store_id, payload)
        obj = await self.get(session, store_id, entity_id)
        await ensure_references(session, validator, self.references, store_id, values)

        self.apply(obj, values)
        obj.updated_at = utcnow()
        await session.commit()

        logger.bind(entity=self.entity, store_id=store_id, entity_id=entity_id).info(
            "resource_updated"
        )
        return obj

    async def delete(
        self,
        session: AsyncSession,
        validator: FieldValidator,
        user_id: str | None,
        store_id: str,
        entity_id: str,
    ) -> ModelT:
        if not user_id:
            raise Unauthenticated()
        await authorize_store(session, user_id, store_id)
        obj = await self.get(session, store_id, entity_id)
        try:
            await ensure_no_dependents(
                session, validator, self.dependents, self.entity, entity_id
            )
        except Conflict:
            logger.bind(entity=self.entity, store_id=store_id, entity_id=entity_id).warning(
                "resource_delete_blocked"
            )
            raise

        await _commit_delete(session, obj, self.entity)
        logger.bind(entity=self.entity, store_id=store_id, entity_id=entity_id).info(
            "resource_deleted"
        )
        return obj


class StoreHandler:
    """Stores are scoped to their owner rather than to a parent store."""

    entity = "Store"

    def __init__(self, *, dependents: Sequence[DependentCounter]):
        self.dependents = tuple(dependents)

    async def list_for_user(self, session: AsyncSession, user_id: str | None) -> list[Store]:
        if not user_id:
            raise Unauthenticated()
        stmt = select(Store).where(Store.user_id == user_id).order_by(Store.created_at.desc())
        return list((await session.scalars(stmt)).all())

    async def get(self, session: AsyncSession, user_id: str | None, store_id: str) -> Store:
        return await authorize_store(session, user_id, store_id)

    async def create(
        self, session: AsyncSession, user_id: str | None, payload: BaseModel
    ) -> Store:
        if not user_id:
            raise Unauthenticated()

        now = utcnow()
        store = Store(user_id=user_id, created_at=now, updated_at=now, **payload.model_dump())
        session.add(store)
        await session.commit()

        logger.bind(store_id=store.id).info("store_created")
        return store

    async def update(
        self,
        session: AsyncSession,
        user_id: str | None,
        store_id: str,
        payload: BaseModel,
    ) -> Store:
        if not user_id:
            raise Unauthenticated()
        store = await authorize_store(session, user_id, store_id)

        for key, value in payload.model_dump().items():
            setattr(store, key, value)
        store.updated_at = utcnow()
        await session.commit()

        logger.bind(store_id=store_id).info("store_updated")
        return store

    async def delete(
        self,
        session: AsyncSession,
        validator: FieldValidator,
        user_id: str | None,
        store_id: str,
    ) -> Store:
        store = await authorize_store(session, user_id, store_id)
        try:
            await ensure_no_dependents(session, validator, self.dependents, self.entity, store_id)
        except Conflict:
            logger.bind(entity=self.entity, store_id=store_id).warning("resource_delete_blocked")
            raise

        await _commit_delete(session, store, self.entity)
        logger.bind(store_id=store_id).info("store_deleted")
        return store
