"""Application-level referential integrity.

Foreign keys are declared in the ORM metadata but not relied upon at the
database level, so references are checked before writes and dependents are
counted before deletes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Protocol

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import InstrumentedAttribute

from store_admin.core.errors import BadRequest, Conflict
from store_admin.core.validation import FieldValidator


class DependentCounter(Protocol):
    """Counts rows that still point at a parent row."""

    label: str

    async def count(self, session: AsyncSession, parent_id: str) -> int: ...


@dataclass(frozen=True, slots=True)
class ForeignKeyDependents:
    """Default counter: rows of a model whose ``column`` equals the parent id."""

    label: str
    column: InstrumentedAttribute[Any]

    async def count(self, session: AsyncSession, parent_id: str) -> int:
        stmt = (
            select(func.count())
            .select_from(self.column.class_)
            .where(self.column == parent_id)
        )
        return int((await session.execute(stmt)).scalar_one())


@dataclass(frozen=True, slots=True)
class StoreReference:
    """A payload field that must name a row of ``model`` in the same store."""

    field: str  # attribute name on the payload/model
    label: str  # JSON name used in messages
    model: Any


async def ensure_references(
    session: AsyncSession,
    validator: FieldValidator,
    references: Iterable[StoreReference],
    store_id: str,
    values: Mapping[str, Any],
) -> None:
    for ref in references:
        target_id = values.get(ref.field)
        found = await session.scalar(
            select(ref.model.id).where(ref.model.id == target_id, ref.model.store_id == store_id)
        )
        if found is None:
            raise BadRequest(validator.message("reference_missing", field=ref.label))


async def ensure_no_dependents(
    session: AsyncSession,
    validator: FieldValidator,
    counters: Iterable[DependentCounter],
    entity: str,
    parent_id: str,
) -> None:
    blocking = []
    for counter in counters:
        if await counter.count(session, parent_id):
            blocking.append(counter.label)
    if blocking:
        raise Conflict(
            validator.message("in_use", entity=entity, dependents=", ".join(blocking))
        )
