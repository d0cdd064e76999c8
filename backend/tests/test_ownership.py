import pytest

from store_admin.core.db import SessionLocal
from store_admin.core.errors import BadRequest, Forbidden, Unauthenticated
from store_admin.core.ownership import authorize_store
from store_admin.models import Store

pytestmark = pytest.mark.anyio


async def _seed_store(user_id: str) -> str:
    async with SessionLocal() as session:
        store = Store(name="Loja", user_id=user_id)
        session.add(store)
        await session.commit()
        return store.id


async def test_owner_gets_the_store(db):
    store_id = await _seed_store("alice")

    async with SessionLocal() as session:
        store = await authorize_store(session, "alice", store_id)

    assert store.id == store_id
    assert store.user_id == "alice"


async def test_not_owned_and_missing_fail_the_same_way(db):
    store_id = await _seed_store("alice")

    async with SessionLocal() as session:
        with pytest.raises(Forbidden) as not_owned:
            await authorize_store(session, "bob", store_id)
        with pytest.raises(Forbidden) as missing:
            await authorize_store(session, "alice", "no-such-store")

    assert not_owned.value.message == missing.value.message


async def test_identity_and_store_id_are_required(db):
    async with SessionLocal() as session:
        with pytest.raises(Unauthenticated):
            await authorize_store(session, "", "store")
        with pytest.raises(BadRequest):
            await authorize_store(session, "alice", "")
