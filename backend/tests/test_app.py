from __future__ import annotations

import pytest

from factories import auth, count_rows, create_store
from store_admin.core.config import settings
from store_admin.models import Size

pytestmark = pytest.mark.anyio


async def test_healthz(client):
    response = await client.get("/api/healthz")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


async def test_readyz_pings_database(client):
    response = await client.get("/api/readyz")

    assert response.status_code == 200
    assert response.json() == {"ready": True}


async def test_errors_are_plain_text(client):
    response = await client.get("/api/nowhere")

    assert response.status_code == 404
    assert response.headers["content-type"].startswith("text/plain")


async def test_request_id_is_echoed(client):
    response = await client.get("/api/healthz", headers={"X-Request-ID": "req-123"})

    assert response.headers["x-request-id"] == "req-123"


async def test_malformed_json_is_a_bad_request(client):
    store = await create_store(client)

    response = await client.post(
        f"/api/{store['id']}/sizes",
        content=b"{not json",
        headers={**auth(), "Content-Type": "application/json"},
    )

    assert response.status_code == 400
    assert response.text == "Invalid request body"


async def test_invalid_token_is_unauthenticated(client):
    response = await client.post(
        "/api/stores", json={"name": "Loja"}, headers={"Authorization": "Bearer not-a-token"}
    )

    assert response.status_code == 401
    assert response.text == "Invalid token"


def _chunks(*parts: bytes):
    async def stream():
        for part in parts:
            yield part

    return stream()


async def test_declared_body_over_limit_is_rejected(client, monkeypatch):
    store = await create_store(client)
    monkeypatch.setattr(settings, "MAX_BODY_BYTES", 64)

    response = await client.post(
        f"/api/{store['id']}/sizes",
        json={"name": "Pequeno" * 10, "value": "S"},
        headers=auth(),
    )

    assert response.status_code == 413
    assert response.text == "Request entity too large"


async def test_chunked_body_over_limit_is_rejected(client, monkeypatch):
    store = await create_store(client)
    monkeypatch.setattr(settings, "MAX_BODY_BYTES", 64)

    response = await client.post(
        f"/api/{store['id']}/sizes",
        content=_chunks(b'{"name": "', b"Pequeno" * 10, b'", "value": "S"}'),
        headers={**auth(), "Content-Type": "application/json"},
    )

    assert "content-length" not in response.request.headers
    assert response.status_code == 413
    assert response.text == "Request entity too large"
    assert await count_rows(Size) == 0


async def test_chunked_body_under_limit_is_accepted(client, monkeypatch):
    store = await create_store(client)
    monkeypatch.setattr(settings, "MAX_BODY_BYTES", 64)

    response = await client.post(
        f"/api/{store['id']}/sizes",
        content=_chunks(b'{"name": "Pequeno", ', b'"value": "S"}'),
        headers={**auth(), "Content-Type": "application/json"},
    )

    assert response.status_code == 200
    assert response.json()["name"] == "Pequeno"
