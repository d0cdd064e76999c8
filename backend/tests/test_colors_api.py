from __future__ import annotations

import pytest

from factories import auth, count_rows, create_color, create_store
from store_admin.models import Color

pytestmark = pytest.mark.anyio


@pytest.mark.parametrize("value", ["#add6e8", "#ABC", "#000000"])
async def test_hex_values_are_accepted(client, value):
    store = await create_store(client)

    created = await create_color(client, store["id"], value=value)

    assert created["value"] == value


@pytest.mark.parametrize("value", ["add6e8", "#add6e", "#GGGGGG", "#add6e8 ", "#add6e8\n"])
async def test_non_hex_values_are_rejected(client, value):
    store = await create_store(client)

    response = await client.post(
        f"/api/{store['id']}/colors", json={"name": "Azul", "value": value}, headers=auth()
    )

    assert response.status_code == 400
    assert response.text == "value must be a valid HEX code (#add6e8)"
    assert await count_rows(Color) == 0


async def test_color_round_trip_keeps_fields(client):
    store = await create_store(client)
    created = await create_color(client, store["id"], name="Azul claro", value="#add6e8")

    fetched = (await client.get(f"/api/{store['id']}/colors/{created['id']}")).json()

    assert fetched["name"] == "Azul claro"
    assert fetched["value"] == "#add6e8"
    assert fetched["storeId"] == store["id"]
    assert fetched["createdAt"] <= fetched["updatedAt"]


async def test_repeating_an_update_only_advances_updated_at(client):
    store = await create_store(client)
    color = await create_color(client, store["id"])
    url = f"/api/{store['id']}/colors/{color['id']}"
    fields = {"name": "Vermelho", "value": "#ff0000"}

    first = (await client.patch(url, json=fields, headers=auth())).json()
    second = (await client.patch(url, json=fields, headers=auth())).json()

    for key in ("id", "storeId", "name", "value", "createdAt"):
        assert first[key] == second[key]
    assert second["updatedAt"] >= first["updatedAt"]
    assert first["createdAt"] == color["createdAt"]


async def test_update_is_validated_like_create(client):
    store = await create_store(client)
    color = await create_color(client, store["id"])

    response = await client.patch(
        f"/api/{store['id']}/colors/{color['id']}",
        json={"name": "Az", "value": "#ff0000"},
        headers=auth(),
    )

    assert response.status_code == 400
    assert response.text == "name must contain at least 3 character(s)"
    unchanged = (await client.get(f"/api/{store['id']}/colors/{color['id']}")).json()
    assert unchanged == color
