"""
Grandma Recipes API: Contributor Endpoint Tests
================================================

What:  CRUD on /grandma(s), the not-found conventions, and the user link
       written on create.
"""

import pytest
from sqlalchemy import select

from conftest import count_rows
from grandma_recipes.models import Grandma, UserGrandma

UNKNOWN = "That id does not exist in our data base"


async def _create(client, headers, **fields):
    body = {"name": "Rosa", "lastname": "Pérez", "city": "Lugo", "birthYear": 1931}
    body.update(fields)
    response = await client.post("/grandma", json=body, headers=headers)
    assert response.status_code == 200, response.text
    return response.json()["info"]


class TestGrandmaReads:

    @pytest.mark.asyncio
    async def test_empty_list_is_successful(self, test_client):
        response = await test_client.get("/grandmas")

        assert response.status_code == 200
        assert response.json() == {"success": True, "info": {"count": 0}, "results": []}

    @pytest.mark.asyncio
    async def test_list_and_get(self, test_client, auth_headers):
        info = await _create(test_client, auth_headers, bio="Ran the village bakery")

        listing = (await test_client.get("/grandmas")).json()
        detail = (await test_client.get(f"/grandma/{info['idGrandma']}")).json()

        assert listing["info"]["count"] == 1
        assert listing["results"][0]["idGrandma"] == info["idGrandma"]
        assert detail["success"] is True
        assert detail["data"]["birthYear"] == 1931
        assert detail["data"]["bio"] == "Ran the village bakery"
        assert detail["data"]["country"] is None

    @pytest.mark.asyncio
    async def test_unknown_id(self, test_client):
        response = await test_client.get("/grandma/404")

        assert response.status_code == 200
        assert response.json()["success"] is False
        assert response.json()["message"] == UNKNOWN

    @pytest.mark.asyncio
    async def test_id_beyond_integer_range(self, test_client):
        response = await test_client.get("/grandma/99999999999999999999")

        assert response.status_code == 200
        assert response.json()["success"] is False
        assert response.json()["message"] == UNKNOWN

    @pytest.mark.asyncio
    async def test_non_numeric_id_is_rejected_by_validation(self, test_client):
        response = await test_client.get("/grandma/abc")

        assert response.status_code == 422


class TestGrandmaMutations:

    @pytest.mark.asyncio
    async def test_create_links_calling_user(self, test_client, auth_headers, session_factory):
        info = await _create(test_client, auth_headers)

        async with session_factory() as db:
            links = (await db.execute(select(UserGrandma))).scalars().all()

        assert len(links) == 1
        assert links[0].grandma_id == info["idGrandma"]
        assert links[0].user_id == info["idUser"]

    @pytest.mark.asyncio
    async def test_create_requires_name(self, test_client, auth_headers):
        response = await test_client.post("/grandma", json={"city": "Lugo"}, headers=auth_headers)

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_update_replaces_every_field(self, test_client, auth_headers):
        """Omitted optional fields are cleared, not kept."""
        info = await _create(test_client, auth_headers)

        response = await test_client.put(
            f"/grandma/{info['idGrandma']}",
            json={"name": "Rosa María", "country": "Spain"},
            headers=auth_headers,
        )

        body = response.json()
        assert body == {"success": True, "message": "1 row(s) updated", "affectedRows": 1}

        data = (await test_client.get(f"/grandma/{info['idGrandma']}")).json()["data"]
        assert data["name"] == "Rosa María"
        assert data["country"] == "Spain"
        assert data["city"] is None
        assert data["birthYear"] is None

    @pytest.mark.asyncio
    async def test_update_unknown_id(self, test_client, auth_headers):
        response = await test_client.put("/grandma/77", json={"name": "Nobody"}, headers=auth_headers)

        assert response.status_code == 200
        assert response.json()["success"] is False
        assert response.json()["message"] == UNKNOWN

    @pytest.mark.asyncio
    async def test_delete(self, test_client, auth_headers, session_factory):
        info = await _create(test_client, auth_headers)
        grandma_id = info["idGrandma"]

        response = await test_client.delete(f"/grandma/{grandma_id}", headers=auth_headers)

        body = response.json()
        assert body["success"] is True
        assert body["message"] == f"The row with idGrandma = {grandma_id} has been deleted."
        assert body["affectedRows"] == 1
        assert await count_rows(session_factory, Grandma) == 0
        assert await count_rows(session_factory, UserGrandma) == 0

    @pytest.mark.asyncio
    async def test_delete_unknown_id(self, test_client, auth_headers):
        response = await test_client.delete("/grandma/77", headers=auth_headers)

        assert response.status_code == 200
        assert response.json()["success"] is False

    @pytest.mark.asyncio
    @pytest.mark.parametrize("grandma_id", ["0", "99999999999999999999"])
    async def test_update_and_delete_outside_integer_range(self, test_client, auth_headers, grandma_id):
        updated = await test_client.put(
            f"/grandma/{grandma_id}", json={"name": "Nobody"}, headers=auth_headers
        )
        deleted = await test_client.delete(f"/grandma/{grandma_id}", headers=auth_headers)

        for response in (updated, deleted):
            assert response.status_code == 200
            assert response.json()["success"] is False
            assert response.json()["message"] == UNKNOWN

    @pytest.mark.asyncio
    async def test_any_user_may_mutate(self, test_client, auth_headers):
        """No ownership check: a second account can edit the first one's grandma."""
        info = await _create(test_client, auth_headers)
        await test_client.post("/signup", json={"email": "other@example.com", "password": "pw"})
        token = (
            await test_client.post("/login", json={"email": "other@example.com", "password": "pw"})
        ).json()["token"]

        response = await test_client.put(
            f"/grandma/{info['idGrandma']}",
            json={"name": "Edited"},
            headers={"Authorization": f"Bearer {token}"},
        )

        assert response.json()["success"] is True
