"""
Back Office Backend — Unit Measure Endpoint Tests
===================================================

What we test:
    ✅ Create → 201, get → 200, list sorted by name
    ✅ Update of an existing unit → 200 with new values
    ✅ Update of a missing unit → 404, nothing created
    ✅ Delete twice → 204 both times
"""

import pytest

from backoffice.models.unit_measure import UnitMeasure


class TestUnitMeasureRoutes:

    @pytest.mark.asyncio
    async def test_create_and_get(self, client, auth_headers):
        response = await client.post(
            "/api/unit-measures",
            json={"name": "Kilogramo", "symbol": "kg", "description": "Masa"},
            headers=auth_headers,
        )

        assert response.status_code == 201
        created = response.json()["data"]
        assert created["is_active"] is True

        fetched = await client.get(f"/api/unit-measures/{created['id']}", headers=auth_headers)
        assert fetched.json()["data"] == created

    @pytest.mark.asyncio
    async def test_list_sorted_by_name(self, client, auth_headers, seed):
        await seed(UnitMeasure(name="Unidad", symbol="u"), UnitMeasure(name="Caja"))

        body = (await client.get("/api/unit-measures", headers=auth_headers)).json()

        assert [u["name"] for u in body["data"]] == ["Caja", "Unidad"]
        assert body["count"] == 2

    @pytest.mark.asyncio
    async def test_get_missing_404(self, client, auth_headers):
        response = await client.get("/api/unit-measures/8", headers=auth_headers)

        assert response.status_code == 404
        assert response.json()["error"] == "not_found"

    @pytest.mark.asyncio
    async def test_update_existing(self, client, auth_headers, seed):
        [unit] = await seed(UnitMeasure(name="Litro", symbol="L"))

        response = await client.put(
            f"/api/unit-measures/{unit.id}",
            json={"name": "Litro", "symbol": "l", "description": "Volumen"},
            headers=auth_headers,
        )

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["symbol"] == "l"
        assert data["description"] == "Volumen"

    @pytest.mark.asyncio
    async def test_update_missing_404_store_unchanged(self, client, auth_headers):
        response = await client.put(
            "/api/unit-measures/99", json={"name": "Caja"}, headers=auth_headers
        )

        assert response.status_code == 404
        assert response.json()["message"] == "Unidad de medida con ID 99 no encontrada"
        listed = (await client.get("/api/unit-measures", headers=auth_headers)).json()
        assert listed["data"] == []

    @pytest.mark.asyncio
    async def test_delete_twice(self, client, auth_headers, seed):
        [unit] = await seed(UnitMeasure(name="Metro", symbol="m"))

        first = await client.delete(f"/api/unit-measures/{unit.id}", headers=auth_headers)
        second = await client.delete(f"/api/unit-measures/{unit.id}", headers=auth_headers)

        assert (first.status_code, second.status_code) == (204, 204)

    @pytest.mark.asyncio
    async def test_empty_body_rejected(self, client, auth_headers):
        response = await client.post("/api/unit-measures", json={}, headers=auth_headers)

        assert response.status_code == 400
        assert "body.name" in response.json()["details"]["fields"]

    @pytest.mark.asyncio
    async def test_symbol_too_long_rejected(self, client, auth_headers):
        response = await client.post(
            "/api/unit-measures", json={"name": "Kilogramo", "symbol": "kilogramos!"}, headers=auth_headers
        )
        assert response.status_code == 400
