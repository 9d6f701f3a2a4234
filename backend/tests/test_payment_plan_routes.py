"""
Back Office Backend — Payment Plan Endpoint Tests
===================================================

What we test:
    ✅ Zero or two owners → 400, and nothing is listed afterwards
    ✅ One owner → 201, then visible by id and by fixed expense
    ✅ camelCase request keys, snake_case response keys
    ✅ 404 for an unknown plan, 204 for every delete
"""

import pytest


class TestCreatePaymentPlan:

    @pytest.mark.asyncio
    async def test_fixed_expense_plan_created_and_listed(self, client, auth_headers, sample_plan_data):
        response = await client.post(
            "/api/payment-plans",
            json={**sample_plan_data, "fixedExpenseId": 7},
            headers=auth_headers,
        )

        assert response.status_code == 201
        body = response.json()
        assert body["success"] is True
        plan = body["data"]
        assert plan["fixed_expense_id"] == 7
        assert plan["expense_id"] is None
        assert plan["installments_count"] == 12
        assert plan["start_date"].startswith("2025-01-05T00:00:00")

        by_id = await client.get(f"/api/payment-plans/{plan['id']}", headers=auth_headers)
        assert by_id.status_code == 200
        assert by_id.json()["data"] == plan

        listed = await client.get("/api/payment-plans/fixed-expense/7", headers=auth_headers)
        assert [p["id"] for p in listed.json()["data"]] == [plan["id"]]

    @pytest.mark.asyncio
    async def test_snake_case_body_accepted(self, client, auth_headers):
        response = await client.post(
            "/api/payment-plans",
            json={
                "expense_id": 3,
                "payment_type_id": 2,
                "installments_count": 1,
                "start_date": "2025-02-01T00:00:00",
            },
            headers=auth_headers,
        )

        assert response.status_code == 201
        assert response.json()["data"]["expense_id"] == 3

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "owners",
        [{}, {"expenseId": 1, "fixedExpenseId": 7}],
        ids=["neither", "both"],
    )
    async def test_owner_must_be_exactly_one(self, client, auth_headers, sample_plan_data, owners):
        response = await client.post(
            "/api/payment-plans",
            json={**sample_plan_data, **owners},
            headers=auth_headers,
        )

        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "validation_error"
        assert set(body["details"]["fields"]) == {"expense_id", "fixed_expense_id"}

        listed = await client.get("/api/payment-plans/fixed-expense/7", headers=auth_headers)
        assert listed.json()["data"] == []

    @pytest.mark.asyncio
    async def test_zero_installments_rejected(self, client, auth_headers, sample_plan_data):
        response = await client.post(
            "/api/payment-plans",
            json={**sample_plan_data, "expenseId": 1, "installmentsCount": 0},
            headers=auth_headers,
        )

        assert response.status_code == 400
        assert "body.installmentsCount" in response.json()["details"]["fields"]

    @pytest.mark.asyncio
    async def test_long_plan_has_no_installment_ceiling(self, client, auth_headers, sample_plan_data):
        response = await client.post(
            "/api/payment-plans",
            json={**sample_plan_data, "expenseId": 1, "installmentsCount": 2400},
            headers=auth_headers,
        )

        assert response.status_code == 201
        assert response.json()["data"]["installments_count"] == 2400

    @pytest.mark.asyncio
    async def test_requires_token(self, client, sample_plan_data):
        response = await client.post("/api/payment-plans", json={**sample_plan_data, "expenseId": 1})
        assert response.status_code == 401


class TestReadAndDeletePaymentPlan:

    @pytest.mark.asyncio
    async def test_unknown_plan_404(self, client, auth_headers):
        response = await client.get("/api/payment-plans/31337", headers=auth_headers)

        assert response.status_code == 404
        assert response.json()["message"] == "Plan de pago con ID 31337 no encontrado"

    @pytest.mark.asyncio
    async def test_fixed_expense_list_newest_first(self, client, auth_headers, sample_plan_data):
        for start in ("2024-01-01T00:00:00", "2024-09-01T00:00:00", "2024-05-01T00:00:00"):
            await client.post(
                "/api/payment-plans",
                json={**sample_plan_data, "fixedExpenseId": 2, "startDate": start},
                headers=auth_headers,
            )

        body = (await client.get("/api/payment-plans/fixed-expense/2", headers=auth_headers)).json()

        assert [p["start_date"][:7] for p in body["data"]] == ["2024-09", "2024-05", "2024-01"]
        assert body["count"] == 3

    @pytest.mark.asyncio
    async def test_expense_list(self, client, auth_headers, sample_plan_data):
        await client.post(
            "/api/payment-plans", json={**sample_plan_data, "expenseId": 11}, headers=auth_headers
        )

        body = (await client.get("/api/payment-plans/expense/11", headers=auth_headers)).json()

        assert body["count"] == 1
        assert body["data"][0]["expense_id"] == 11

    @pytest.mark.asyncio
    async def test_delete_twice_both_204(self, client, auth_headers, sample_plan_data):
        created = await client.post(
            "/api/payment-plans", json={**sample_plan_data, "expenseId": 1}, headers=auth_headers
        )
        plan_id = created.json()["data"]["id"]

        first = await client.delete(f"/api/payment-plans/{plan_id}", headers=auth_headers)
        second = await client.delete(f"/api/payment-plans/{plan_id}", headers=auth_headers)

        assert first.status_code == 204
        assert second.status_code == 204
        assert first.content == b""
        gone = await client.get(f"/api/payment-plans/{plan_id}", headers=auth_headers)
        assert gone.status_code == 404

    @pytest.mark.asyncio
    async def test_delete_never_created_is_204(self, client, auth_headers):
        response = await client.delete("/api/payment-plans/999", headers=auth_headers)
        assert response.status_code == 204
