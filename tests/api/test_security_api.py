"""Caller identity and role gating at the HTTP boundary."""

import pytest

pytestmark = pytest.mark.usefixtures("overrides")

NEW_ITEM = {"name": "Salt", "category": "Baking", "quantity": 10, "unitPrice": 0.5}


class TestAuthentication:
    async def test_missing_user_is_unauthorized(self, async_client):
        response = await async_client.get("/api/stocks")

        assert response.status_code == 401
        assert response.json()["errorCode"] == "AUTHENTICATION_REQUIRED"

    async def test_missing_role_defaults_to_staff(self, async_client):
        headers = {"X-User": "alice"}

        assert (await async_client.get("/api/stocks", headers=headers)).status_code == 200
        response = await async_client.post("/api/stocks", json=NEW_ITEM, headers=headers)
        assert response.status_code == 403

    async def test_unknown_role_is_forbidden(self, async_client):
        response = await async_client.get(
            "/api/stocks", headers={"X-User": "eve", "X-User-Role": "guest"}
        )

        assert response.status_code == 403
        assert response.json()["message"] == "Unknown role: GUEST"

    async def test_health_needs_no_identity(self, async_client):
        assert (await async_client.get("/api/health")).status_code == 200


class TestRoles:
    async def test_staff_cannot_create_stock(self, async_client, staff_headers):
        response = await async_client.post("/api/stocks", json=NEW_ITEM, headers=staff_headers)

        assert response.status_code == 403
        body = response.json()
        assert body["errorCode"] == "FORBIDDEN"
        assert body["message"] == "Access denied. Required role: ADMIN, MANAGER"

    async def test_manager_can_create_stock(self, async_client, manager_headers):
        response = await async_client.post("/api/stocks", json=NEW_ITEM, headers=manager_headers)
        assert response.status_code == 200

    async def test_role_header_is_case_insensitive(self, async_client):
        response = await async_client.post(
            "/api/stocks", json=NEW_ITEM, headers={"X-User": "mia", "X-User-Role": "manager"}
        )
        assert response.status_code == 200

    async def test_only_admin_deletes_stock(self, async_client, manager_headers, admin_headers):
        denied = await async_client.delete("/api/stocks/1", headers=manager_headers)
        allowed = await async_client.delete("/api/stocks/1", headers=admin_headers)

        assert denied.status_code == 403
        assert denied.json()["message"] == "Access denied. Required role: ADMIN"
        assert allowed.status_code == 200

    async def test_staff_reads_expenses_but_cannot_write(self, async_client, staff_headers):
        assert (await async_client.get("/api/expenses", headers=staff_headers)).status_code == 200
        response = await async_client.post(
            "/api/expenses", json={"category": "Rent", "amount": 10}, headers=staff_headers
        )
        assert response.status_code == 403
