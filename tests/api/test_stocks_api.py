"""Stock catalog endpoints."""

import pytest

pytestmark = pytest.mark.usefixtures("overrides")


class TestReadStock:
    async def test_list_uses_camel_case(self, async_client, staff_headers):
        response = await async_client.get("/api/stocks", headers=staff_headers)

        assert response.status_code == 200
        first = response.json()[0]
        assert first == {
            "id": 1,
            "name": "Flour",
            "category": "Baking",
            "quantity": 100.0,
            "unitPrice": 2.0,
            "reorderLevel": 20.0,
            "lowStock": False,
        }

    async def test_list_is_unbounded_unless_limited(self, async_client, staff_headers, stock_store):
        await async_client.get("/api/stocks", headers=staff_headers)
        stock_store.list_items.assert_awaited_with(limit=None, offset=0)

        await async_client.get("/api/stocks?limit=5&offset=10", headers=staff_headers)
        stock_store.list_items.assert_awaited_with(limit=5, offset=10)

    async def test_low_stock(self, async_client, staff_headers):
        response = await async_client.get("/api/stocks/low-stock", headers=staff_headers)

        assert response.status_code == 200
        assert [i["name"] for i in response.json()] == ["Sugar"]
        assert response.json()[0]["lowStock"] is True

    async def test_get_missing_item(self, async_client, staff_headers):
        response = await async_client.get("/api/stocks/99", headers=staff_headers)

        assert response.status_code == 404
        body = response.json()
        assert body["errorCode"] == "STOCK_ITEM_NOT_FOUND"
        assert body["message"] == "Stock item not found with ID: 99"
        assert body["path"] == "/api/stocks/99"
        assert body["hint"]


class TestWriteStock:
    async def test_create(self, async_client, manager_headers, stock_store):
        response = await async_client.post(
            "/api/stocks",
            json={"name": "Salt", "category": "Baking", "quantity": 4, "unitPrice": 0.5, "reorderLevel": 5},
            headers=manager_headers,
        )

        assert response.status_code == 200
        assert response.json()["id"] == 3
        assert response.json()["lowStock"] is True
        created = stock_store.create_item.await_args.args[0]
        assert created.name == "Salt"

    @pytest.mark.parametrize(
        "body",
        [
            {"name": "Salt", "category": "Baking", "quantity": 1, "unitPrice": 0},
            {"name": "Salt", "category": "Baking", "quantity": -1, "unitPrice": 1},
            {"name": "   ", "category": "Baking", "quantity": 1, "unitPrice": 1},
            {"category": "Baking", "quantity": 1, "unitPrice": 1},
        ],
    )
    async def test_create_rejects_invalid_body(self, async_client, manager_headers, body):
        response = await async_client.post("/api/stocks", json=body, headers=manager_headers)

        assert response.status_code == 400
        assert response.json()["errorCode"] == "INVALID_INPUT"
        assert response.json()["detail"]

    @pytest.mark.parametrize(
        "method,path",
        [("POST", "/api/stocks"), ("PUT", "/api/stocks/1")],
    )
    async def test_non_finite_numbers_are_rejected(
        self, async_client, manager_headers, stock_store, method, path
    ):
        response = await async_client.request(
            method,
            path,
            content='{"name": "Salt", "category": "Baking", "quantity": NaN, '
            '"unitPrice": Infinity, "reorderLevel": 0}',
            headers={**manager_headers, "Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json()["errorCode"] == "INVALID_INPUT"
        stock_store.create_item.assert_not_awaited()
        stock_store.update_item.assert_not_awaited()

    async def test_admin_overwrite_has_no_bounds(self, async_client, manager_headers, stock_store):
        response = await async_client.put(
            "/api/stocks/1",
            json={"name": "Flour", "category": "Baking", "quantity": -3, "unitPrice": 2, "reorderLevel": 20},
            headers=manager_headers,
        )

        assert response.status_code == 200
        assert response.json()["quantity"] == -3.0

    async def test_update_missing_item(self, async_client, manager_headers):
        response = await async_client.put(
            "/api/stocks/99",
            json={"name": "X", "category": "Y", "quantity": 1, "unitPrice": 1, "reorderLevel": 0},
            headers=manager_headers,
        )
        assert response.status_code == 404

    async def test_delete_returns_empty_ok(self, async_client, admin_headers):
        response = await async_client.delete("/api/stocks/2", headers=admin_headers)

        assert response.status_code == 200
        assert response.content == b""

    async def test_delete_missing(self, async_client, admin_headers):
        response = await async_client.delete("/api/stocks/99", headers=admin_headers)
        assert response.status_code == 404
