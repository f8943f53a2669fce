"""Error envelope, health and request tracing."""

from unittest.mock import AsyncMock, patch

import pytest
import structlog
from starlette.requests import Request

from stockroom.api.middleware.logging import LoggingMiddleware

pytestmark = pytest.mark.usefixtures("overrides")


class TestErrorEnvelope:
    async def test_unexpected_error_is_internal(self, async_client, staff_headers, stock_store):
        stock_store.list_items.side_effect = RuntimeError("disk on fire")

        response = await async_client.get("/api/stocks", headers=staff_headers)

        assert response.status_code == 500
        body = response.json()
        assert body["errorCode"] == "INTERNAL_ERROR"
        assert body["path"] == "/api/stocks"

    async def test_unknown_route(self, async_client, staff_headers):
        response = await async_client.get("/api/nothing", headers=staff_headers)

        assert response.status_code == 404
        assert response.json()["errorCode"] == "NOT_FOUND"

    async def test_malformed_json_is_invalid_input(self, async_client, manager_headers):
        response = await async_client.post(
            "/api/stocks",
            content=b"{not json",
            headers={**manager_headers, "Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json()["errorCode"] == "INVALID_INPUT"


class TestTracing:
    async def test_request_id_is_generated(self, async_client, staff_headers):
        response = await async_client.get("/api/stocks", headers=staff_headers)

        assert response.headers["X-Request-ID"]
        assert response.headers["X-Response-Time"].endswith("ms")

    async def test_request_id_is_propagated(self, async_client, staff_headers):
        response = await async_client.get(
            "/api/stocks", headers={**staff_headers, "X-Request-ID": "abc123"}
        )
        assert response.headers["X-Request-ID"] == "abc123"

    async def test_context_is_cleared_when_request_fails(self):
        middleware = LoggingMiddleware(app=AsyncMock())
        request = Request(
            {
                "type": "http",
                "method": "GET",
                "path": "/api/stocks",
                "headers": [(b"x-request-id", b"abc123"), (b"x-user", b"alice")],
                "query_string": b"",
            }
        )

        async def call_next(request):
            assert structlog.contextvars.get_contextvars()["request_id"] == "abc123"
            raise RuntimeError("disk on fire")

        with pytest.raises(RuntimeError):
            await middleware.dispatch(request, call_next)

        assert structlog.contextvars.get_contextvars() == {}


class TestHealth:
    async def test_root_health(self, async_client):
        response = await async_client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    async def test_api_health(self, async_client):
        body = (await async_client.get("/api/health")).json()

        assert body["status"] == "healthy"
        assert body["uptimeSeconds"] >= 0

    async def test_db_health_degraded(self, async_client):
        with patch(
            "stockroom.infrastructure.storage.sqlite.get_connection",
            side_effect=RuntimeError("no database"),
        ):
            body = (await async_client.get("/api/health/db")).json()

        assert body["status"] == "degraded"
        assert body["database"]["available"] is False
