"""
Grandma Recipes API: Health Check and Middleware Tests
=======================================================
"""

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from grandma_recipes import __version__
from grandma_recipes.middleware.body_size import BodySizeLimitMiddleware


class TestHealth:

    @pytest.mark.asyncio
    async def test_health_reports_database(self, test_client):
        response = await test_client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["database"] == "connected"
        assert body["version"] == __version__
        assert body["uptime_seconds"] >= 0


class TestRequestID:

    @pytest.mark.asyncio
    async def test_generated_when_absent(self, test_client):
        response = await test_client.get("/grandmas")

        assert len(response.headers["X-Request-ID"]) == 8

    @pytest.mark.asyncio
    async def test_client_value_echoed(self, test_client):
        response = await test_client.get("/grandmas", headers={"X-Request-ID": "from-frontend"})

        assert response.headers["X-Request-ID"] == "from-frontend"


class TestBodySizeLimit:

    def setup_method(self):
        app = FastAPI()

        @app.post("/echo")
        async def echo(payload: dict):
            return payload

        app.add_middleware(BodySizeLimitMiddleware, max_body_size=64)
        self.app = app

    @pytest.mark.asyncio
    async def test_small_body_passes(self):
        async with AsyncClient(transport=ASGITransport(app=self.app), base_url="http://test") as client:
            response = await client.post("/echo", json={"a": 1})

        assert response.status_code == 200
        assert response.json() == {"a": 1}

    @pytest.mark.asyncio
    async def test_oversized_body_rejected(self):
        async with AsyncClient(transport=ASGITransport(app=self.app), base_url="http://test") as client:
            response = await client.post("/echo", json={"image": "x" * 500})

        assert response.status_code == 413
        body = response.json()
        assert body["success"] is False
        assert body["error"] == "payload_too_large"
        assert body["details"] == {"max_body_size": 64}
