"""Tests for HTTP middleware."""

import pytest
from fastapi import FastAPI, Request
from httpx import ASGITransport, AsyncClient

from filedrop.api.middleware import RequestSizeLimitMiddleware


@pytest.fixture
def app():
    """Create FastAPI app with a tiny body limit."""
    app = FastAPI()
    app.add_middleware(RequestSizeLimitMiddleware, max_bytes=10)

    @app.post("/echo")
    async def echo(request: Request):
        body = await request.body()
        return {"length": len(body)}

    return app


@pytest.mark.api
class TestRequestSizeLimitMiddleware:
    """Test cases for RequestSizeLimitMiddleware."""

    @pytest.mark.asyncio
    async def test_body_within_limit(self, app):
        """Test that small bodies pass."""
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            response = await client.post("/echo", content=b"0123456789")

        assert response.status_code == 200
        assert response.json() == {"length": 10}

    @pytest.mark.asyncio
    async def test_body_over_limit(self, app):
        """Test that large bodies are answered with 413."""
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            response = await client.post("/echo", content=b"01234567890")

        assert response.status_code == 413
        assert "exceeds" in response.json()["detail"]

    @pytest.mark.asyncio
    async def test_requests_without_body(self, app):
        """Test that GET requests are unaffected."""
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            response = await client.get("/echo")

        assert response.status_code == 405
