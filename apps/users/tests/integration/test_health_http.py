"""Health 엔드포인트 테스트"""

from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest
import pytest_asyncio
from fastapi import FastAPI

from apps.users.main import create_app
from apps.users.setup.config import Settings
from apps.users.setup.constants import SERVICE_NAME, SERVICE_VERSION


@pytest.fixture
def app() -> FastAPI:
    return create_app(Settings(repository_backend="memory", log_format="text"))


@pytest_asyncio.fixture
async def client(app: FastAPI) -> httpx.AsyncClient:
    """비동기 테스트 클라이언트 fixture"""
    transport = httpx.ASGITransport(app=app)  # type: ignore[arg-type]
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


class TestHealthEndpoints:
    """Health/Readiness 엔드포인트 테스트"""

    @pytest.mark.asyncio
    async def test_health_response_format(self, client: httpx.AsyncClient) -> None:
        """GET /health 응답 형식"""
        response = await client.get("/health")

        assert response.status_code == 200
        assert response.json() == {
            "status": "healthy",
            "service": SERVICE_NAME,
            "version": SERVICE_VERSION,
        }

    @pytest.mark.asyncio
    async def test_ready_without_database(self, client: httpx.AsyncClient) -> None:
        """DB 없이 (memory) 는 항상 ready"""
        response = await client.get("/ready")

        assert response.status_code == 200
        assert response.json() == {"status": "ready"}

    @pytest.mark.asyncio
    async def test_ready_with_healthy_database(self, app: FastAPI, client: httpx.AsyncClient) -> None:
        app.state.database = MagicMock(ping=AsyncMock(return_value=True))

        response = await client.get("/ready")

        assert response.status_code == 200
        app.state.database.ping.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_ready_with_unreachable_database(
        self, app: FastAPI, client: httpx.AsyncClient
    ) -> None:
        """DB ping 실패 시 503"""
        app.state.database = MagicMock(ping=AsyncMock(return_value=False))

        response = await client.get("/ready")

        assert response.status_code == 503
        assert response.json() == {"status": "unavailable"}

    @pytest.mark.asyncio
    async def test_ping(self, client: httpx.AsyncClient) -> None:
        response = await client.get("/ping")

        assert response.json() == {"ping": "pong"}
