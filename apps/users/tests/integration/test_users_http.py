"""Users HTTP 엔드포인트 테스트

memory 저장소를 주입한 앱에 httpx ASGITransport 로 요청합니다.
"""

import httpx
import pytest
import pytest_asyncio

from apps.users.infrastructure.persistence_memory import InMemoryUserRepository
from apps.users.main import create_app
from apps.users.setup.config import Settings
from apps.users.setup.dependencies import get_user_repository

USERS_URL = "/api/v1/users"
PAYLOAD = {"name": "Juan", "lastName": "Pérez", "email": "Juan.Perez@Example.com"}


@pytest.fixture
def repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest_asyncio.fixture
async def client(repository: InMemoryUserRepository) -> httpx.AsyncClient:
    """저장소를 공유하는 비동기 테스트 클라이언트"""
    app = create_app(Settings(repository_backend="memory", log_format="text"))
    app.dependency_overrides[get_user_repository] = lambda: repository
    transport = httpx.ASGITransport(app=app)  # type: ignore[arg-type]
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


async def _create(client: httpx.AsyncClient, **overrides) -> dict:
    response = await client.post(USERS_URL, json={**PAYLOAD, **overrides})
    assert response.status_code == 201
    return response.json()


class TestCreateUserEndpoint:
    """POST /api/v1/users"""

    @pytest.mark.asyncio
    async def test_returns_201_with_camel_case_body(self, client: httpx.AsyncClient) -> None:
        data = await _create(client)

        assert data["name"] == "Juan"
        assert data["lastName"] == "Pérez"
        assert data["email"] == "juan.perez@example.com"
        assert data["state"] == "Active"
        assert data["createdAt"] == data["updatedAt"]
        assert data["id"]

    @pytest.mark.asyncio
    async def test_invalid_name_returns_400(self, client: httpx.AsyncClient) -> None:
        response = await client.post(USERS_URL, json={**PAYLOAD, "name": "J"})

        assert response.status_code == 400
        body = response.json()
        assert body["code"] == "invalid_length"
        assert body["field"] == "Name"

    @pytest.mark.asyncio
    async def test_invalid_email_returns_400(self, client: httpx.AsyncClient) -> None:
        response = await client.post(USERS_URL, json={**PAYLOAD, "email": "not-an-email"})

        assert response.status_code == 400
        assert response.json()["code"] == "invalid_format"

    @pytest.mark.asyncio
    async def test_duplicate_email_returns_409(
        self, client: httpx.AsyncClient, repository: InMemoryUserRepository
    ) -> None:
        await _create(client)

        response = await client.post(USERS_URL, json={**PAYLOAD, "email": "juan.perez@example.com"})

        assert response.status_code == 409
        assert response.json()["code"] == "already_exists"
        assert len(repository) == 1

    @pytest.mark.asyncio
    async def test_missing_field_returns_422(self, client: httpx.AsyncClient) -> None:
        response = await client.post(USERS_URL, json={"name": "Juan"})

        assert response.status_code == 422


class TestGetUserEndpoints:
    """GET /api/v1/users, GET /api/v1/users/{id}"""

    @pytest.mark.asyncio
    async def test_get_by_id(self, client: httpx.AsyncClient) -> None:
        created = await _create(client)

        response = await client.get(f"{USERS_URL}/{created['id']}")

        assert response.status_code == 200
        assert response.json() == created

    @pytest.mark.asyncio
    async def test_get_unknown_returns_404(self, client: httpx.AsyncClient) -> None:
        response = await client.get(f"{USERS_URL}/missing")

        assert response.status_code == 404
        body = response.json()
        assert body["code"] == "not_found"
        assert body["detail"] == "User with ID 'missing' not found"

    @pytest.mark.asyncio
    async def test_list_excludes_deleted(self, client: httpx.AsyncClient) -> None:
        first = await _create(client)
        await _create(client, email="ana@example.com")
        await client.delete(f"{USERS_URL}/{first['id']}")

        response = await client.get(USERS_URL)

        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 1
        assert [u["email"] for u in data["users"]] == ["ana@example.com"]

    @pytest.mark.asyncio
    async def test_list_empty(self, client: httpx.AsyncClient) -> None:
        response = await client.get(USERS_URL)

        assert response.json() == {"users": [], "total": 0}


class TestUpdateUserEndpoint:
    """PUT /api/v1/users/{id}"""

    @pytest.mark.asyncio
    async def test_partial_update(self, client: httpx.AsyncClient) -> None:
        created = await _create(client)

        response = await client.put(f"{USERS_URL}/{created['id']}", json={"lastName": "Gómez"})

        assert response.status_code == 200
        data = response.json()
        assert data["lastName"] == "Gómez"
        assert data["name"] == created["name"]
        assert data["email"] == created["email"]
        assert data["createdAt"] == created["createdAt"]

    @pytest.mark.asyncio
    async def test_empty_string_returns_400(self, client: httpx.AsyncClient) -> None:
        created = await _create(client)

        response = await client.put(f"{USERS_URL}/{created['id']}", json={"name": "  "})

        assert response.status_code == 400
        assert response.json()["code"] == "empty_value"

    @pytest.mark.asyncio
    async def test_unknown_returns_404(self, client: httpx.AsyncClient) -> None:
        response = await client.put(f"{USERS_URL}/missing", json={"name": "Pedro"})

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_email_taken_by_other_user_returns_409(self, client: httpx.AsyncClient) -> None:
        await _create(client)
        other = await _create(client, email="ana@example.com")

        response = await client.put(
            f"{USERS_URL}/{other['id']}", json={"email": "juan.perez@example.com"}
        )

        assert response.status_code == 409


class TestDeleteUserEndpoint:
    """DELETE /api/v1/users/{id}"""

    @pytest.mark.asyncio
    async def test_soft_delete(
        self, client: httpx.AsyncClient, repository: InMemoryUserRepository
    ) -> None:
        created = await _create(client)

        response = await client.delete(f"{USERS_URL}/{created['id']}")

        assert response.status_code == 200
        assert response.json() == {"id": created["id"], "message": "User deleted successfully"}
        assert len(repository) == 1
        assert (await client.get(f"{USERS_URL}/{created['id']}")).status_code == 404

    @pytest.mark.asyncio
    async def test_delete_twice_returns_404(self, client: httpx.AsyncClient) -> None:
        created = await _create(client)
        await client.delete(f"{USERS_URL}/{created['id']}")

        response = await client.delete(f"{USERS_URL}/{created['id']}")

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_email_reusable_after_delete(self, client: httpx.AsyncClient) -> None:
        created = await _create(client)
        await client.delete(f"{USERS_URL}/{created['id']}")

        recreated = await _create(client)

        assert recreated["id"] != created["id"]
