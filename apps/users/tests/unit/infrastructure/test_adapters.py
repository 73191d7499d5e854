"""UuidUserIdGenerator / Database 단위 테스트."""

import uuid

import pytest

from apps.users.infrastructure.adapters import UuidUserIdGenerator
from apps.users.infrastructure.persistence_postgres import Database


class TestUuidUserIdGenerator:
    def test_generates_uuid4_strings(self) -> None:
        user_id = UuidUserIdGenerator()()
        assert uuid.UUID(user_id.value).version == 4

    def test_ids_are_unique(self) -> None:
        generate = UuidUserIdGenerator()
        assert len({generate().value for _ in range(100)}) == 100


class TestDatabase:
    """연결 전 상태에서의 수명주기 동작."""

    def test_not_connected_by_default(self) -> None:
        database = Database("postgresql+asyncpg://u:p@localhost/db")
        assert database.is_connected is False
        with pytest.raises(RuntimeError):
            database.engine

    @pytest.mark.asyncio
    async def test_session_requires_connect(self) -> None:
        database = Database("postgresql+asyncpg://u:p@localhost/db")
        with pytest.raises(RuntimeError):
            async with database.session():
                pass

    @pytest.mark.asyncio
    async def test_dispose_without_connect_is_noop(self) -> None:
        database = Database("postgresql+asyncpg://u:p@localhost/db")
        await database.dispose()
        assert database.is_connected is False
