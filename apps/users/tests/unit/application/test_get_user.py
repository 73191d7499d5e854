"""GetUserQuery 단위 테스트."""

from unittest.mock import AsyncMock

import pytest

from apps.users.application.common.dto import GetUserRequest
from apps.users.application.queries import GetUserQuery
from apps.users.domain.exceptions import DomainError, ErrorKind
from apps.users.domain.value_objects import UserId


class TestGetUserQuery:
    """GetUserQuery 테스트."""

    @pytest.fixture
    def mock_repository(self) -> AsyncMock:
        return AsyncMock()

    @pytest.fixture
    def query(self, mock_repository: AsyncMock) -> GetUserQuery:
        return GetUserQuery(user_repository=mock_repository)

    @pytest.mark.asyncio
    async def test_returns_projection(
        self,
        query: GetUserQuery,
        mock_repository: AsyncMock,
        make_user,
    ) -> None:
        user = make_user(id_="user-1")
        mock_repository.find_by_id.return_value = user

        result = await query.execute(GetUserRequest(id="user-1"))

        mock_repository.find_by_id.assert_awaited_once_with(UserId("user-1"))
        assert result.id == "user-1"
        assert result.email == user.email.value
        assert result.created_at == user.created_at.value

    @pytest.mark.asyncio
    async def test_missing_user_is_not_found(
        self,
        query: GetUserQuery,
        mock_repository: AsyncMock,
    ) -> None:
        mock_repository.find_by_id.return_value = None

        with pytest.raises(DomainError) as exc_info:
            await query.execute(GetUserRequest(id="missing"))

        assert exc_info.value.kind is ErrorKind.NOT_FOUND
        assert exc_info.value.details == {"user_id": "missing"}

    @pytest.mark.asyncio
    async def test_blank_id_fails_before_lookup(
        self,
        query: GetUserQuery,
        mock_repository: AsyncMock,
    ) -> None:
        with pytest.raises(DomainError) as exc_info:
            await query.execute(GetUserRequest(id="   "))

        assert exc_info.value.kind is ErrorKind.EMPTY_VALUE
        mock_repository.find_by_id.assert_not_awaited()
