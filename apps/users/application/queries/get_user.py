"""GetUser Query."""

from __future__ import annotations

from apps.users.application.common.dto.users import GetUserRequest, UserResponse
from apps.users.application.common.ports.user_repository import UserRepository
from apps.users.domain.exceptions import DomainError
from apps.users.domain.value_objects import UserId


class GetUserQuery:
    """단일 사용자 조회 Query."""

    def __init__(self, user_repository: UserRepository) -> None:
        self._user_repository = user_repository

    async def execute(self, request: GetUserRequest) -> UserResponse:
        user_id = UserId(request.id)

        user = await self._user_repository.find_by_id(user_id)
        if user is None:
            raise DomainError.not_found(request.id)

        return UserResponse.from_entity(user)
