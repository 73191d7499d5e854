"""GetAllUsers Query."""

from __future__ import annotations

from apps.users.application.common.dto.users import UserListResponse, UserResponse
from apps.users.application.common.ports.user_repository import UserRepository


class GetAllUsersQuery:
    """전체 사용자 조회 Query.

    삭제된 사용자 제외는 저장소 책임이므로 추가 필터링하지 않습니다.
    """

    def __init__(self, user_repository: UserRepository) -> None:
        self._user_repository = user_repository

    async def execute(self) -> UserListResponse:
        users = await self._user_repository.find_all()
        return UserListResponse(
            users=[UserResponse.from_entity(user) for user in users],
            total=len(users),
        )
