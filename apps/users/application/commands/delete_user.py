"""DeleteUser Command.

사용자 소프트 삭제 Use Case입니다.
"""

from __future__ import annotations

from apps.users.application.common.dto.users import DeleteUserRequest, DeleteUserResponse
from apps.users.application.common.ports.user_repository import UserRepository
from apps.users.domain.exceptions import DomainError
from apps.users.domain.value_objects import UserId

DELETED_MESSAGE = "User deleted successfully"


class DeleteUserCommand:
    """사용자 삭제 Command.

    물리 삭제가 아니라 Deleted 상태로 전이 후 update 로 저장합니다.
    """

    def __init__(self, user_repository: UserRepository) -> None:
        self._user_repository = user_repository

    async def execute(self, request: DeleteUserRequest) -> DeleteUserResponse:
        user_id = UserId(request.id)

        user = await self._user_repository.find_by_id(user_id)
        if user is None:
            raise DomainError.not_found(request.id)

        await self._user_repository.update(user.delete())

        return DeleteUserResponse(id=request.id, message=DELETED_MESSAGE)
