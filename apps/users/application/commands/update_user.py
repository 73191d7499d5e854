"""UpdateUser Command.

사용자 정보 수정 Use Case입니다.
"""

from __future__ import annotations

from apps.users.application.common.dto.users import UpdateUserRequest, UserResponse
from apps.users.application.common.ports.user_repository import UserRepository
from apps.users.domain.exceptions import DomainError
from apps.users.domain.value_objects import UserEmail, UserId, UserLastName, UserName


class UpdateUserCommand:
    """사용자 수정 Command.

    전달된 필드(None 이 아닌 값)만 검증 후 반영합니다.
    모든 입력 검증은 첫 저장소 호출 이전에 끝납니다.
    필드가 하나도 없으면 User.update 를 호출하지 않지만 저장소 update 는 항상 호출합니다.
    """

    def __init__(self, user_repository: UserRepository) -> None:
        self._user_repository = user_repository

    async def execute(self, request: UpdateUserRequest) -> UserResponse:
        user_id = UserId(request.id)
        name = UserName(request.name) if request.name is not None else None
        last_name = UserLastName(request.last_name) if request.last_name is not None else None
        email = UserEmail(request.email) if request.email is not None else None

        user = await self._user_repository.find_by_id(user_id)
        if user is None:
            raise DomainError.not_found(request.id)

        if request.has_changes:
            user = user.update(name=name, last_name=last_name, email=email)

        await self._user_repository.update(user)

        return UserResponse.from_entity(user)
