"""CreateUser Command.

신규 사용자 생성 Use Case입니다.
"""

from __future__ import annotations

from apps.users.application.common.dto.users import CreateUserRequest, UserResponse
from apps.users.application.common.ports.user_repository import UserRepository
from apps.users.domain.entities.user import User
from apps.users.domain.exceptions import DomainError
from apps.users.domain.ports.user_id_generator import UserIdGenerator
from apps.users.domain.value_objects import UserEmail, UserLastName, UserName


class CreateUserCommand:
    """사용자 생성 Command.

    Flow:
    1. 값 객체 생성 (검증 실패 시 즉시 중단)
    2. 정규화된 이메일로 기존 사용자 조회
    3. 존재하면 ALREADY_EXISTS
    4. 새 ID 발급 → User.create → save
    """

    def __init__(
        self,
        user_repository: UserRepository,
        user_id_generator: UserIdGenerator,
    ) -> None:
        self._user_repository = user_repository
        self._user_id_generator = user_id_generator

    async def execute(self, request: CreateUserRequest) -> UserResponse:
        name = UserName(request.name)
        last_name = UserLastName(request.last_name)
        email = UserEmail(request.email)

        # 이메일 중복 확인 (원자적이지 않음, 저장소의 unique index가 최종 보장)
        existing = await self._user_repository.find_by_email(email)
        if existing is not None:
            raise DomainError.already_exists(email.value)

        user = User.create(self._user_id_generator(), name, last_name, email)
        await self._user_repository.save(user)

        return UserResponse.from_entity(user)
