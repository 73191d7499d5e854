"""UserRepository Port.

Use Case가 의존하는 영속성 인터페이스입니다.
"""

from typing import Protocol

from apps.users.domain.entities.user import User
from apps.users.domain.value_objects.email import UserEmail
from apps.users.domain.value_objects.user_id import UserId


class UserRepository(Protocol):
    """사용자 저장소 인터페이스.

    계약:
        - find_by_id / find_by_email / find_all 은 Deleted 상태 사용자를 반환하지 않음
        - save 는 이미 존재하는 식별자로 호출되지 않음
        - update 는 일반 필드 변경과 소프트 삭제 모두에 사용됨
        - 저장소 오류는 DomainError(kind=STORAGE_FAILURE)로 보고

    구현체:
        - SqlaUserRepository (infrastructure/persistence_postgres/)
        - InMemoryUserRepository (infrastructure/persistence_memory/)
    """

    async def save(self, user: User) -> None:
        """신규 사용자 저장."""
        ...

    async def find_by_id(self, user_id: UserId) -> User | None:
        """ID로 조회 (삭제된 사용자 제외)."""
        ...

    async def find_by_email(self, email: UserEmail) -> User | None:
        """정규화된 이메일로 조회 (삭제된 사용자 제외)."""
        ...

    async def find_all(self) -> list[User]:
        """삭제되지 않은 전체 사용자 조회."""
        ...

    async def update(self, user: User) -> None:
        """기존 사용자 갱신. 해당 ID 가 없으면 STORAGE_FAILURE."""
        ...
