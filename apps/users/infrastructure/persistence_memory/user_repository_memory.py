"""In-memory User Repository.

UserRepository 포트의 프로세스 내 구현체입니다.
PostgreSQL 어댑터와 같은 계약(삭제 사용자 제외, 활성 이메일 유일성)을 따릅니다.
"""

from __future__ import annotations

import logging

from apps.users.domain.entities.user import User
from apps.users.domain.exceptions import DomainError
from apps.users.domain.value_objects.email import UserEmail
from apps.users.domain.value_objects.user_id import UserId

logger = logging.getLogger(__name__)


class InMemoryUserRepository:
    """dict 기반 User Repository.

    소프트 삭제된 사용자도 보관하되 조회에서는 제외합니다.
    """

    def __init__(self, users: list[User] | None = None) -> None:
        self._users: dict[str, User] = {}
        for user in users or []:
            self._users[user.id_.value] = user

    def __len__(self) -> int:
        return len(self._users)

    async def save(self, user: User) -> None:
        logger.debug("Repository operation", extra={"operation": "save", "user_id": user.id_.value})
        if user.id_.value in self._users:
            raise DomainError.storage_failure("save", f"duplicate id '{user.id_.value}'")
        self._ensure_email_available(user)
        self._users[user.id_.value] = user

    async def find_by_id(self, user_id: UserId) -> User | None:
        user = self._users.get(user_id.value)
        if user is None or user.is_deleted:
            return None
        return user

    async def find_by_email(self, email: UserEmail) -> User | None:
        return next(
            (u for u in self._users.values() if u.email == email and not u.is_deleted),
            None,
        )

    async def find_all(self) -> list[User]:
        return [u for u in self._users.values() if not u.is_deleted]

    async def update(self, user: User) -> None:
        logger.debug("Repository operation", extra={"operation": "update", "user_id": user.id_.value})
        if user.id_.value not in self._users:
            raise DomainError.storage_failure("update", f"unknown id '{user.id_.value}'")
        if not user.is_deleted:
            self._ensure_email_available(user)
        self._users[user.id_.value] = user

    def _ensure_email_available(self, user: User) -> None:
        for other in self._users.values():
            if other.id_ != user.id_ and not other.is_deleted and other.email == user.email:
                raise DomainError.already_exists(user.email.value)
