"""UserState Value Object."""

from __future__ import annotations

from dataclasses import dataclass

from apps.users.domain.enums import UserStatus
from apps.users.domain.exceptions import DomainError
from apps.users.domain.value_objects.base import ValueObject


@dataclass(frozen=True, slots=True)
class UserState(ValueObject):
    """사용자 상태 Value Object.

    Active | Suspended | Deleted 중 하나만 허용합니다.
    상태 간 전이 제한은 이 레이어에서 두지 않습니다.
    """

    value: str

    def __post_init__(self) -> None:
        try:
            status = UserStatus(self.value)
        except ValueError:
            raise DomainError.invalid_enum(
                "State",
                self.value,
                [s.value for s in UserStatus],
            ) from None
        self._normalize(status.value)

    @property
    def status(self) -> UserStatus:
        return UserStatus(self.value)

    @classmethod
    def active(cls) -> "UserState":
        return cls(UserStatus.ACTIVE.value)

    @classmethod
    def suspended(cls) -> "UserState":
        return cls(UserStatus.SUSPENDED.value)

    @classmethod
    def deleted(cls) -> "UserState":
        return cls(UserStatus.DELETED.value)

    @property
    def is_active(self) -> bool:
        return self.status is UserStatus.ACTIVE

    @property
    def is_suspended(self) -> bool:
        return self.status is UserStatus.SUSPENDED

    @property
    def is_deleted(self) -> bool:
        return self.status is UserStatus.DELETED
