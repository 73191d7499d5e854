"""UserCreatedAt / UserUpdatedAt Value Objects."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import ClassVar

from apps.users.domain.exceptions import DomainError
from apps.users.domain.value_objects.base import ValueObject


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True, slots=True)
class _Timestamp(ValueObject):
    FIELD_NAME: ClassVar[str] = "timestamp"

    value: datetime

    def __post_init__(self) -> None:
        if not isinstance(self.value, datetime):
            raise DomainError.invalid_format(self.FIELD_NAME, self.value)


@dataclass(frozen=True, slots=True)
class UserCreatedAt(_Timestamp):
    """생성 시각. 생성 후 변경되지 않습니다."""

    FIELD_NAME: ClassVar[str] = "created_at"

    @classmethod
    def now(cls) -> "UserCreatedAt":
        return cls(utc_now())


@dataclass(frozen=True, slots=True)
class UserUpdatedAt(_Timestamp):
    """수정 시각. 변경 시 새 인스턴스로 교체됩니다."""

    FIELD_NAME: ClassVar[str] = "updated_at"

    @classmethod
    def now(cls) -> "UserUpdatedAt":
        return cls(utc_now())

    def touch(self) -> "UserUpdatedAt":
        return UserUpdatedAt.now()
