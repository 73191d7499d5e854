"""UserName / UserLastName Value Objects."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from apps.users.domain.exceptions import DomainError
from apps.users.domain.value_objects.base import ValueObject, require_text

NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 50


@dataclass(frozen=True, slots=True)
class _PersonName(ValueObject):
    """이름 계열 값 객체 공통 검증.

    trim 후 길이가 [2, 50] 범위여야 합니다.
    """

    FIELD_NAME: ClassVar[str] = "Name"

    value: str

    def __post_init__(self) -> None:
        trimmed = require_text(self.value, self.FIELD_NAME)
        if not NAME_MIN_LENGTH <= len(trimmed) <= NAME_MAX_LENGTH:
            raise DomainError.invalid_length(
                self.FIELD_NAME,
                NAME_MIN_LENGTH,
                NAME_MAX_LENGTH,
                len(trimmed),
            )
        self._normalize(trimmed)


@dataclass(frozen=True, slots=True)
class UserName(_PersonName):
    """사용자 이름."""

    FIELD_NAME: ClassVar[str] = "Name"


@dataclass(frozen=True, slots=True)
class UserLastName(_PersonName):
    """사용자 성."""

    FIELD_NAME: ClassVar[str] = "Last name"
