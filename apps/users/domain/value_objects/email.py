"""UserEmail Value Object."""

from __future__ import annotations

import re
from dataclasses import dataclass

from apps.users.domain.exceptions import DomainError
from apps.users.domain.value_objects.base import ValueObject, require_text

# local@domain.tld (각 구간은 공백/@ 가 없는 1자 이상)
EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")


@dataclass(frozen=True, slots=True)
class UserEmail(ValueObject):
    """이메일 Value Object.

    trim 후 형식을 검사하고 소문자로 정규화합니다.
    """

    value: str

    def __post_init__(self) -> None:
        trimmed = require_text(self.value, "Email")
        if not EMAIL_PATTERN.fullmatch(trimmed):
            raise DomainError.invalid_format("Email", trimmed)
        self._normalize(trimmed.lower())

    def __hash__(self) -> int:
        return hash(self.value)
