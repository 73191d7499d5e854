"""UserId Value Object."""

from __future__ import annotations

from dataclasses import dataclass

from apps.users.domain.value_objects.base import ValueObject, require_text


@dataclass(frozen=True, slots=True)
class UserId(ValueObject):
    """사용자 식별자 Value Object.

    불투명(opaque) 문자열입니다. 공백만 아니면 외부에서 받은 값을 그대로 유지합니다.
    """

    value: str

    def __post_init__(self) -> None:
        require_text(self.value, "User ID")

    def __hash__(self) -> int:
        return hash(self.value)
