"""Value Object Base Class.

Value Object의 특징:
- 불변(Immutable)
- 동등성은 값으로 비교 (ID가 아님)
- 자기 검증(Self-validation): 생성에 성공한 인스턴스는 항상 유효

dataclass로 구현 시:
    @dataclass(frozen=True, slots=True)
    class UserEmail(ValueObject):
        value: str

        def __post_init__(self) -> None:
            ...
"""

from __future__ import annotations

from abc import ABC
from typing import Any

from apps.users.domain.exceptions import DomainError


class ValueObject(ABC):
    """Value Object 베이스 클래스.

    - 같은 종류의 값 객체끼리만 동등 비교 (dataclass eq)
    - None 과의 비교는 항상 False
    """

    __slots__ = ()

    def __str__(self) -> str:
        return str(getattr(self, "value"))

    def _normalize(self, value: Any) -> None:
        """frozen dataclass의 value 필드를 정규화된 값으로 교체."""
        object.__setattr__(self, "value", value)


def require_text(value: str | None, field: str) -> str:
    """빈 값 검사 후 trim된 문자열 반환.

    Raises:
        DomainError: EMPTY_VALUE
    """
    if value is None or not str(value).strip():
        raise DomainError.empty_value(field)
    return str(value).strip()
