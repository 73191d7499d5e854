"""Entity Base Class.

Clean Architecture에서 Entity는:
- 고유한 식별자(ID)를 가짐
- 동등성은 식별자로만 비교 (나머지 필드와 무관)
- ORM과 분리된 순수 Python 객체
"""

from __future__ import annotations

from typing import Generic, Hashable, TypeVar

T = TypeVar("T", bound=Hashable)


class Entity(Generic[T]):
    """모든 Entity의 베이스 클래스.

    Generic[T]로 ID 타입을 명시합니다. 서브클래스는 ``id_`` 속성을 제공해야 합니다.

    Example:
        >>> @dataclass(frozen=True, slots=True, eq=False)
        ... class User(Entity[UserId]):
        ...     id_: UserId
        ...     name: UserName
    """

    __slots__ = ()

    id_: T

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Entity):
            return NotImplemented
        return type(self) is type(other) and self.id_ == other.id_

    def __hash__(self) -> int:
        return hash(self.id_)
