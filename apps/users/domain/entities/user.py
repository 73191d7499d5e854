"""User Aggregate.

모든 변경 연산은 수신 객체를 바꾸지 않고 새 인스턴스를 반환합니다.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime

from apps.users.domain.entities.base import Entity
from apps.users.domain.value_objects import (
    UserCreatedAt,
    UserEmail,
    UserId,
    UserLastName,
    UserName,
    UserState,
    UserUpdatedAt,
)
from apps.users.domain.value_objects.timestamps import utc_now


@dataclass(frozen=True, slots=True)
class UserPrimitives:
    """User의 평면(primitive) 표현.

    영속성 협력자와 응답 DTO로 넘어가는 유일한 표현입니다.
    """

    id: str
    name: str
    last_name: str
    email: str
    state: str
    created_at: datetime
    updated_at: datetime

    def as_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "last_name": self.last_name,
            "email": self.email,
            "state": self.state,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }


@dataclass(frozen=True, slots=True, eq=False)
class User(Entity[UserId]):
    """사용자 Aggregate Root."""

    id_: UserId
    name: UserName
    last_name: UserLastName
    email: UserEmail
    state: UserState
    created_at: UserCreatedAt
    updated_at: UserUpdatedAt

    def __repr__(self) -> str:
        return f"User(id_={self.id_.value!r}, state={self.state.value!r})"

    # -------------------------------------------------------------------------
    # Factories
    # -------------------------------------------------------------------------

    @classmethod
    def create(
        cls,
        id_: UserId,
        name: UserName,
        last_name: UserLastName,
        email: UserEmail,
    ) -> "User":
        """신규 사용자 생성.

        상태는 Active, 생성/수정 시각은 동일한 현재 시각으로 설정됩니다.
        """
        now = utc_now()
        return cls(
            id_=id_,
            name=name,
            last_name=last_name,
            email=email,
            state=UserState.active(),
            created_at=UserCreatedAt(now),
            updated_at=UserUpdatedAt(now),
        )

    @classmethod
    def from_primitives(cls, primitives: UserPrimitives) -> "User":
        """영속화된 평면 레코드에서 복원.

        Raises:
            DomainError: 레코드가 값 객체 불변식을 위반한 경우
        """
        return cls(
            id_=UserId(primitives.id),
            name=UserName(primitives.name),
            last_name=UserLastName(primitives.last_name),
            email=UserEmail(primitives.email),
            state=UserState(primitives.state),
            created_at=UserCreatedAt(primitives.created_at),
            updated_at=UserUpdatedAt(primitives.updated_at),
        )

    def to_primitives(self) -> UserPrimitives:
        return UserPrimitives(
            id=self.id_.value,
            name=self.name.value,
            last_name=self.last_name.value,
            email=self.email.value,
            state=self.state.value,
            created_at=self.created_at.value,
            updated_at=self.updated_at.value,
        )

    # -------------------------------------------------------------------------
    # Field updates
    # -------------------------------------------------------------------------

    def update(
        self,
        *,
        name: UserName | None = None,
        last_name: UserLastName | None = None,
        email: UserEmail | None = None,
    ) -> "User":
        """전달된 필드만 교체하고 updated_at을 갱신한 새 User 반환."""
        return replace(
            self,
            name=name if name is not None else self.name,
            last_name=last_name if last_name is not None else self.last_name,
            email=email if email is not None else self.email,
            updated_at=self.updated_at.touch(),
        )

    def update_name(self, name: UserName) -> "User":
        return self.update(name=name)

    def update_last_name(self, last_name: UserLastName) -> "User":
        return self.update(last_name=last_name)

    def update_email(self, email: UserEmail) -> "User":
        return self.update(email=email)

    # -------------------------------------------------------------------------
    # State transitions
    # -------------------------------------------------------------------------

    def change_state(self, new_state: UserState) -> "User":
        """상태 교체. 전이 제한은 두지 않습니다."""
        return replace(self, state=new_state, updated_at=self.updated_at.touch())

    def suspend(self) -> "User":
        return self.change_state(UserState.suspended())

    def activate(self) -> "User":
        return self.change_state(UserState.active())

    def delete(self) -> "User":
        """소프트 삭제 (Deleted 상태로 전이)."""
        return self.change_state(UserState.deleted())

    @property
    def is_deleted(self) -> bool:
        return self.state.is_deleted
