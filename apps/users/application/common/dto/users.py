"""User DTOs.

Use Case 입출력용 평면 레코드입니다.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from apps.users.domain.entities.user import User


@dataclass(frozen=True, slots=True)
class CreateUserRequest:
    name: str
    last_name: str
    email: str


@dataclass(frozen=True, slots=True)
class GetUserRequest:
    id: str


@dataclass(frozen=True, slots=True)
class UpdateUserRequest:
    """수정 요청. None 필드는 '전달되지 않음'을 의미합니다."""

    id: str
    name: str | None = None
    last_name: str | None = None
    email: str | None = None

    @property
    def has_changes(self) -> bool:
        return any(v is not None for v in (self.name, self.last_name, self.email))


@dataclass(frozen=True, slots=True)
class DeleteUserRequest:
    id: str


@dataclass(frozen=True, slots=True)
class UserResponse:
    """단일 사용자 응답 (User 프로젝션)."""

    id: str
    name: str
    last_name: str
    email: str
    state: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, user: User) -> "UserResponse":
        p = user.to_primitives()
        return cls(
            id=p.id,
            name=p.name,
            last_name=p.last_name,
            email=p.email,
            state=p.state,
            created_at=p.created_at,
            updated_at=p.updated_at,
        )


@dataclass(frozen=True, slots=True)
class UserListResponse:
    users: list[UserResponse] = field(default_factory=list)
    total: int = 0


@dataclass(frozen=True, slots=True)
class DeleteUserResponse:
    id: str
    message: str
