"""User HTTP Schemas.

필드 제약은 두지 않습니다. 검증은 도메인 값 객체가 단일 책임으로 수행합니다.
JSON 필드명은 camelCase (lastName, createdAt, updatedAt) 입니다.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from apps.users.application.common.dto import (
    DeleteUserResponse,
    UserListResponse,
    UserResponse,
)


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class UserCreateRequest(_CamelModel):
    """사용자 생성 요청."""

    name: str
    last_name: str
    email: str


class UserUpdateRequest(_CamelModel):
    """사용자 수정 요청. 생략하거나 null 인 필드는 변경하지 않습니다."""

    name: str | None = None
    last_name: str | None = None
    email: str | None = None


class UserSchema(_CamelModel):
    """사용자 응답."""

    id: str
    name: str
    last_name: str
    email: str
    state: str = Field(..., description="Active | Suspended | Deleted")
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_dto(cls, dto: UserResponse) -> "UserSchema":
        return cls(
            id=dto.id,
            name=dto.name,
            last_name=dto.last_name,
            email=dto.email,
            state=dto.state,
            created_at=dto.created_at,
            updated_at=dto.updated_at,
        )


class UserListSchema(_CamelModel):
    users: list[UserSchema]
    total: int

    @classmethod
    def from_dto(cls, dto: UserListResponse) -> "UserListSchema":
        return cls(users=[UserSchema.from_dto(u) for u in dto.users], total=dto.total)


class UserDeletedSchema(_CamelModel):
    id: str
    message: str

    @classmethod
    def from_dto(cls, dto: DeleteUserResponse) -> "UserDeletedSchema":
        return cls(id=dto.id, message=dto.message)
