"""Application DTOs (Data Transfer Objects)."""

from apps.users.application.common.dto.users import (
    CreateUserRequest,
    DeleteUserRequest,
    DeleteUserResponse,
    GetUserRequest,
    UpdateUserRequest,
    UserListResponse,
    UserResponse,
)

__all__ = [
    "CreateUserRequest",
    "GetUserRequest",
    "UpdateUserRequest",
    "DeleteUserRequest",
    "UserResponse",
    "UserListResponse",
    "DeleteUserResponse",
]
