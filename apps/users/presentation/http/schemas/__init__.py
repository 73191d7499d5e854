"""HTTP request/response schemas."""

from apps.users.presentation.http.schemas.common import (
    ErrorResponse,
    HealthResponse,
    ReadinessResponse,
)
from apps.users.presentation.http.schemas.user import (
    UserCreateRequest,
    UserDeletedSchema,
    UserListSchema,
    UserSchema,
    UserUpdateRequest,
)

__all__ = [
    "ErrorResponse",
    "HealthResponse",
    "ReadinessResponse",
    "UserCreateRequest",
    "UserUpdateRequest",
    "UserSchema",
    "UserListSchema",
    "UserDeletedSchema",
]
