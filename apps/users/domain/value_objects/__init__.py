"""Domain Value Objects."""

from apps.users.domain.value_objects.base import ValueObject
from apps.users.domain.value_objects.email import UserEmail
from apps.users.domain.value_objects.timestamps import UserCreatedAt, UserUpdatedAt
from apps.users.domain.value_objects.user_id import UserId
from apps.users.domain.value_objects.user_name import UserLastName, UserName
from apps.users.domain.value_objects.user_state import UserState

__all__ = [
    "ValueObject",
    "UserId",
    "UserName",
    "UserLastName",
    "UserEmail",
    "UserState",
    "UserCreatedAt",
    "UserUpdatedAt",
]
