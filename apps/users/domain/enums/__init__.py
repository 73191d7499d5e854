"""Domain Enums."""

from apps.users.domain.enums.user_status import UserStatus

__all__ = ["UserStatus"]
