"""User Status Enum."""

from enum import Enum


class UserStatus(str, Enum):
    """사용자 생명주기 상태."""

    ACTIVE = "Active"
    SUSPENDED = "Suspended"
    DELETED = "Deleted"
