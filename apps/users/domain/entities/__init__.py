"""Domain Entities."""

from apps.users.domain.entities.user import User, UserPrimitives

__all__ = ["User", "UserPrimitives"]
