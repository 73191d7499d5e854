"""Application Ports."""

from apps.users.application.common.ports.user_repository import UserRepository

__all__ = ["UserRepository"]
