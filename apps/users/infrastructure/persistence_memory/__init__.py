"""In-memory Persistence."""

from apps.users.infrastructure.persistence_memory.user_repository_memory import (
    InMemoryUserRepository,
)

__all__ = ["InMemoryUserRepository"]
