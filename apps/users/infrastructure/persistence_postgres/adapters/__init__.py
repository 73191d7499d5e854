"""Infrastructure adapters implementing application ports."""

from apps.users.infrastructure.persistence_postgres.adapters.user_repository_sqla import (
    SqlaUserRepository,
)

__all__ = ["SqlaUserRepository"]
