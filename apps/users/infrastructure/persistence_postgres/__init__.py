"""PostgreSQL Persistence (SQLAlchemy async)."""

from apps.users.infrastructure.persistence_postgres.adapters import SqlaUserRepository
from apps.users.infrastructure.persistence_postgres.database import Database

__all__ = ["Database", "SqlaUserRepository"]
