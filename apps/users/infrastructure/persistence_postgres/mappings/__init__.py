"""Table mappings."""

from apps.users.infrastructure.persistence_postgres.mappings.users import (
    EMAIL_ACTIVE_UNIQUE_INDEX,
    users_metadata,
    users_table,
)

__all__ = ["EMAIL_ACTIVE_UNIQUE_INDEX", "users_metadata", "users_table"]
