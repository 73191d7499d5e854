"""Infrastructure Adapters."""

from apps.users.infrastructure.adapters.user_id_generator_uuid import UuidUserIdGenerator

__all__ = ["UuidUserIdGenerator"]
