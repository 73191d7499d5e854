"""User queries."""

from apps.users.application.queries.get_all_users import GetAllUsersQuery
from apps.users.application.queries.get_user import GetUserQuery

__all__ = ["GetUserQuery", "GetAllUsersQuery"]
