"""User commands."""

from apps.users.application.commands.create_user import CreateUserCommand
from apps.users.application.commands.delete_user import DeleteUserCommand
from apps.users.application.commands.update_user import UpdateUserCommand

__all__ = [
    "CreateUserCommand",
    "UpdateUserCommand",
    "DeleteUserCommand",
]
