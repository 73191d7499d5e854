"""Dependency Injection.

FastAPI Depends 기반으로 Use Case를 조립합니다.
각 Use Case의 execute는 조립 시점에 log_use_case 로 감싸집니다.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from typing import Awaitable, Callable

from fastapi import Depends, Request

from apps.users.application.commands import (
    CreateUserCommand,
    DeleteUserCommand,
    UpdateUserCommand,
)
from apps.users.application.common.dto import (
    CreateUserRequest,
    DeleteUserRequest,
    DeleteUserResponse,
    GetUserRequest,
    UpdateUserRequest,
    UserListResponse,
    UserResponse,
)
from apps.users.application.common.instrumentation import log_use_case
from apps.users.application.common.ports import UserRepository
from apps.users.application.queries import GetAllUsersQuery, GetUserQuery
from apps.users.domain.ports import UserIdGenerator
from apps.users.infrastructure.adapters import UuidUserIdGenerator
from apps.users.infrastructure.persistence_postgres import Database, SqlaUserRepository

CreateUser = Callable[[CreateUserRequest], Awaitable[UserResponse]]
GetUser = Callable[[GetUserRequest], Awaitable[UserResponse]]
GetAllUsers = Callable[[], Awaitable[UserListResponse]]
UpdateUser = Callable[[UpdateUserRequest], Awaitable[UserResponse]]
DeleteUser = Callable[[DeleteUserRequest], Awaitable[DeleteUserResponse]]


async def get_user_repository(request: Request) -> AsyncIterator[UserRepository]:
    """요청 단위 UserRepository.

    memory 백엔드면 앱 수명 동안 공유되는 저장소를, 아니면 요청 세션 기반
    SqlaUserRepository를 제공합니다.
    """
    memory_repository = getattr(request.app.state, "memory_repository", None)
    if memory_repository is not None:
        yield memory_repository
        return

    database: Database = request.app.state.database
    async with database.session() as session:
        yield SqlaUserRepository(session)


def get_user_id_generator() -> UserIdGenerator:
    return UuidUserIdGenerator()


def get_create_user(
    repository: UserRepository = Depends(get_user_repository),
    id_generator: UserIdGenerator = Depends(get_user_id_generator),
) -> CreateUser:
    return log_use_case("CreateUser", CreateUserCommand(repository, id_generator).execute)


def get_get_user(repository: UserRepository = Depends(get_user_repository)) -> GetUser:
    return log_use_case("GetUser", GetUserQuery(repository).execute)


def get_get_all_users(repository: UserRepository = Depends(get_user_repository)) -> GetAllUsers:
    return log_use_case("GetAllUsers", GetAllUsersQuery(repository).execute)


def get_update_user(repository: UserRepository = Depends(get_user_repository)) -> UpdateUser:
    return log_use_case("UpdateUser", UpdateUserCommand(repository).execute)


def get_delete_user(repository: UserRepository = Depends(get_user_repository)) -> DeleteUser:
    return log_use_case("DeleteUser", DeleteUserCommand(repository).execute)
