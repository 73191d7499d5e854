"""Users Controller."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from apps.users.application.common.dto import (
    CreateUserRequest,
    DeleteUserRequest,
    GetUserRequest,
    UpdateUserRequest,
)
from apps.users.presentation.http.schemas import (
    ErrorResponse,
    UserCreateRequest,
    UserDeletedSchema,
    UserListSchema,
    UserSchema,
    UserUpdateRequest,
)
from apps.users.setup.dependencies import (
    CreateUser,
    DeleteUser,
    GetAllUsers,
    GetUser,
    UpdateUser,
    get_create_user,
    get_delete_user,
    get_get_all_users,
    get_get_user,
    get_update_user,
)

router = APIRouter(prefix="/users", tags=["users"])

_NOT_FOUND = {404: {"model": ErrorResponse}}


@router.post(
    "",
    response_model=UserSchema,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
    summary="Create user",
)
async def create_user(
    payload: UserCreateRequest,
    create: CreateUser = Depends(get_create_user),
) -> UserSchema:
    result = await create(
        CreateUserRequest(name=payload.name, last_name=payload.last_name, email=payload.email)
    )
    return UserSchema.from_dto(result)


@router.get("", response_model=UserListSchema, summary="List users")
async def list_users(get_all: GetAllUsers = Depends(get_get_all_users)) -> UserListSchema:
    return UserListSchema.from_dto(await get_all())


@router.get("/{user_id}", response_model=UserSchema, responses=_NOT_FOUND, summary="Get user")
async def get_user(user_id: str, get: GetUser = Depends(get_get_user)) -> UserSchema:
    return UserSchema.from_dto(await get(GetUserRequest(id=user_id)))


@router.put(
    "/{user_id}",
    response_model=UserSchema,
    responses={**_NOT_FOUND, 400: {"model": ErrorResponse}},
    summary="Update user",
)
async def update_user(
    user_id: str,
    payload: UserUpdateRequest,
    update: UpdateUser = Depends(get_update_user),
) -> UserSchema:
    result = await update(
        UpdateUserRequest(
            id=user_id,
            name=payload.name,
            last_name=payload.last_name,
            email=payload.email,
        )
    )
    return UserSchema.from_dto(result)


@router.delete(
    "/{user_id}",
    response_model=UserDeletedSchema,
    responses=_NOT_FOUND,
    summary="Delete user (soft delete)",
)
async def delete_user(user_id: str, delete: DeleteUser = Depends(get_delete_user)) -> UserDeletedSchema:
    return UserDeletedSchema.from_dto(await delete(DeleteUserRequest(id=user_id)))
