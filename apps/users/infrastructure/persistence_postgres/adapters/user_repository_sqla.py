"""SQLAlchemy User Repository.

UserRepository 포트의 구현체입니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from sqlalchemy import insert, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from apps.users.domain.entities.user import User, UserPrimitives
from apps.users.domain.enums import UserStatus
from apps.users.domain.exceptions import DomainError
from apps.users.domain.value_objects.email import UserEmail
from apps.users.domain.value_objects.user_id import UserId
from apps.users.infrastructure.persistence_postgres.mappings.users import (
    EMAIL_ACTIVE_UNIQUE_INDEX,
    users_table,
)

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession
    from sqlalchemy.sql import Executable

logger = logging.getLogger(__name__)

_NOT_DELETED = users_table.c.state != UserStatus.DELETED.value


def _row_to_entity(row: Any) -> User:
    return User.from_primitives(UserPrimitives(**dict(row)))


def _reason(error: SQLAlchemyError) -> str:
    """드라이버 메시지만 사용 (SQL 문/파라미터 제외)."""
    return str(getattr(error, "orig", None) or error)


def _is_email_conflict(error: IntegrityError) -> bool:
    # PostgreSQL 은 인덱스 이름, SQLite 는 컬럼 이름을 보고합니다
    detail = str(error.orig)
    return EMAIL_ACTIVE_UNIQUE_INDEX in detail or "users.email" in detail


class SqlaUserRepository:
    """SQLAlchemy 기반 User Repository.

    UserRepository 구현체.
    - 조회는 항상 Deleted 상태를 제외합니다.
    - 쓰기 연산은 자체적으로 커밋하고, 실패 시 롤백 후 DomainError로 변환합니다.
    """

    def __init__(self, session: "AsyncSession") -> None:
        self._session = session

    async def save(self, user: User) -> None:
        """신규 사용자 INSERT."""
        stmt = insert(users_table).values(**user.to_primitives().as_dict())
        await self._write("save", stmt, user)

    async def update(self, user: User) -> None:
        """ID 기준 전체 컬럼 UPDATE. 대상 행이 없으면 STORAGE_FAILURE."""
        values = user.to_primitives().as_dict()
        user_id = values.pop("id")
        stmt = update(users_table).where(users_table.c.id == user_id).values(**values)
        await self._write("update", stmt, user, expect_row=True)

    async def find_by_id(self, user_id: UserId) -> User | None:
        stmt = select(users_table).where(users_table.c.id == user_id.value, _NOT_DELETED)
        row = await self._fetch_one("find_by_id", stmt)
        return _row_to_entity(row) if row is not None else None

    async def find_by_email(self, email: UserEmail) -> User | None:
        stmt = select(users_table).where(users_table.c.email == email.value, _NOT_DELETED)
        row = await self._fetch_one("find_by_email", stmt)
        return _row_to_entity(row) if row is not None else None

    async def find_all(self) -> list[User]:
        stmt = select(users_table).where(_NOT_DELETED).order_by(users_table.c.created_at)
        logger.debug("Repository operation", extra={"operation": "find_all"})
        try:
            result = await self._session.execute(stmt)
        except SQLAlchemyError as e:
            raise DomainError.storage_failure("find_all", _reason(e)) from e
        return [_row_to_entity(row) for row in result.mappings().all()]

    # -------------------------------------------------------------------------
    # Internal
    # -------------------------------------------------------------------------

    async def _fetch_one(self, operation: str, stmt: "Executable") -> Any:
        logger.debug("Repository operation", extra={"operation": operation})
        try:
            result = await self._session.execute(stmt)
        except SQLAlchemyError as e:
            raise DomainError.storage_failure(operation, _reason(e)) from e
        return result.mappings().first()

    async def _write(
        self,
        operation: str,
        stmt: "Executable",
        user: User,
        *,
        expect_row: bool = False,
    ) -> None:
        logger.debug(
            "Repository operation",
            extra={"operation": operation, "user_id": user.id_.value},
        )
        try:
            result = await self._session.execute(stmt)
            if expect_row and result.rowcount == 0:
                await self._session.rollback()
                raise DomainError.storage_failure(operation, f"no row for id '{user.id_.value}'")
            await self._session.commit()
        except IntegrityError as e:
            await self._session.rollback()
            if _is_email_conflict(e):
                raise DomainError.already_exists(user.email.value) from e
            raise DomainError.storage_failure(operation, _reason(e)) from e
        except SQLAlchemyError as e:
            await self._session.rollback()
            logger.error(
                "Repository write failed",
                extra={"operation": operation, "user_id": user.id_.value},
            )
            raise DomainError.storage_failure(operation, _reason(e)) from e
