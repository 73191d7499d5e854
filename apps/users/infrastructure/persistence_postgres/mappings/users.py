"""Users Table Mapping.

도메인 User는 불변 객체이므로 ORM 매핑 대신 Core Table과
UserPrimitives(평면 레코드) 변환만 사용합니다.
"""

from __future__ import annotations

from sqlalchemy import Column, DateTime, Index, MetaData, String, Table, text

from apps.users.domain.enums import UserStatus

users_metadata = MetaData()

EMAIL_ACTIVE_UNIQUE_INDEX = "uq_users_email_active"

_ACTIVE_ONLY = text(f"state <> '{UserStatus.DELETED.value}'")

users_table = Table(
    "users",
    users_metadata,
    Column("id", String(64), primary_key=True),
    Column("name", String(50), nullable=False),
    Column("last_name", String(50), nullable=False),
    Column("email", String(320), nullable=False),
    Column("state", String(16), nullable=False, default=UserStatus.ACTIVE.value),
    Column("created_at", DateTime(timezone=True), nullable=False),
    Column("updated_at", DateTime(timezone=True), nullable=False),
    Index("ix_users_state", "state"),
    # 삭제되지 않은 사용자 사이에서만 이메일 유일성 보장
    Index(
        EMAIL_ACTIVE_UNIQUE_INDEX,
        "email",
        unique=True,
        postgresql_where=_ACTIVE_ONLY,
        sqlite_where=_ACTIVE_ONLY,
    ),
)

__all__ = ["EMAIL_ACTIVE_UNIQUE_INDEX", "users_metadata", "users_table"]
