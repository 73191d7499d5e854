"""Database Lifecycle.

엔진/세션 팩토리를 모듈 전역이 아닌 명시적 수명주기를 가진 객체로 관리합니다.
FastAPI lifespan에서 connect → (create_schema) → dispose 순으로 호출됩니다.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from apps.users.infrastructure.persistence_postgres.mappings.users import users_metadata

logger = logging.getLogger(__name__)


class Database:
    """비동기 DB 연결 수명주기 관리자."""

    def __init__(self, url: str, *, echo: bool = False, pool_size: int = 5) -> None:
        self._url = url
        self._echo = echo
        self._pool_size = pool_size
        self._engine: AsyncEngine | None = None
        self._session_factory: async_sessionmaker[AsyncSession] | None = None

    @property
    def is_connected(self) -> bool:
        return self._engine is not None

    @property
    def engine(self) -> AsyncEngine:
        if self._engine is None:
            raise RuntimeError("Database is not connected")
        return self._engine

    async def connect(self) -> None:
        """엔진과 세션 팩토리 생성."""
        if self._engine is not None:
            return

        self._engine = create_async_engine(
            self._url,
            echo=self._echo,
            pool_pre_ping=True,
            pool_size=self._pool_size,
        )
        self._session_factory = async_sessionmaker(
            bind=self._engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )
        logger.info("Database engine created", extra={"pool_size": self._pool_size})

    async def create_schema(self) -> None:
        """users 테이블/인덱스 생성 (존재하면 무시)."""
        async with self.engine.begin() as conn:
            await conn.run_sync(users_metadata.create_all)
        logger.info("Database schema ensured")

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """요청 단위 세션."""
        if self._session_factory is None:
            raise RuntimeError("Database is not connected")
        async with self._session_factory() as session:
            yield session

    async def ping(self) -> bool:
        """SELECT 1 로 연결 확인."""
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
        except Exception:
            logger.warning("Database ping failed", exc_info=True)
            return False
        return True

    async def dispose(self) -> None:
        """커넥션 풀 정리."""
        if self._engine is None:
            return
        await self._engine.dispose()
        self._engine = None
        self._session_factory = None
        logger.info("Database engine disposed")
