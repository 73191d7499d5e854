"""Users 서비스 공용 pytest fixtures."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable

import pytest

from apps.users.domain.entities import User, UserPrimitives
from apps.users.domain.value_objects import UserId
from apps.users.infrastructure.persistence_memory import InMemoryUserRepository


@pytest.fixture
def primitives() -> UserPrimitives:
    """정상 평면 레코드."""
    return UserPrimitives(
        id="7d0f6c9e-3f3b-4d8a-9a57-0a8f6b1c2d3e",
        name="Juan",
        last_name="Pérez",
        email="juan.perez@example.com",
        state="Active",
        created_at=datetime(2024, 1, 1, 9, 0, tzinfo=timezone.utc),
        updated_at=datetime(2024, 1, 2, 9, 0, tzinfo=timezone.utc),
    )


@pytest.fixture
def make_user() -> Callable[..., User]:
    """User 팩토리. 필요한 필드만 덮어씁니다."""

    def _make(
        id_: str = "user-1",
        name: str = "Juan",
        last_name: str = "Pérez",
        email: str = "juan.perez@example.com",
        state: str = "Active",
    ) -> User:
        return User.from_primitives(
            UserPrimitives(
                id=id_,
                name=name,
                last_name=last_name,
                email=email,
                state=state,
                created_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
                updated_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
            )
        )

    return _make


@pytest.fixture
def memory_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


class SequentialUserIdGenerator:
    """예측 가능한 ID 생성기 (user-1, user-2, ...)."""

    def __init__(self, prefix: str = "user") -> None:
        self._prefix = prefix
        self._count = 0

    def __call__(self) -> UserId:
        self._count += 1
        return UserId(f"{self._prefix}-{self._count}")


@pytest.fixture
def id_generator() -> SequentialUserIdGenerator:
    return SequentialUserIdGenerator()
