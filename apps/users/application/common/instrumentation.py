"""Use Case Instrumentation.

Use Case 진입점(execute)을 감싸 시작/완료/실패와 소요 시간을 로깅합니다.
클래스 데코레이터가 아니라 의존성 조립 시점에 명시적으로 감쌉니다.

Example:
    >>> create_user = log_use_case("CreateUser", CreateUserCommand(repo, gen).execute)
    >>> await create_user(CreateUserRequest(...))
"""

from __future__ import annotations

import functools
import logging
import time
from typing import Awaitable, Callable, ParamSpec, TypeVar

from apps.users.domain.exceptions import DomainError

logger = logging.getLogger(__name__)

P = ParamSpec("P")
R = TypeVar("R")


def _elapsed_ms(start_time: float) -> float:
    return round((time.perf_counter() - start_time) * 1000, 2)


def log_use_case(
    name: str,
    execute: Callable[P, Awaitable[R]],
) -> Callable[P, Awaitable[R]]:
    """Use Case 실행 함수를 로깅 래퍼로 감쌉니다.

    예외는 그대로 다시 발생시킵니다 (재시도/억제 없음).

    Args:
        name: 로그에 남길 Use Case 이름
        execute: 감쌀 코루틴 함수

    Returns:
        동일한 시그니처의 코루틴 함수
    """

    @functools.wraps(execute)
    async def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        start_time = time.perf_counter()

        logger.debug("Use case started", extra={"use_case": name})

        try:
            result = await execute(*args, **kwargs)
        except DomainError as e:
            logger.warning(
                "Use case failed",
                extra={
                    "use_case": name,
                    "elapsed_ms": _elapsed_ms(start_time),
                    "success": False,
                    "error_kind": e.kind.value,
                    "error_field": e.field,
                },
            )
            raise
        except Exception as e:
            logger.exception(
                "Use case crashed",
                extra={
                    "use_case": name,
                    "elapsed_ms": _elapsed_ms(start_time),
                    "success": False,
                    "error_type": type(e).__name__,
                },
            )
            raise

        logger.info(
            "Use case completed",
            extra={
                "use_case": name,
                "elapsed_ms": _elapsed_ms(start_time),
                "success": True,
            },
        )
        return result

    return wrapper
