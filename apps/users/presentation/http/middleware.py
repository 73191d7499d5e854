"""HTTP Request Logging.

모든 요청의 method, path, status_code, duration_ms 를 기록합니다.
Use Case 에 도달하기 전에 끝나는 요청(422, 404 라우트, health)도 포함됩니다.
쿼리 스트링은 남기지 않습니다.
"""

from __future__ import annotations

import logging
import time
from typing import Awaitable, Callable

from fastapi import FastAPI, Request, Response

logger = logging.getLogger(__name__)


def _duration_ms(start_time: float) -> float:
    return round((time.perf_counter() - start_time) * 1000, 2)


def register_request_logging(app: FastAPI) -> None:
    """요청 로깅 미들웨어 등록."""

    @app.middleware("http")
    async def log_requests(
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        start_time = time.perf_counter()
        method = request.method
        path = request.url.path

        logger.debug("Incoming request", extra={"method": method, "path": path})

        try:
            response = await call_next(request)
        except Exception as e:
            logger.error(
                "Request failed",
                extra={
                    "method": method,
                    "path": path,
                    "status_code": 500,
                    "duration_ms": _duration_ms(start_time),
                    "error_type": type(e).__name__,
                },
            )
            raise

        logger.info(
            "Request completed",
            extra={
                "method": method,
                "path": path,
                "status_code": response.status_code,
                "duration_ms": _duration_ms(start_time),
            },
        )
        return response
