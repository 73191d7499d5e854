"""Users API Application."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from apps.users.infrastructure.persistence_memory import InMemoryUserRepository
from apps.users.infrastructure.persistence_postgres import Database
from apps.users.presentation.http.controllers import api_router, health_router
from apps.users.presentation.http.errors import register_exception_handlers
from apps.users.presentation.http.middleware import register_request_logging
from apps.users.setup.config import Settings, get_settings
from apps.users.setup.constants import API_PREFIX, SERVICE_NAME, SERVICE_VERSION
from apps.users.setup.logging import configure_logging

logger = logging.getLogger(__name__)


def _build_lifespan(settings: Settings):
    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        """startup 에서 저장소 협력자를 열고 shutdown 에서 닫습니다."""
        if settings.repository_backend == "memory":
            app.state.memory_repository = InMemoryUserRepository()
            app.state.database = None
            logger.info("Using in-memory user repository")
            yield
            return

        database = Database(
            settings.database_url,
            echo=settings.database_echo,
            pool_size=settings.database_pool_size,
        )
        await database.connect()
        if settings.database_create_schema:
            await database.create_schema()
        app.state.database = database
        app.state.memory_repository = None
        try:
            yield
        finally:
            await database.dispose()

    return lifespan


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()

    configure_logging(
        log_level=settings.log_level,
        json_format=settings.log_format == "json",
        environment=settings.environment,
    )

    app = FastAPI(
        title=settings.app_name,
        description="User management service",
        version=SERVICE_VERSION,
        docs_url=f"{API_PREFIX}/users/docs",
        redoc_url=f"{API_PREFIX}/users/redoc",
        openapi_url=f"{API_PREFIX}/users/openapi.json",
        lifespan=_build_lifespan(settings),
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_request_logging(app)
    register_exception_handlers(app)
    app.include_router(health_router)
    app.include_router(api_router)

    logger.info(
        "Application created",
        extra={"service": SERVICE_NAME, "repository_backend": settings.repository_backend},
    )
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
