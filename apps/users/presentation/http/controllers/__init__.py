"""HTTP Controllers."""

from fastapi import APIRouter

from apps.users.presentation.http.controllers import health, users
from apps.users.setup.constants import API_PREFIX

api_router = APIRouter(prefix=API_PREFIX)
api_router.include_router(users.router)

health_router = APIRouter()
health_router.include_router(health.router)

__all__ = ["api_router", "health_router"]
