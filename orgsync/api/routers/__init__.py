"""API routers."""

from .auth import router as auth_router
from .health import router as health_router
from .integrations import router as integrations_router
from .organizations import router as organizations_router
from .users import router as users_router

__all__ = [
    "auth_router",
    "health_router",
    "integrations_router",
    "organizations_router",
    "users_router",
]
