from .auth import router as auth_router
from .films import router as films_router
from .people import router as people_router
from .roles import router as roles_router
from .errors import register_exception_handlers

__all__ = [
    "auth_router",
    "films_router",
    "people_router",
    "roles_router",
    "register_exception_handlers",
]
