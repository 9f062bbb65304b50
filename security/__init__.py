from .context import (
    ROLE_ADMIN,
    ROLE_USER,
    AccessDeniedException,
    Principal,
    authenticated_as,
    current_principal,
    get_principal,
    has_role,
    pre_authorize,
)
from .tokens import InvalidTokenError, create_access_token, decode_access_token
from .users import authenticate
from .middleware import JwtAuthMiddleware

__all__ = [
    "ROLE_ADMIN",
    "ROLE_USER",
    "AccessDeniedException",
    "Principal",
    "authenticated_as",
    "current_principal",
    "get_principal",
    "has_role",
    "pre_authorize",
    "InvalidTokenError",
    "create_access_token",
    "decode_access_token",
    "authenticate",
    "JwtAuthMiddleware",
]
