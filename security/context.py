"""
Authentication context and method-level authorization.

The auth middleware stores the caller in ``current_principal`` for the
duration of a request. Service methods decorated with ``pre_authorize``
check it before running, so every entry point (REST or GraphQL) is covered.
"""

import functools
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import FrozenSet, Optional

ROLE_ADMIN = "ADMIN"
ROLE_USER = "USER"


class AccessDeniedException(Exception):
    def __init__(self, message: str = "Access is denied"):
        super().__init__(message)
        self.message = message


@dataclass(frozen=True)
class Principal:
    username: str
    roles: FrozenSet[str] = field(default_factory=frozenset)


current_principal: ContextVar[Optional[Principal]] = ContextVar("current_principal", default=None)


def get_principal() -> Optional[Principal]:
    return current_principal.get()


def has_role(role: str, principal: Optional[Principal] = None) -> bool:
    principal = principal if principal is not None else get_principal()
    return principal is not None and role in principal.roles


@contextmanager
def authenticated_as(principal: Optional[Principal]):
    """Runs the block with *principal* as the current caller."""
    token = current_principal.set(principal)
    try:
        yield principal
    finally:
        current_principal.reset(token)


def pre_authorize(role: str):
    """Rejects calls to the decorated coroutine unless the caller has *role*."""
    def decorator(func):
        @functools.wraps(func)
        async def wrapper(*args, **kwargs):
            if not has_role(role):
                principal = get_principal()
                who = principal.username if principal else "anonymous"
                raise AccessDeniedException(f"Access is denied for {who}: {func.__name__} requires role {role}")
            return await func(*args, **kwargs)
        return wrapper
    return decorator
