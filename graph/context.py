import asyncio
import functools
import inspect

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from models import get_session
from services import FilmService, PersonService, RoleService


class SerializedService:
    """
    Runs the wrapped service's coroutines one at a time.

    GraphQL resolves sibling fields concurrently, while an AsyncSession
    allows a single operation at a time.
    """

    def __init__(self, service, lock: asyncio.Lock):
        self._service = service
        self._lock = lock

    def __getattr__(self, name):
        attr = getattr(self._service, name)
        if not inspect.iscoroutinefunction(attr):
            return attr

        @functools.wraps(attr)
        async def call(*args, **kwargs):
            async with self._lock:
                return await attr(*args, **kwargs)
        return call


async def get_context(session: AsyncSession = Depends(get_session)) -> dict:
    """One session per GraphQL request, shared by the services."""
    lock = asyncio.Lock()
    return {
        "film_service": SerializedService(FilmService(session), lock),
        "person_service": SerializedService(PersonService(session), lock),
        "role_service": SerializedService(RoleService(session), lock),
    }
