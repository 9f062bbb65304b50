from typing import List
from fastapi import Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from config import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
from models import get_session
from services import FilmService, PersonService, RoleService
from utils.pagination import Pageable


def get_pageable(
    page: int = Query(0, ge=0, description="Zero-based page index"),
    size: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE, description="Page size"),
    sort: List[str] = Query(default=[], description="Sort as field[,asc|desc]; repeatable"),
) -> Pageable:
    """Builds a Pageable from the page/size/sort query parameters."""
    return Pageable.of(page, size, sort)


async def get_person_service(session: AsyncSession = Depends(get_session)) -> PersonService:
    return PersonService(session)


async def get_film_service(session: AsyncSession = Depends(get_session)) -> FilmService:
    return FilmService(session)


async def get_role_service(session: AsyncSession = Depends(get_session)) -> RoleService:
    return RoleService(session)
