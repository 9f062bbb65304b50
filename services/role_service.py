from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession

from models import Role
from repositories import FilmRepository, PersonRepository, RoleRepository
from security import ROLE_ADMIN, pre_authorize
from utils.errors import (
    EntityExistsException,
    EntityNotFoundException,
    film_not_found_message,
    person_not_found_message,
    role_exists_message,
    role_not_found_message,
)
from logger import get_logger
from .transaction import transactional

logger = get_logger()


class RoleService:
    """Casting assignments, addressed by (film_id, person_id)."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.role_repository = RoleRepository(session)
        self.film_repository = FilmRepository(session)
        self.person_repository = PersonRepository(session)

    @pre_authorize(ROLE_ADMIN)
    @transactional
    async def create_role(self, film_id: int, person_id: int, character: str) -> Role:
        film = await self.film_repository.find_by_id(film_id)
        if film is None:
            raise EntityNotFoundException(film_not_found_message(film_id))
        person = await self.person_repository.find_by_id(person_id)
        if person is None:
            raise EntityNotFoundException(person_not_found_message(person_id))
        if await self.role_repository.exists_by_id(film_id, person_id):
            raise EntityExistsException(role_exists_message(film_id, person_id))

        role = Role(film=film, person=person, character=character)
        await self.role_repository.save(role)
        logger.info(f"Created role '{character}' for person {person_id} in film {film_id}")
        return role

    async def get_role(self, film_id: int, person_id: int) -> Optional[Role]:
        return await self.role_repository.find_by_id(film_id, person_id)

    @pre_authorize(ROLE_ADMIN)
    @transactional
    async def update_role(self, film_id: int, person_id: int, character: str) -> Role:
        role = await self.role_repository.find_by_id(film_id, person_id)
        if role is None:
            raise EntityNotFoundException(role_not_found_message(film_id, person_id))
        role.character = character
        await self.role_repository.save(role)
        logger.info(f"Updated role of person {person_id} in film {film_id}")
        return role

    @pre_authorize(ROLE_ADMIN)
    @transactional
    async def delete_role(self, film_id: int, person_id: int) -> None:
        await self.role_repository.delete_by_id(film_id, person_id)
        logger.info(f"Deleted role of person {person_id} in film {film_id}")

    async def role_exists(self, film_id: int, person_id: int) -> bool:
        return await self.role_repository.exists_by_id(film_id, person_id)
