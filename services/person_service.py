from typing import Iterable, List, Optional
from sqlalchemy.ext.asyncio import AsyncSession

from models import Person
from mappers import person_info_to_person, update_person_from_person_info
from repositories import FilmRepository, PersonRepository, RoleRepository
from security import ROLE_ADMIN, pre_authorize
from utils.errors import EntityNotFoundException, person_not_found_message
from utils.pagination import Page, Pageable
from utils.sort import filter_sort
from logger import get_logger
from .transaction import transactional

logger = get_logger()


class PersonService:
    def __init__(self, session: AsyncSession):
        self.session = session
        self.person_repository = PersonRepository(session)
        self.film_repository = FilmRepository(session)
        self.role_repository = RoleRepository(session)

    async def get_all_people(self, pageable: Pageable) -> Page:
        """Returns a page of all people; sorting on non-sortable fields is dropped."""
        return await self.person_repository.find_all(filter_sort(pageable, Person))

    async def search(self, spec, pageable: Pageable) -> Page:
        """Returns a page of people matching *spec*."""
        return await self.person_repository.find_all(filter_sort(pageable, Person), spec)

    @pre_authorize(ROLE_ADMIN)
    @transactional
    async def create_person(self, person_info) -> Person:
        person = person_info_to_person(person_info)
        await self.person_repository.save(person)
        logger.info(f"Created person {person.id} ({person.name})")
        return person

    async def get_person(self, person_id: int) -> Optional[Person]:
        return await self.person_repository.find_by_id(person_id)

    @pre_authorize(ROLE_ADMIN)
    @transactional
    async def update_person(self, person_id: int, person_info, partial: bool = False) -> Person:
        """
        Updates an existing person.

        Raises EntityNotFoundException if there is no person with *person_id*;
        a new record is never created.
        """
        person = await self.person_repository.find_by_id(person_id)
        if person is None:
            raise EntityNotFoundException(person_not_found_message(person_id))
        update_person_from_person_info(person_info, person, partial=partial)
        await self.person_repository.save(person)
        logger.info(f"Updated person {person_id}")
        return person

    @pre_authorize(ROLE_ADMIN)
    @transactional
    async def delete_person(self, person_id: int) -> None:
        """Deletes the person with their director links and roles. Unknown ids are ignored."""
        person = await self.person_repository.find_by_id(person_id)
        if person is None:
            return
        # The owning side needs its collection loaded to drop the link
        for film in await person.awaitable_attrs.films_directed:
            await film.awaitable_attrs.directors
        person.remove_films_directed()
        await self.role_repository.delete_by_person_id(person_id)
        await self.person_repository.delete(person)
        logger.info(f"Deleted person {person_id}")

    async def person_exists(self, person_id: int) -> bool:
        return await self.person_repository.exists_by_id(person_id)

    async def get_people(self, person_ids: Iterable[int]) -> List[Person]:
        """People for the given ids; ids that don't exist are silently left out."""
        return await self.person_repository.find_all_by_id(person_ids)

    async def get_films_directed(self, person_id: int):
        if not await self.person_exists(person_id):
            raise EntityNotFoundException(person_not_found_message(person_id))
        return await self.film_repository.find_directed_by(person_id)

    async def get_roles(self, person_id: int):
        if not await self.person_exists(person_id):
            raise EntityNotFoundException(person_not_found_message(person_id))
        return await self.role_repository.find_by_person_id(person_id)
