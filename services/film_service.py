from typing import Iterable, List, Optional
from sqlalchemy.ext.asyncio import AsyncSession

from models import Film, Person
from mappers import film_info_to_film, update_film_from_film_info
from repositories import FilmRepository, PersonRepository, RoleRepository
from security import ROLE_ADMIN, pre_authorize
from utils.errors import (
    EntityNotFoundException,
    film_not_found_message,
    people_not_found_message,
    person_not_found_message,
)
from utils.pagination import Page, Pageable
from utils.sort import filter_sort
from logger import get_logger
from .transaction import transactional

logger = get_logger()


class FilmService:
    def __init__(self, session: AsyncSession):
        self.session = session
        self.film_repository = FilmRepository(session)
        self.person_repository = PersonRepository(session)
        self.role_repository = RoleRepository(session)

    async def get_all_films(self, pageable: Pageable) -> Page:
        return await self.film_repository.find_all(filter_sort(pageable, Film))

    async def search(self, spec, pageable: Pageable) -> Page:
        return await self.film_repository.find_all(filter_sort(pageable, Film), spec)

    @pre_authorize(ROLE_ADMIN)
    @transactional
    async def create_film(self, film_info) -> Film:
        film = film_info_to_film(film_info)
        await self.film_repository.save(film)
        logger.info(f"Created film {film.id} ({film.title})")
        return film

    async def get_film(self, film_id: int) -> Optional[Film]:
        return await self.film_repository.find_by_id(film_id)

    @pre_authorize(ROLE_ADMIN)
    @transactional
    async def update_film(self, film_id: int, film_info, partial: bool = False) -> Film:
        film = await self._require_film(film_id)
        update_film_from_film_info(film_info, film, partial=partial)
        await self.film_repository.save(film)
        logger.info(f"Updated film {film_id}")
        return film

    @pre_authorize(ROLE_ADMIN)
    @transactional
    async def delete_film(self, film_id: int) -> None:
        """Deletes the film together with its director links and cast. Unknown ids are ignored."""
        film = await self.film_repository.find_by_id(film_id)
        if film is None:
            return
        await film.awaitable_attrs.directors
        film.remove_directors()
        await self.role_repository.delete_by_film_id(film_id)
        await self.film_repository.delete(film)
        logger.info(f"Deleted film {film_id}")

    async def film_exists(self, film_id: int) -> bool:
        return await self.film_repository.exists_by_id(film_id)

    async def get_films(self, film_ids: Iterable[int]) -> List[Film]:
        return await self.film_repository.find_all_by_id(film_ids)

    # ───────────────────────────── directors ──────────────────────────
    async def get_directors(self, film_id: int) -> List[Person]:
        if not await self.film_exists(film_id):
            raise EntityNotFoundException(film_not_found_message(film_id))
        return await self.person_repository.find_directors_of(film_id)

    @pre_authorize(ROLE_ADMIN)
    @transactional
    async def add_director(self, film_id: int, person_id: int) -> Film:
        film = await self._require_film(film_id)
        person = await self.person_repository.find_by_id(person_id)
        if person is None:
            raise EntityNotFoundException(person_not_found_message(person_id))
        await film.awaitable_attrs.directors
        film.add_director(person)
        await self.film_repository.save(film)
        logger.info(f"Added director {person_id} to film {film_id}")
        return film

    @pre_authorize(ROLE_ADMIN)
    @transactional
    async def remove_director(self, film_id: int, person_id: int) -> Film:
        film = await self._require_film(film_id)
        for person in list(await film.awaitable_attrs.directors):
            if person.id == person_id:
                film.remove_director(person)
        await self.film_repository.save(film)
        logger.info(f"Removed director {person_id} from film {film_id}")
        return film

    @pre_authorize(ROLE_ADMIN)
    @transactional
    async def update_directors(self, film_id: int, person_ids: Iterable[int]) -> List[Person]:
        """Replaces the film's directors. Every id must belong to an existing person."""
        film = await self._require_film(film_id)
        person_ids = list(dict.fromkeys(person_ids))
        people = await self.person_repository.find_all_by_id(person_ids)
        missing = set(person_ids) - {person.id for person in people}
        if missing:
            raise EntityNotFoundException(people_not_found_message(sorted(missing)))

        await film.awaitable_attrs.directors
        for director in list(film.directors):
            if director not in people:
                film.remove_director(director)
        for person in people:
            film.add_director(person)
        await self.film_repository.save(film)
        logger.info(f"Set directors of film {film_id} to {sorted(person_ids)}")
        return people

    # ───────────────────────────── cast ──────────────────────────
    async def get_roles(self, film_id: int):
        if not await self.film_exists(film_id):
            raise EntityNotFoundException(film_not_found_message(film_id))
        return await self.role_repository.find_by_film_id(film_id)

    async def _require_film(self, film_id: int) -> Film:
        film = await self.film_repository.find_by_id(film_id)
        if film is None:
            raise EntityNotFoundException(film_not_found_message(film_id))
        return film
