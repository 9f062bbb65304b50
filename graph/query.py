from typing import List, Optional

import strawberry
from strawberry.types import Info

from config import DEFAULT_PAGE_SIZE
from utils.pagination import Pageable
from .inputs import CrewMemberIdInput
from .types import FilmType, PersonType, RoleType


@strawberry.type
class Query:
    @strawberry.field
    async def films(
        self,
        info: Info,
        page: int = 0,
        page_size: int = DEFAULT_PAGE_SIZE,
        sort: Optional[List[str]] = None,
    ) -> List[FilmType]:
        pageable = Pageable.of(page, page_size, sort)
        result = await info.context["film_service"].get_all_films(pageable)
        return [FilmType.from_model(film) for film in result.content]

    @strawberry.field
    async def film(self, info: Info, id: int) -> Optional[FilmType]:
        film = await info.context["film_service"].get_film(id)
        return FilmType.from_model(film) if film else None

    @strawberry.field
    async def people(
        self,
        info: Info,
        page: int = 0,
        page_size: int = DEFAULT_PAGE_SIZE,
        sort: Optional[List[str]] = None,
    ) -> List[PersonType]:
        pageable = Pageable.of(page, page_size, sort)
        result = await info.context["person_service"].get_all_people(pageable)
        return [PersonType.from_model(person) for person in result.content]

    @strawberry.field
    async def person(self, info: Info, id: int) -> Optional[PersonType]:
        person = await info.context["person_service"].get_person(id)
        return PersonType.from_model(person) if person else None

    @strawberry.field
    async def people_by_ids(self, info: Info, ids: List[int]) -> List[PersonType]:
        people = await info.context["person_service"].get_people(ids)
        return [PersonType.from_model(person) for person in people]

    @strawberry.field
    async def role(self, info: Info, id: CrewMemberIdInput) -> Optional[RoleType]:
        role = await info.context["role_service"].get_role(id.film_id, id.person_id)
        return RoleType.from_model(role) if role else None
