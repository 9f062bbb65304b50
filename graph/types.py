from datetime import date
from typing import List, Optional

import strawberry
from strawberry.types import Info


@strawberry.type(name="CrewMemberId")
class CrewMemberId:
    film_id: int
    person_id: int


@strawberry.type(name="Person")
class PersonType:
    id: int
    name: str
    date_of_birth: Optional[date]

    @strawberry.field
    async def films_directed(self, info: Info) -> List["FilmType"]:
        films = await info.context["person_service"].get_films_directed(self.id)
        return [FilmType.from_model(film) for film in films]

    @strawberry.field
    async def roles(self, info: Info) -> List["RoleType"]:
        roles = await info.context["person_service"].get_roles(self.id)
        return [RoleType.from_model(role) for role in roles]

    @classmethod
    def from_model(cls, person):
        return cls(id=person.id, name=person.name, date_of_birth=person.date_of_birth)


@strawberry.type(name="Film")
class FilmType:
    id: int
    title: str
    release_date: date
    synopsis: Optional[str]

    @strawberry.field
    async def directors(self, info: Info) -> List[PersonType]:
        people = await info.context["film_service"].get_directors(self.id)
        return [PersonType.from_model(person) for person in people]

    @strawberry.field
    async def cast(self, info: Info) -> List["RoleType"]:
        roles = await info.context["film_service"].get_roles(self.id)
        return [RoleType.from_model(role) for role in roles]

    @classmethod
    def from_model(cls, film):
        return cls(
            id=film.id,
            title=film.title,
            release_date=film.release_date,
            synopsis=film.synopsis,
        )


@strawberry.type(name="Role")
class RoleType:
    id: CrewMemberId
    character: str

    @strawberry.field
    async def film(self, info: Info) -> Optional[FilmType]:
        film = await info.context["film_service"].get_film(self.id.film_id)
        return FilmType.from_model(film) if film else None

    @strawberry.field
    async def person(self, info: Info) -> Optional[PersonType]:
        person = await info.context["person_service"].get_person(self.id.person_id)
        return PersonType.from_model(person) if person else None

    @classmethod
    def from_model(cls, role):
        return cls(
            id=CrewMemberId(film_id=role.film_id, person_id=role.person_id),
            character=role.character,
        )


@strawberry.type
class CreateFilmPayload:
    film: FilmType


@strawberry.type
class UpdateFilmPayload:
    film: FilmType


@strawberry.type
class DeleteFilmPayload:
    id: int


@strawberry.type
class CreatePersonPayload:
    person: PersonType


@strawberry.type
class UpdatePersonPayload:
    person: PersonType


@strawberry.type
class DeletePersonPayload:
    id: int


@strawberry.type
class DeleteRolePayload:
    film_id: int
    person_id: int
