from datetime import date
from typing import Optional

import strawberry


@strawberry.input
class CrewMemberIdInput:
    film_id: int
    person_id: int


@strawberry.input
class RoleInput:
    id: CrewMemberIdInput
    character: str


@strawberry.input
class DeleteRoleInput:
    id: CrewMemberIdInput


@strawberry.input
class FilmInput:
    title: str
    release_date: date
    synopsis: Optional[str] = None


@strawberry.input
class UpdateFilmInput:
    """Fields left out keep their current value."""
    id: int
    title: Optional[str] = strawberry.UNSET
    release_date: Optional[date] = strawberry.UNSET
    synopsis: Optional[str] = strawberry.UNSET


@strawberry.input
class DeleteFilmInput:
    id: int


@strawberry.input
class PersonInput:
    name: str
    date_of_birth: Optional[date] = None


@strawberry.input
class UpdatePersonInput:
    """Fields left out keep their current value."""
    id: int
    name: Optional[str] = strawberry.UNSET
    date_of_birth: Optional[date] = strawberry.UNSET


@strawberry.input
class DeletePersonInput:
    id: int


@strawberry.input
class DirectorInput:
    film_id: int
    person_id: int


def set_fields(graphql_input, *names) -> dict:
    """The subset of *names* the client actually sent."""
    return {
        name: getattr(graphql_input, name)
        for name in names
        if getattr(graphql_input, name) is not strawberry.UNSET
    }
