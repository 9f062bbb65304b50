from datetime import date

import pytest
from pydantic import ValidationError

from schemas import FilmInfo, PersonInfo, RoleUpdate
from security import AccessDeniedException, authenticated_as
from repositories import RoleRepository
from services import FilmService, PersonService, RoleService
from utils.errors import EntityExistsException, EntityNotFoundException
from utils.pagination import Pageable


@pytest.fixture
async def cast(session, admin):
    """A film and a person, returned as (film_id, person_id)."""
    with authenticated_as(admin):
        film = await FilmService(session).create_film(FilmInfo(title="Die Hard", release_date=date(1990, 1, 1)))
        person = await PersonService(session).create_person(PersonInfo(name="Bruce Willis"))
    return film.id, person.id


@pytest.fixture
def roles(session):
    return RoleService(session)


async def test_create_and_get_role(roles, cast, admin):
    film_id, person_id = cast
    with authenticated_as(admin):
        created = await roles.create_role(film_id, person_id, "John McClane")

    assert (created.film_id, created.person_id) == (film_id, person_id)
    found = await roles.get_role(film_id, person_id)
    assert found.character == "John McClane"
    assert await roles.role_exists(film_id, person_id)


async def test_get_role_not_existing_returns_none(roles, cast):
    film_id, person_id = cast
    assert await roles.get_role(film_id, person_id) is None
    assert not await roles.role_exists(film_id, person_id)


async def test_create_role_twice_raises(roles, cast, admin):
    film_id, person_id = cast
    with authenticated_as(admin):
        await roles.create_role(film_id, person_id, "John McClane")
        with pytest.raises(EntityExistsException):
            await roles.create_role(film_id, person_id, "Hans Gruber")

    assert (await roles.get_role(film_id, person_id)).character == "John McClane"


@pytest.mark.parametrize("unknown", ["film", "person"])
async def test_create_role_unknown_film_or_person_raises(roles, cast, admin, unknown):
    film_id, person_id = cast
    if unknown == "film":
        film_id += 100
    else:
        person_id += 100

    with authenticated_as(admin):
        with pytest.raises(EntityNotFoundException):
            await roles.create_role(film_id, person_id, "John McClane")


async def test_create_role_requires_admin(roles, cast, user):
    film_id, person_id = cast
    with authenticated_as(user):
        with pytest.raises(AccessDeniedException):
            await roles.create_role(film_id, person_id, "John McClane")

    assert not await roles.role_exists(film_id, person_id)


async def test_update_role(roles, cast, admin):
    film_id, person_id = cast
    with authenticated_as(admin):
        await roles.create_role(film_id, person_id, "McClane")
        updated = await roles.update_role(film_id, person_id, "John McClane")

    assert updated.character == "John McClane"


async def test_update_role_not_existing_raises(roles, cast, admin):
    film_id, person_id = cast
    with authenticated_as(admin):
        with pytest.raises(EntityNotFoundException):
            await roles.update_role(film_id, person_id, "John McClane")

    assert not await roles.role_exists(film_id, person_id)


async def test_delete_role(roles, cast, admin):
    film_id, person_id = cast
    with authenticated_as(admin):
        await roles.create_role(film_id, person_id, "John McClane")
        await roles.delete_role(film_id, person_id)
        # deleting again is a no-op
        await roles.delete_role(film_id, person_id)

    assert await roles.get_role(film_id, person_id) is None


async def test_delete_role_requires_admin(roles, cast, admin):
    film_id, person_id = cast
    with authenticated_as(admin):
        await roles.create_role(film_id, person_id, "John McClane")

    with pytest.raises(AccessDeniedException):
        await roles.delete_role(film_id, person_id)

    assert await roles.role_exists(film_id, person_id)


async def test_role_repository_has_no_single_key_lookups(session):
    repository = RoleRepository(session)

    with pytest.raises(TypeError):
        await repository.find_all(Pageable.of(0, 10))
    with pytest.raises(TypeError):
        await repository.find_all_by_id([1])


@pytest.mark.parametrize("character", ["", "   "])
def test_role_input_rejects_blank_character(character):
    with pytest.raises(ValidationError):
        RoleUpdate(character=character)
