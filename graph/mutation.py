import strawberry
from strawberry.types import Info

from schemas import FilmInfo, FilmPatch, PersonInfo, PersonPatch, RoleUpdate
from .inputs import (
    DeleteFilmInput,
    DeletePersonInput,
    DeleteRoleInput,
    DirectorInput,
    FilmInput,
    PersonInput,
    RoleInput,
    UpdateFilmInput,
    UpdatePersonInput,
    set_fields,
)
from .types import (
    CreateFilmPayload,
    CreatePersonPayload,
    DeleteFilmPayload,
    DeletePersonPayload,
    DeleteRolePayload,
    FilmType,
    PersonType,
    RoleType,
    UpdateFilmPayload,
    UpdatePersonPayload,
)


@strawberry.type
class Mutation:
    # Films
    @strawberry.mutation
    async def create_film(self, info: Info, input: FilmInput) -> CreateFilmPayload:
        film_info = FilmInfo(title=input.title, release_date=input.release_date, synopsis=input.synopsis)
        film = await info.context["film_service"].create_film(film_info)
        return CreateFilmPayload(film=FilmType.from_model(film))

    @strawberry.mutation
    async def update_film(self, info: Info, input: UpdateFilmInput) -> UpdateFilmPayload:
        film_patch = FilmPatch(**set_fields(input, "title", "release_date", "synopsis"))
        film = await info.context["film_service"].update_film(input.id, film_patch, partial=True)
        return UpdateFilmPayload(film=FilmType.from_model(film))

    @strawberry.mutation
    async def delete_film(self, info: Info, input: DeleteFilmInput) -> DeleteFilmPayload:
        await info.context["film_service"].delete_film(input.id)
        return DeleteFilmPayload(id=input.id)

    @strawberry.mutation
    async def add_director(self, info: Info, input: DirectorInput) -> FilmType:
        film = await info.context["film_service"].add_director(input.film_id, input.person_id)
        return FilmType.from_model(film)

    @strawberry.mutation
    async def remove_director(self, info: Info, input: DirectorInput) -> FilmType:
        film = await info.context["film_service"].remove_director(input.film_id, input.person_id)
        return FilmType.from_model(film)

    # People
    @strawberry.mutation
    async def create_person(self, info: Info, input: PersonInput) -> CreatePersonPayload:
        person_info = PersonInfo(name=input.name, date_of_birth=input.date_of_birth)
        person = await info.context["person_service"].create_person(person_info)
        return CreatePersonPayload(person=PersonType.from_model(person))

    @strawberry.mutation
    async def update_person(self, info: Info, input: UpdatePersonInput) -> UpdatePersonPayload:
        person_patch = PersonPatch(**set_fields(input, "name", "date_of_birth"))
        person = await info.context["person_service"].update_person(input.id, person_patch, partial=True)
        return UpdatePersonPayload(person=PersonType.from_model(person))

    @strawberry.mutation
    async def delete_person(self, info: Info, input: DeletePersonInput) -> DeletePersonPayload:
        await info.context["person_service"].delete_person(input.id)
        return DeletePersonPayload(id=input.id)

    # Roles
    @strawberry.mutation
    async def create_role(self, info: Info, role_input: RoleInput) -> RoleType:
        character = RoleUpdate(character=role_input.character).character
        role = await info.context["role_service"].create_role(
            role_input.id.film_id, role_input.id.person_id, character
        )
        return RoleType.from_model(role)

    @strawberry.mutation
    async def update_role(self, info: Info, role_input: RoleInput) -> RoleType:
        character = RoleUpdate(character=role_input.character).character
        role = await info.context["role_service"].update_role(
            role_input.id.film_id, role_input.id.person_id, character
        )
        return RoleType.from_model(role)

    @strawberry.mutation
    async def delete_role(self, info: Info, input: DeleteRoleInput) -> DeleteRolePayload:
        await info.context["role_service"].delete_role(input.id.film_id, input.id.person_id)
        return DeleteRolePayload(film_id=input.id.film_id, person_id=input.id.person_id)
