from fastapi import APIRouter, Depends, Response, status

from config import API_PREFIX
from schemas import RoleInput, RoleResponse, RoleUpdate
from services import RoleService
from utils.errors import EntityNotFoundException, role_not_found_message
from .dependencies import get_role_service

router = APIRouter(prefix=f"{API_PREFIX}/roles", tags=["roles"])


@router.post("", response_model=RoleResponse, status_code=status.HTTP_201_CREATED)
async def create_role(
    role_input: RoleInput,
    response: Response,
    role_service: RoleService = Depends(get_role_service),
):
    """Casts a person in a film."""
    role = await role_service.create_role(role_input.film_id, role_input.person_id, role_input.character)
    response.headers["Location"] = f"{router.prefix}/{role.film_id}/{role.person_id}"
    return role


@router.get("/{film_id}/{person_id}", response_model=RoleResponse)
async def get_role(film_id: int, person_id: int, role_service: RoleService = Depends(get_role_service)):
    role = await role_service.get_role(film_id, person_id)
    if role is None:
        raise EntityNotFoundException(role_not_found_message(film_id, person_id))
    return role


@router.put("/{film_id}/{person_id}", response_model=RoleResponse)
async def update_role(
    film_id: int,
    person_id: int,
    role_update: RoleUpdate,
    role_service: RoleService = Depends(get_role_service),
):
    return await role_service.update_role(film_id, person_id, role_update.character)


@router.delete("/{film_id}/{person_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_role(film_id: int, person_id: int, role_service: RoleService = Depends(get_role_service)):
    await role_service.delete_role(film_id, person_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
