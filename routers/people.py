from datetime import date
from typing import List, Optional
from fastapi import APIRouter, Depends, Query, Response, status

from config import API_PREFIX
from schemas import FilmResponse, PageResponse, PersonInfo, PersonPatch, PersonResponse, RoleResponse
from services import PersonService
from specifications import PersonBornAfter, PersonBornBefore, PersonWithName, Specification
from utils.errors import EntityNotFoundException, person_not_found_message
from utils.pagination import Pageable
from .dependencies import get_pageable, get_person_service

router = APIRouter(prefix=f"{API_PREFIX}/people", tags=["people"])


@router.get("", response_model=PageResponse[PersonResponse])
async def list_people(
    name: Optional[str] = Query(None, min_length=1),
    born_after: Optional[date] = Query(None, alias="bornAfter"),
    born_before: Optional[date] = Query(None, alias="bornBefore"),
    pageable: Pageable = Depends(get_pageable),
    person_service: PersonService = Depends(get_person_service),
):
    """Pages through people, optionally filtered by name and date of birth."""
    filters = [
        PersonWithName(name) if name else None,
        PersonBornAfter(born_after) if born_after else None,
        PersonBornBefore(born_before) if born_before else None,
    ]
    if any(filters):
        page = await person_service.search(Specification.all_of(*filters), pageable)
    else:
        page = await person_service.get_all_people(pageable)
    return PageResponse[PersonResponse].from_page(page, PersonResponse)


@router.get("/batch", response_model=List[PersonResponse])
async def get_people_by_ids(
    ids: List[int] = Query(...),
    person_service: PersonService = Depends(get_person_service),
):
    """Returns the people that exist among the given ids."""
    return await person_service.get_people(ids)


@router.post("", response_model=PersonResponse, status_code=status.HTTP_201_CREATED)
async def create_person(
    person_info: PersonInfo,
    response: Response,
    person_service: PersonService = Depends(get_person_service),
):
    person = await person_service.create_person(person_info)
    response.headers["Location"] = f"{router.prefix}/{person.id}"
    return person


@router.get("/{person_id}", response_model=PersonResponse)
async def get_person(person_id: int, person_service: PersonService = Depends(get_person_service)):
    person = await person_service.get_person(person_id)
    if person is None:
        raise EntityNotFoundException(person_not_found_message(person_id))
    return person


@router.put("/{person_id}", response_model=PersonResponse)
async def replace_person(
    person_id: int,
    person_info: PersonInfo,
    person_service: PersonService = Depends(get_person_service),
):
    return await person_service.update_person(person_id, person_info)


@router.patch("/{person_id}", response_model=PersonResponse)
async def patch_person(
    person_id: int,
    person_patch: PersonPatch,
    person_service: PersonService = Depends(get_person_service),
):
    return await person_service.update_person(person_id, person_patch, partial=True)


@router.delete("/{person_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_person(person_id: int, person_service: PersonService = Depends(get_person_service)):
    """Deletes the person, their roles and their director links."""
    await person_service.delete_person(person_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{person_id}/films-directed", response_model=List[FilmResponse])
async def get_films_directed(person_id: int, person_service: PersonService = Depends(get_person_service)):
    return await person_service.get_films_directed(person_id)


@router.get("/{person_id}/roles", response_model=List[RoleResponse])
async def get_roles(person_id: int, person_service: PersonService = Depends(get_person_service)):
    return await person_service.get_roles(person_id)
