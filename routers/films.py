from datetime import date
from typing import List, Optional
from fastapi import APIRouter, Body, Depends, Query, Response, status

from config import API_PREFIX
from schemas import FilmInfo, FilmPatch, FilmResponse, PageResponse, PersonResponse, RoleResponse
from services import FilmService
from specifications import FilmReleasedAfter, FilmReleasedBefore, FilmWithDirector, FilmWithTitle, Specification
from utils.errors import EntityNotFoundException, film_not_found_message
from utils.pagination import Pageable
from .dependencies import get_film_service, get_pageable

router = APIRouter(prefix=f"{API_PREFIX}/films", tags=["films"])


@router.get("", response_model=PageResponse[FilmResponse])
async def list_films(
    title: Optional[str] = Query(None, min_length=1),
    released_after: Optional[date] = Query(None, alias="releasedAfter"),
    released_before: Optional[date] = Query(None, alias="releasedBefore"),
    director_id: Optional[int] = Query(None, alias="directorId"),
    pageable: Pageable = Depends(get_pageable),
    film_service: FilmService = Depends(get_film_service),
):
    """Pages through films, optionally filtered by title, release date or director."""
    filters = [
        FilmWithTitle(title) if title else None,
        FilmReleasedAfter(released_after) if released_after else None,
        FilmReleasedBefore(released_before) if released_before else None,
        FilmWithDirector(director_id) if director_id is not None else None,
    ]
    if any(filters):
        page = await film_service.search(Specification.all_of(*filters), pageable)
    else:
        page = await film_service.get_all_films(pageable)
    return PageResponse[FilmResponse].from_page(page, FilmResponse)


@router.post("", response_model=FilmResponse, status_code=status.HTTP_201_CREATED)
async def create_film(
    film_info: FilmInfo,
    response: Response,
    film_service: FilmService = Depends(get_film_service),
):
    film = await film_service.create_film(film_info)
    response.headers["Location"] = f"{router.prefix}/{film.id}"
    return film


@router.get("/{film_id}", response_model=FilmResponse)
async def get_film(film_id: int, film_service: FilmService = Depends(get_film_service)):
    film = await film_service.get_film(film_id)
    if film is None:
        raise EntityNotFoundException(film_not_found_message(film_id))
    return film


@router.put("/{film_id}", response_model=FilmResponse)
async def replace_film(
    film_id: int,
    film_info: FilmInfo,
    film_service: FilmService = Depends(get_film_service),
):
    return await film_service.update_film(film_id, film_info)


@router.patch("/{film_id}", response_model=FilmResponse)
async def patch_film(
    film_id: int,
    film_patch: FilmPatch,
    film_service: FilmService = Depends(get_film_service),
):
    return await film_service.update_film(film_id, film_patch, partial=True)


@router.delete("/{film_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_film(film_id: int, film_service: FilmService = Depends(get_film_service)):
    """Deletes the film, its cast and its director links."""
    await film_service.delete_film(film_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# Directors

@router.get("/{film_id}/directors", response_model=List[PersonResponse])
async def get_directors(film_id: int, film_service: FilmService = Depends(get_film_service)):
    return await film_service.get_directors(film_id)


@router.put("/{film_id}/directors", response_model=List[PersonResponse])
async def replace_directors(
    film_id: int,
    person_ids: List[int] = Body(...),
    film_service: FilmService = Depends(get_film_service),
):
    """Replaces the directors with the people whose ids are in the body."""
    return await film_service.update_directors(film_id, person_ids)


@router.post("/{film_id}/directors/{person_id}", status_code=status.HTTP_204_NO_CONTENT)
async def add_director(film_id: int, person_id: int, film_service: FilmService = Depends(get_film_service)):
    await film_service.add_director(film_id, person_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{film_id}/directors/{person_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_director(film_id: int, person_id: int, film_service: FilmService = Depends(get_film_service)):
    await film_service.remove_director(film_id, person_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# Cast

@router.get("/{film_id}/roles", response_model=List[RoleResponse])
async def get_roles(film_id: int, film_service: FilmService = Depends(get_film_service)):
    return await film_service.get_roles(film_id)
