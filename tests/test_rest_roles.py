import pytest

from config import API_PREFIX

ROLES = f"{API_PREFIX}/roles"


@pytest.fixture
async def cast(client, admin_headers):
    film = await client.post(
        f"{API_PREFIX}/films", json={"title": "The Fifth Element", "releaseDate": "1997-05-07"}, headers=admin_headers
    )
    person = await client.post(f"{API_PREFIX}/people", json={"name": "Milla Jovovich"}, headers=admin_headers)
    return film.json()["id"], person.json()["id"]


async def test_create_role(client, admin_headers, cast):
    film_id, person_id = cast

    response = await client.post(
        ROLES, json={"filmId": film_id, "personId": person_id, "character": "Leeloo"}, headers=admin_headers
    )

    assert response.status_code == 201
    assert response.json() == {"filmId": film_id, "personId": person_id, "character": "Leeloo"}
    assert response.headers["location"] == f"{ROLES}/{film_id}/{person_id}"
    film_roles = await client.get(f"{API_PREFIX}/films/{film_id}/roles")
    assert [r["character"] for r in film_roles.json()] == ["Leeloo"]


async def test_create_duplicate_role_conflicts(client, admin_headers, cast):
    film_id, person_id = cast
    body = {"filmId": film_id, "personId": person_id, "character": "Leeloo"}
    await client.post(ROLES, json=body, headers=admin_headers)

    response = await client.post(ROLES, json=body, headers=admin_headers)

    assert response.status_code == 409


async def test_create_role_unknown_person(client, admin_headers, cast):
    film_id, person_id = cast

    response = await client.post(
        ROLES, json={"filmId": film_id, "personId": person_id + 1, "character": "Leeloo"}, headers=admin_headers
    )

    assert response.status_code == 404


async def test_create_role_missing_character(client, admin_headers, cast):
    film_id, person_id = cast

    response = await client.post(ROLES, json={"filmId": film_id, "personId": person_id}, headers=admin_headers)

    assert response.status_code == 400


@pytest.mark.parametrize("character", ["", "   "])
async def test_create_role_blank_character(client, admin_headers, cast, character):
    film_id, person_id = cast

    response = await client.post(
        ROLES, json={"filmId": film_id, "personId": person_id, "character": character}, headers=admin_headers
    )

    assert response.status_code == 400
    assert (await client.get(f"{ROLES}/{film_id}/{person_id}")).status_code == 404


async def test_update_and_delete_role(client, admin_headers, user_headers, cast):
    film_id, person_id = cast
    url = f"{ROLES}/{film_id}/{person_id}"
    await client.post(ROLES, json={"filmId": film_id, "personId": person_id, "character": "Leloo"}, headers=admin_headers)

    assert (await client.put(url, json={"character": "Leeloo"}, headers=user_headers)).status_code == 403
    updated = await client.put(url, json={"character": "Leeloo"}, headers=admin_headers)
    assert updated.status_code == 200
    assert (await client.get(url)).json()["character"] == "Leeloo"

    assert (await client.delete(url, headers=admin_headers)).status_code == 204
    assert (await client.get(url)).status_code == 404


async def test_update_role_not_existing(client, admin_headers, cast):
    film_id, person_id = cast

    response = await client.put(f"{ROLES}/{film_id}/{person_id}", json={"character": "Leeloo"}, headers=admin_headers)

    assert response.status_code == 404
