"""
GraphQL endpoint: queries, mutations and error classification.
"""

import pytest

from config import GRAPHQL_PATH


async def execute(client, query, variables=None, headers=None):
    response = await client.post(
        GRAPHQL_PATH, json={"query": query, "variables": variables or {}}, headers=headers
    )
    return response.json()


def classifications(result):
    return [error["extensions"]["classification"] for error in result["errors"]]


CREATE_FILM = """
mutation CreateFilm($title: String!, $releaseDate: Date!) {
  createFilm(input: {title: $title, releaseDate: $releaseDate}) { film { id title releaseDate } }
}
"""

CREATE_PERSON = """
mutation CreatePerson($name: String!) {
  createPerson(input: {name: $name}) { person { id name } }
}
"""


@pytest.fixture
async def film_id(client, admin_headers):
    result = await execute(client, CREATE_FILM, {"title": "Alien", "releaseDate": "1979-05-25"}, admin_headers)
    return result["data"]["createFilm"]["film"]["id"]


@pytest.fixture
async def person_id(client, admin_headers):
    result = await execute(client, CREATE_PERSON, {"name": "Ridley Scott"}, admin_headers)
    return result["data"]["createPerson"]["person"]["id"]


async def test_films_query_pages(client, admin_headers):
    for title in ["Alien", "Aliens", "Alien 3"]:
        await execute(client, CREATE_FILM, {"title": title, "releaseDate": "1986-07-18"}, admin_headers)

    result = await execute(client, '{ films(page: 1, pageSize: 2, sort: ["title"]) { title } }')

    assert "errors" not in result or not result["errors"]
    assert result["data"]["films"] == [{"title": "Aliens"}]


async def test_film_query_with_directors_and_cast(client, admin_headers, film_id, person_id):
    await execute(
        client,
        "mutation($f: Int!, $p: Int!) { addDirector(input: {filmId: $f, personId: $p}) { id } }",
        {"f": film_id, "p": person_id},
        admin_headers,
    )
    await execute(
        client,
        """mutation($f: Int!, $p: Int!) {
          createRole(roleInput: {id: {filmId: $f, personId: $p}, character: "Cameo"}) { character }
        }""",
        {"f": film_id, "p": person_id},
        admin_headers,
    )

    result = await execute(
        client,
        """query($id: Int!) {
          film(id: $id) {
            title releaseDate
            directors { name }
            cast { character person { name } }
          }
        }""",
        {"id": film_id},
    )

    assert result["data"]["film"] == {
        "title": "Alien",
        "releaseDate": "1979-05-25",
        "directors": [{"name": "Ridley Scott"}],
        "cast": [{"character": "Cameo", "person": {"name": "Ridley Scott"}}],
    }


async def test_film_query_not_existing_is_null(client):
    result = await execute(client, "{ film(id: 404) { id } }")

    assert result["data"] == {"film": None}


async def test_invalid_document_has_errors_and_no_data(client):
    result = await execute(client, "{ film(id: 1) { budget } }")

    assert result["data"] is None
    assert result["errors"]
    assert classifications(result) == ["ValidationError"]


async def test_mutation_requires_admin(client, user_headers):
    result = await execute(client, CREATE_FILM, {"title": "Alien", "releaseDate": "1979-05-25"}, user_headers)

    assert result["data"] is None
    assert classifications(result) == ["FORBIDDEN"]


async def test_anonymous_mutation_forbidden(client):
    result = await execute(client, CREATE_PERSON, {"name": "Ridley Scott"})

    assert classifications(result) == ["FORBIDDEN"]
    assert (await execute(client, "{ people { id } }"))["data"] == {"people": []}


async def test_update_unknown_film_is_not_found(client, admin_headers):
    result = await execute(
        client, 'mutation { updateFilm(input: {id: 5, title: "Aliens"}) { film { id } } }', headers=admin_headers
    )

    assert classifications(result) == ["NOT_FOUND"]


async def test_blank_name_is_validation_error(client, admin_headers):
    result = await execute(client, CREATE_PERSON, {"name": "  "}, admin_headers)

    assert classifications(result) == ["ValidationError"]


async def test_update_person_keeps_unsent_fields(client, admin_headers):
    created = await execute(
        client,
        'mutation { createPerson(input: {name: "Gary Oldman", dateOfBirth: "1958-03-21"}) { person { id } } }',
        headers=admin_headers,
    )
    person_id = created["data"]["createPerson"]["person"]["id"]

    result = await execute(
        client,
        """mutation($id: Int!) {
          updatePerson(input: {id: $id, name: "Gary Leonard Oldman"}) { person { name dateOfBirth } }
        }""",
        {"id": person_id},
        admin_headers,
    )

    assert result["data"]["updatePerson"] == {
        "person": {"name": "Gary Leonard Oldman", "dateOfBirth": "1958-03-21"}
    }


async def test_delete_film_returns_id(client, admin_headers, film_id):
    result = await execute(
        client, "mutation($id: Int!) { deleteFilm(input: {id: $id}) { id } }", {"id": film_id}, admin_headers
    )

    assert result["data"]["deleteFilm"] == {"id": film_id}
    assert (await execute(client, "query($id: Int!) { film(id: $id) { id } }", {"id": film_id}))["data"] == {
        "film": None
    }


async def test_role_lifecycle(client, admin_headers, film_id, person_id):
    variables = {"f": film_id, "p": person_id}
    create = """mutation($f: Int!, $p: Int!) {
      createRole(roleInput: {id: {filmId: $f, personId: $p}, character: "Ash"}) {
        id { filmId personId } character film { title }
      }
    }"""

    created = await execute(client, create, variables, admin_headers)
    assert created["data"]["createRole"] == {
        "id": {"filmId": film_id, "personId": person_id},
        "character": "Ash",
        "film": {"title": "Alien"},
    }

    duplicate = await execute(client, create, variables, admin_headers)
    assert classifications(duplicate) == ["BAD_REQUEST"]

    deleted = await execute(
        client,
        """mutation($f: Int!, $p: Int!) {
          deleteRole(input: {id: {filmId: $f, personId: $p}}) { filmId personId }
        }""",
        variables,
        admin_headers,
    )
    assert deleted["data"]["deleteRole"] == {"filmId": film_id, "personId": person_id}

    role = await execute(
        client, "query($f: Int!, $p: Int!) { role(id: {filmId: $f, personId: $p}) { character } }", variables
    )
    assert role["data"] == {"role": None}


async def test_people_by_ids_skips_unknown(client, person_id):
    result = await execute(client, "query($ids: [Int!]!) { peopleByIds(ids: $ids) { id } }", {"ids": [person_id, 999]})

    assert result["data"]["peopleByIds"] == [{"id": person_id}]


async def test_invalid_page_size_is_validation_error(client):
    result = await execute(client, "{ people(pageSize: 0) { id } }")

    assert classifications(result) == ["ValidationError"]


async def test_create_film_returns_film_payload(client, admin_headers):
    result = await execute(client, CREATE_FILM, {"title": "Alien", "releaseDate": "1979-05-25"}, admin_headers)

    film = result["data"]["createFilm"]["film"]
    assert film["title"] == "Alien"
    assert film["releaseDate"] == "1979-05-25"


@pytest.mark.parametrize(
    "mutation",
    [
        'mutation { createFilm(input: {title: "Alien"}) { film { id } } }',
        'mutation { createFilm(input: {title: "Alien", releaseDate: null}) { film { id } } }',
        'mutation { createFilm(input: {title: "Alien", releaseDate: "1999-66-99"}) { film { id } } }',
    ],
)
async def test_create_film_without_valid_release_date_is_validation_error(client, admin_headers, mutation):
    result = await execute(client, mutation, headers=admin_headers)

    assert result["data"] is None
    assert classifications(result) == ["ValidationError"]
    assert (await execute(client, "{ films { id } }"))["data"] == {"films": []}


async def test_update_film_null_release_date_is_validation_error(client, admin_headers, film_id):
    result = await execute(
        client,
        "mutation($id: Int!) { updateFilm(input: {id: $id, releaseDate: null}) { film { id } } }",
        {"id": film_id},
        admin_headers,
    )

    assert classifications(result) == ["ValidationError"]
    film = await execute(client, "query($id: Int!) { film(id: $id) { releaseDate } }", {"id": film_id})
    assert film["data"]["film"] == {"releaseDate": "1979-05-25"}


async def test_blank_character_is_validation_error(client, admin_headers, film_id, person_id):
    variables = {"f": film_id, "p": person_id}
    result = await execute(
        client,
        """mutation($f: Int!, $p: Int!) {
          createRole(roleInput: {id: {filmId: $f, personId: $p}, character: "   "}) { character }
        }""",
        variables,
        admin_headers,
    )

    assert classifications(result) == ["ValidationError"]
    role = await execute(
        client, "query($f: Int!, $p: Int!) { role(id: {filmId: $f, personId: $p}) { character } }", variables
    )
    assert role["data"] == {"role": None}
