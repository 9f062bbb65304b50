class EntityNotFoundException(Exception):
    """Raised when an entity that must exist for the operation can't be found."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class EntityExistsException(Exception):
    """Raised when creating an entity whose key is already taken."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


def person_not_found_message(person_id) -> str:
    return f"Person with id '{person_id}' not found"


def people_not_found_message(person_ids) -> str:
    ids = ", ".join(f"'{person_id}'" for person_id in person_ids)
    return f"People with ids {ids} not found"


def film_not_found_message(film_id) -> str:
    return f"Film with id '{film_id}' not found"


def role_not_found_message(film_id, person_id) -> str:
    return f"Role with film id '{film_id}' and person id '{person_id}' not found"


def role_exists_message(film_id, person_id) -> str:
    return f"Role with film id '{film_id}' and person id '{person_id}' already exists"
