from .base import CrudRepository
from .film_repository import FilmRepository
from .person_repository import PersonRepository
from .role_repository import RoleRepository

__all__ = [
    "CrudRepository",
    "FilmRepository",
    "PersonRepository",
    "RoleRepository",
]
