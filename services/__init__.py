from .person_service import PersonService
from .film_service import FilmService
from .role_service import RoleService

__all__ = ["PersonService", "FilmService", "RoleService"]
