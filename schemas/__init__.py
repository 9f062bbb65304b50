from .base import CamelModel
from .page import PageMeta, PageResponse
from .person import PersonInfo, PersonPatch, PersonResponse
from .film import FilmInfo, FilmPatch, FilmResponse
from .role import RoleInput, RoleUpdate, RoleResponse
from .auth import LoginRequest, TokenResponse

__all__ = [
    "CamelModel",
    "PageMeta",
    "PageResponse",
    "PersonInfo",
    "PersonPatch",
    "PersonResponse",
    "FilmInfo",
    "FilmPatch",
    "FilmResponse",
    "RoleInput",
    "RoleUpdate",
    "RoleResponse",
    "LoginRequest",
    "TokenResponse",
]
