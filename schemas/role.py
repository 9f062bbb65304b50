from pydantic import Field, field_validator
from .base import CamelModel


class RoleUpdate(CamelModel):
    character: str = Field(min_length=1, max_length=255)

    @field_validator("character")
    @classmethod
    def character_not_blank(cls, value):
        if not value.strip():
            raise ValueError("Character is required")
        return value


class RoleInput(RoleUpdate):
    film_id: int
    person_id: int


class RoleResponse(CamelModel):
    film_id: int
    person_id: int
    character: str
