from datetime import date
from typing import Optional
from pydantic import Field, field_validator
from .base import CamelModel


class PersonInfo(CamelModel):
    """Input for creating or fully replacing a person."""
    name: str = Field(min_length=1, max_length=255)
    date_of_birth: Optional[date] = None

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value):
        if not value.strip():
            raise ValueError("Name is required")
        return value


class PersonPatch(CamelModel):
    """Input for PATCH; only the fields the client sends are applied."""
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    date_of_birth: Optional[date] = None

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value):
        if value is None or not value.strip():
            raise ValueError("Name is required")
        return value


class PersonResponse(CamelModel):
    id: int
    name: str
    date_of_birth: Optional[date] = None
