from datetime import date
from typing import Optional
from pydantic import Field, field_validator
from .base import CamelModel


class FilmInfo(CamelModel):
    title: str = Field(min_length=1, max_length=255)
    release_date: date
    synopsis: Optional[str] = None

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, value):
        if not value.strip():
            raise ValueError("Title is required")
        return value


class FilmPatch(CamelModel):
    title: Optional[str] = Field(default=None, min_length=1, max_length=255)
    release_date: Optional[date] = None
    synopsis: Optional[str] = None

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, value):
        if value is None or not value.strip():
            raise ValueError("Title is required")
        return value

    @field_validator("release_date")
    @classmethod
    def release_date_not_null(cls, value):
        if value is None:
            raise ValueError("Release date is required")
        return value


class FilmResponse(CamelModel):
    id: int
    title: str
    release_date: date
    synopsis: Optional[str] = None
