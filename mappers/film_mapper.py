from models import Film
from .common import fields_to_copy

FILM_FIELDS = ("title", "release_date", "synopsis")


def film_info_to_film(info) -> Film:
    return Film(
        title=info.title,
        release_date=info.release_date,
        synopsis=info.synopsis,
    )


def update_film_from_film_info(info, film: Film, partial: bool = False) -> Film:
    """Copies *info* onto *film*; id, directors and cast are left alone."""
    for name in fields_to_copy(info, FILM_FIELDS, partial):
        setattr(film, name, getattr(info, name))
    return film
